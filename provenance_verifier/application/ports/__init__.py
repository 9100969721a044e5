"""Application ports - abstract interfaces for external collaborators.

Source ports (read only):
- ProductRegistryProtocol
- CertificationManagerProtocol
- BatchTrackerProtocol
- EventLoggerProtocol
- OwnershipLedgerProtocol

Owned state:
- VerificationStoreProtocol
"""

from provenance_verifier.application.ports.batch_tracker import BatchTrackerProtocol
from provenance_verifier.application.ports.certification_manager import (
    CertificationManagerProtocol,
)
from provenance_verifier.application.ports.event_logger import EventLoggerProtocol
from provenance_verifier.application.ports.ownership_ledger import (
    OwnershipLedgerProtocol,
)
from provenance_verifier.application.ports.product_registry import (
    ProductRegistryProtocol,
)
from provenance_verifier.application.ports.verification_store import (
    ConfigurationTransform,
    VerificationStoreProtocol,
)

__all__: list[str] = [
    "BatchTrackerProtocol",
    "CertificationManagerProtocol",
    "ConfigurationTransform",
    "EventLoggerProtocol",
    "OwnershipLedgerProtocol",
    "ProductRegistryProtocol",
    "VerificationStoreProtocol",
]
