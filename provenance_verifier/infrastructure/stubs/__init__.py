"""In-memory stubs of the external provenance sources.

Used by tests and by the default composition root.
"""

from provenance_verifier.infrastructure.stubs.batch_tracker_stub import (
    BATCH_NOT_FOUND_CODE,
    BatchTrackerStub,
)
from provenance_verifier.infrastructure.stubs.certification_manager_stub import (
    CERTIFICATIONS_NOT_FOUND_CODE,
    CertificationManagerStub,
)
from provenance_verifier.infrastructure.stubs.event_logger_stub import (
    EVENTS_NOT_FOUND_CODE,
    EventLoggerStub,
)
from provenance_verifier.infrastructure.stubs.ownership_ledger_stub import (
    OWNERSHIP_NOT_FOUND_CODE,
    OwnershipLedgerStub,
)
from provenance_verifier.infrastructure.stubs.product_registry_stub import (
    PRODUCT_NOT_FOUND_CODE,
    ProductRegistryStub,
)

__all__ = [
    "BATCH_NOT_FOUND_CODE",
    "CERTIFICATIONS_NOT_FOUND_CODE",
    "EVENTS_NOT_FOUND_CODE",
    "OWNERSHIP_NOT_FOUND_CODE",
    "PRODUCT_NOT_FOUND_CODE",
    "BatchTrackerStub",
    "CertificationManagerStub",
    "EventLoggerStub",
    "OwnershipLedgerStub",
    "ProductRegistryStub",
]
