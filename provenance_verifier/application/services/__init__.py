"""Application services - use cases of the provenance verifier."""

from provenance_verifier.application.services.audit_trail_service import (
    AuditTrailService,
)
from provenance_verifier.application.services.provenance_verification_service import (
    ProvenanceVerificationService,
)
from provenance_verifier.application.services.verifier_configuration_service import (
    VerifierConfigurationService,
)

__all__: list[str] = [
    "AuditTrailService",
    "ProvenanceVerificationService",
    "VerifierConfigurationService",
]
