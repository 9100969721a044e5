"""Domain models for provenance verification."""

from provenance_verifier.domain.models.audit_trail import AuditTrail, SourceOutcome
from provenance_verifier.domain.models.provenance import (
    Batch,
    Certification,
    OwnershipRecord,
    Product,
    ProvenanceEvent,
    ProvenanceSource,
)
from provenance_verifier.domain.models.verification import (
    VERIFIED_STATUS,
    CallContext,
    Verification,
    VerificationBundle,
)

__all__: list[str] = [
    "AuditTrail",
    "Batch",
    "CallContext",
    "Certification",
    "OwnershipRecord",
    "Product",
    "ProvenanceEvent",
    "ProvenanceSource",
    "SourceOutcome",
    "VERIFIED_STATUS",
    "Verification",
    "VerificationBundle",
]
