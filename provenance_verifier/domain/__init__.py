"""
Domain layer - Pure business logic for provenance verification.

This layer contains:
- Source records (Product, Certification, Batch, ProvenanceEvent, OwnershipRecord)
- Verification records and the call context
- Compliance rules
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from provenance_verifier.domain.exceptions import ProvenanceError

__all__: list[str] = ["ProvenanceError"]
