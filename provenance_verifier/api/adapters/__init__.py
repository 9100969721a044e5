"""API adapters - domain to response model conversion."""

from provenance_verifier.api.adapters.provenance import (
    ProvenanceResponseAdapter,
    ProvenanceVerifierAdapter,
)

__all__ = ["ProvenanceResponseAdapter", "ProvenanceVerifierAdapter"]
