"""Persistence adapters for verifier-owned state."""

from provenance_verifier.infrastructure.adapters.persistence.in_memory_verification_store import (
    InMemoryVerificationStore,
)

__all__ = ["InMemoryVerificationStore"]
