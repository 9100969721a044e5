"""In-memory verification store.

Holds the product id -> Verification mapping and the current
VerifierConfig for a single process. An asyncio.Lock forms the write
boundary, so configuration check-and-write sequences cannot interleave.
"""

from __future__ import annotations

import asyncio

from provenance_verifier.application.ports.verification_store import (
    ConfigurationTransform,
    VerificationStoreProtocol,
)
from provenance_verifier.config.verifier_config import (
    DEFAULT_VERIFIER_CONFIG,
    VerifierConfig,
)
from provenance_verifier.domain.models.verification import Verification


class InMemoryVerificationStore(VerificationStoreProtocol):
    """Process-local implementation of VerificationStoreProtocol.

    Attributes:
        _verifications: Latest verification per product id.
        _config: Current configuration.
        _lock: Async lock guarding writes.
    """

    def __init__(self, config: VerifierConfig = DEFAULT_VERIFIER_CONFIG) -> None:
        """Initialize an empty store.

        Args:
            config: Initial configuration.
        """
        self._verifications: dict[int, Verification] = {}
        self._config = config
        self._lock = asyncio.Lock()

    async def get_verification(self, product_id: int) -> Verification | None:
        return self._verifications.get(product_id)

    async def save_verification(
        self, product_id: int, verification: Verification
    ) -> None:
        async with self._lock:
            self._verifications[product_id] = verification

    async def get_configuration(self) -> VerifierConfig:
        return self._config

    async def update_configuration(
        self, transform: ConfigurationTransform
    ) -> VerifierConfig:
        async with self._lock:
            updated = transform(self._config)
            self._config = updated
            return updated

    # Test helpers

    def verification_count(self) -> int:
        """Number of products with a recorded verification."""
        return len(self._verifications)

    def clear(self, config: VerifierConfig = DEFAULT_VERIFIER_CONFIG) -> None:
        """Drop all verifications and restore a configuration."""
        self._verifications.clear()
        self._config = config
