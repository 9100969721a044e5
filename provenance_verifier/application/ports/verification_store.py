"""Verification store port.

The verification store is the only state the verifier owns:
- A mapping from product identity to the latest Verification
- The process-wide VerifierConfig

Constraints:
- Writes are insert-or-overwrite; no history of past verifications is kept
- No operation removes a verification record
- Configuration updates are check-and-write atomic (see update_configuration)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from provenance_verifier.config.verifier_config import VerifierConfig
from provenance_verifier.domain.models.verification import Verification

ConfigurationTransform = Callable[[VerifierConfig], VerifierConfig]


class VerificationStoreProtocol(ABC):
    """Abstract interface for verification and configuration storage.

    For testing and single-process deployments:
        Use InMemoryVerificationStore from
        provenance_verifier/infrastructure/adapters/persistence/
    """

    @abstractmethod
    async def get_verification(self, product_id: int) -> Verification | None:
        """Get the latest verification for a product.

        Args:
            product_id: Product identity.

        Returns:
            The recorded Verification, or None if never verified.
        """
        ...

    @abstractmethod
    async def save_verification(
        self, product_id: int, verification: Verification
    ) -> None:
        """Record a verification, overwriting any prior record.

        Args:
            product_id: Product identity.
            verification: The verification to store.
        """
        ...

    @abstractmethod
    async def get_configuration(self) -> VerifierConfig:
        """Get the current configuration."""
        ...

    @abstractmethod
    async def update_configuration(
        self, transform: ConfigurationTransform
    ) -> VerifierConfig:
        """Atomically replace the configuration.

        The transform receives the current configuration and returns the
        replacement. It runs under the store's write boundary, so checks it
        performs cannot race with the write. If it raises, nothing is written
        and the exception propagates.

        Args:
            transform: Function from current to new configuration.

        Returns:
            The stored configuration.
        """
        ...
