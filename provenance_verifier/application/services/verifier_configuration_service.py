"""Verifier configuration service.

Owner-gated mutation of the process-wide configuration.

Constraints:
- Only the configured contract owner may update the threshold
- The threshold must lie in 1..100
- Authorization, validation and write happen in one atomic step
- A rejected update leaves the stored configuration unchanged
"""

from __future__ import annotations

from provenance_verifier.application.ports.verification_store import (
    VerificationStoreProtocol,
)
from provenance_verifier.application.services.base import LoggingMixin
from provenance_verifier.config.verifier_config import (
    VerifierConfig,
    is_valid_threshold,
)
from provenance_verifier.domain.errors.configuration import (
    ConfigurationUpdateDeniedError,
    InvalidThresholdError,
)
from provenance_verifier.domain.models.verification import CallContext


class VerifierConfigurationService(LoggingMixin):
    """Reads and updates verifier configuration.

    The verification threshold is stored and access-controlled, but no
    compliance rule reads it; it is reserved for consumers.
    """

    component = "configuration"

    def __init__(self, verification_store: VerificationStoreProtocol) -> None:
        """Initialize the service.

        Args:
            verification_store: Store holding the configuration.
        """
        self._verification_store = verification_store
        self._init_logger()

    async def get_configuration(self) -> VerifierConfig:
        """Get the current configuration."""
        return await self._verification_store.get_configuration()

    async def set_verification_threshold(
        self, new_threshold: int, context: CallContext
    ) -> bool:
        """Set the verification threshold.

        Args:
            new_threshold: Proposed threshold, must be in 1..100.
            context: Caller identity and current logical height.

        Returns:
            True once the threshold is stored.

        Raises:
            ConfigurationUpdateDeniedError: If the caller is not the owner.
            InvalidThresholdError: If the threshold is out of bounds.
        """
        log = self._log_operation(
            "set_verification_threshold",
            caller=context.caller,
            new_threshold=new_threshold,
        )

        def _apply(current: VerifierConfig) -> VerifierConfig:
            if context.caller != current.contract_owner:
                raise ConfigurationUpdateDeniedError(context.caller)
            if not is_valid_threshold(new_threshold):
                raise InvalidThresholdError(new_threshold)
            return current.with_threshold(new_threshold)

        try:
            await self._verification_store.update_configuration(_apply)
        except ConfigurationUpdateDeniedError:
            log.warning("threshold_update_denied")
            raise
        except InvalidThresholdError:
            log.warning("threshold_update_rejected")
            raise

        log.info("threshold_updated")
        return True
