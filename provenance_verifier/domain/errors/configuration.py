"""Configuration update errors.

Authorization failures and validation failures share a shape but use
distinct codes so callers can separate "not allowed" from "bad input".
"""

from __future__ import annotations

from provenance_verifier.domain.errors.codes import VerifierErrorCode
from provenance_verifier.domain.exceptions import ProvenanceError


class ConfigurationUpdateDeniedError(ProvenanceError):
    """Error raised when a non-owner attempts a configuration update.

    Attributes:
        caller: Identity of the rejected caller.
    """

    code = VerifierErrorCode.NOT_AUTHORIZED

    def __init__(self, caller: str) -> None:
        """Initialize ConfigurationUpdateDeniedError.

        Args:
            caller: Identity of the rejected caller.
        """
        self.caller = caller
        super().__init__(f"Caller {caller} is not the configured owner")


class InvalidThresholdError(ProvenanceError):
    """Error raised when a verification threshold is outside 1..100.

    Attributes:
        value: The rejected threshold.
    """

    code = VerifierErrorCode.INVALID_THRESHOLD

    def __init__(self, value: int) -> None:
        """Initialize InvalidThresholdError.

        Args:
            value: The rejected threshold.
        """
        self.value = value
        super().__init__(f"Verification threshold must be in 1..100, got {value}")
