"""Verifier configuration.

Process-wide configuration with environment variable overrides.
At runtime the current value lives in the verification store and is only
replaced through the owner-gated threshold setter.

Environment Variables:
- PROVENANCE_VERIFICATION_THRESHOLD: Acceptance threshold 1..100 (default: 50)
- PROVENANCE_MAX_EVENTS_PER_PRODUCT: Max events accepted per product (default: 100)
- PROVENANCE_CONTRACT_OWNER: Identity allowed to change configuration (default: ST1TEST)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

MIN_VERIFICATION_THRESHOLD = 1
MAX_VERIFICATION_THRESHOLD = 100


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def is_valid_threshold(value: int) -> bool:
    """Check a verification threshold against its bounds."""
    return MIN_VERIFICATION_THRESHOLD <= value <= MAX_VERIFICATION_THRESHOLD


@dataclass(frozen=True)
class VerifierConfig:
    """Configuration for the provenance verifier.

    Attributes:
        verification_threshold: Consumer-defined acceptance threshold (1..100).
            Stored and access-controlled; no compliance rule reads it.
        max_events_per_product: Upper bound on a product's event sequence.
        contract_owner: Identity permitted to update the configuration.
    """

    verification_threshold: int = 50
    max_events_per_product: int = 100
    contract_owner: str = "ST1TEST"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not is_valid_threshold(self.verification_threshold):
            raise ValueError(
                f"verification_threshold must be in "
                f"{MIN_VERIFICATION_THRESHOLD}..{MAX_VERIFICATION_THRESHOLD}, "
                f"got {self.verification_threshold}"
            )
        if self.max_events_per_product < 1:
            raise ValueError(
                f"max_events_per_product must be positive, "
                f"got {self.max_events_per_product}"
            )
        if not self.contract_owner:
            raise ValueError("contract_owner must be a non-empty identity")

    def with_threshold(self, verification_threshold: int) -> VerifierConfig:
        """Return a copy with a new verification threshold."""
        return replace(self, verification_threshold=verification_threshold)

    @classmethod
    def from_environment(cls) -> VerifierConfig:
        """Create config from environment variables with defaults.

        Returns:
            VerifierConfig with values from environment or defaults.
        """
        return cls(
            verification_threshold=_get_int_env(
                "PROVENANCE_VERIFICATION_THRESHOLD", 50
            ),
            max_events_per_product=_get_int_env(
                "PROVENANCE_MAX_EVENTS_PER_PRODUCT", 100
            ),
            contract_owner=os.environ.get("PROVENANCE_CONTRACT_OWNER") or "ST1TEST",
        )


# Default production config
DEFAULT_VERIFIER_CONFIG = VerifierConfig()

# Testing config with a small event limit
TEST_VERIFIER_CONFIG = VerifierConfig(
    verification_threshold=50,
    max_events_per_product=3,
    contract_owner="ST1TEST",
)
