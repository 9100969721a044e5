"""Configuration module for the provenance verifier.

Available Configurations:
- VerifierConfig: Threshold, event limit and configuration owner
"""

from provenance_verifier.config.verifier_config import (
    DEFAULT_VERIFIER_CONFIG,
    MAX_VERIFICATION_THRESHOLD,
    MIN_VERIFICATION_THRESHOLD,
    TEST_VERIFIER_CONFIG,
    VerifierConfig,
    is_valid_threshold,
)

__all__ = [
    "VerifierConfig",
    "DEFAULT_VERIFIER_CONFIG",
    "TEST_VERIFIER_CONFIG",
    "MIN_VERIFICATION_THRESHOLD",
    "MAX_VERIFICATION_THRESHOLD",
    "is_valid_threshold",
]
