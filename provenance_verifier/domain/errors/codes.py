"""Numeric error codes defined by the verifier core.

Source adapters define their own codes, which are opaque to the core and
propagated unchanged. The codes below identify failures the core itself
detects.
"""

from enum import IntEnum


class VerifierErrorCode(IntEnum):
    """Core-defined failure codes."""

    NOT_AUTHORIZED = 100
    INVALID_PRODUCT = 101
    INVALID_BATCH = 105
    INVALID_THRESHOLD = 106
    INVALID_EVENTS = 111
    INVALID_CERTIFICATION = 112
