"""Observability infrastructure for structured logging.

Usage:
    from provenance_verifier.infrastructure.observability import configure_structlog

    # At startup
    configure_structlog(environment="production")
"""

from provenance_verifier.infrastructure.observability.logging import (
    configure_structlog,
)

__all__: list[str] = [
    "configure_structlog",
]
