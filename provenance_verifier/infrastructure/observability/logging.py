"""structlog setup for the provenance verifier.

Production renders one JSON object per line; any other environment gets
the colored console renderer. Every entry carries an ISO timestamp, the
level and, inside a correlation scope, the correlation ID:

    {"event": "verification_recorded", "level": "info",
     "timestamp": "...", "correlation_id": "...",
     "service": "ProvenanceVerificationService", "product_id": 1, ...}

Environment:
    LOG_LEVEL: minimum level name (default INFO; unknown names mean INFO)
    PROVENANCE_ENVIRONMENT: used when no environment is passed
        (default "production")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from provenance_verifier.application.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
ENVIRONMENT_ENV = "PROVENANCE_ENVIRONMENT"
PRODUCTION = "production"


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _renderer(environment: str) -> Processor:
    if environment == PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_structlog(environment: str | None = None) -> None:
    """Configure structlog once at startup.

    Args:
        environment: "production" for JSON, anything else for the console.
            Read from PROVENANCE_ENVIRONMENT when omitted.
    """
    environment = environment or os.getenv(ENVIRONMENT_ENV, PRODUCTION)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            cast(Processor, correlation_id_processor),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _renderer(environment),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_from_env()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
