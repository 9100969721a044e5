"""Correlation IDs tying together the log lines of one verifier call.

A verification touches five sources, the rules and the store; every line
it logs carries the same correlation ID. The ID lives in a contextvar, so
concurrent calls on the same event loop never see each other's ID.

Usage:
    with correlation_scope() as correlation_id:
        await service.verify_provenance(product_id, context)

    # structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Return a fresh UUID4 string."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Current correlation ID, or "" outside any scope."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under a correlation ID and restore the previous one after.

    An ID already set by the caller is reused, so nested scopes (an adapter
    call inside a traced request) keep the outer ID.

    Args:
        correlation_id: Explicit ID to use. Generated when omitted and no
            ID is active.

    Yields:
        The correlation ID in effect inside the block.
    """
    active = correlation_id or get_correlation_id() or generate_correlation_id()
    token = _correlation_id.set(active)
    try:
        yield active
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding the active correlation ID, if any."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
