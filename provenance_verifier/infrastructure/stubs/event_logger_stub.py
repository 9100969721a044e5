"""Event logger stub for testing and local wiring."""

from __future__ import annotations

from collections.abc import Iterable

from provenance_verifier.application.ports.event_logger import EventLoggerProtocol
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.provenance import (
    ProvenanceEvent,
    ProvenanceSource,
)

EVENTS_NOT_FOUND_CODE = 104


class EventLoggerStub(EventLoggerProtocol):
    """In-memory event logger.

    Events appended with log_event keep their logging order.

    Attributes:
        calls: Product ids requested, in call order.
    """

    def __init__(self, not_found_code: int = EVENTS_NOT_FOUND_CODE) -> None:
        self._events: dict[int, list[ProvenanceEvent]] = {}
        self._failures: dict[int, int] = {}
        self._not_found_code = not_found_code
        self.calls: list[int] = []

    def set_events(self, product_id: int, events: Iterable[ProvenanceEvent]) -> None:
        """Replace the event sequence of a product."""
        self._events[product_id] = list(events)

    def log_event(self, product_id: int, event: ProvenanceEvent) -> None:
        """Append one event to a product's sequence."""
        self._events.setdefault(product_id, []).append(event)

    def set_failure(self, product_id: int, code: int) -> None:
        """Make reads for a product fail with a specific code."""
        self._failures[product_id] = code

    async def get_events(self, product_id: int) -> tuple[ProvenanceEvent, ...]:
        """Get the events of a product in logging order.

        Raises:
            SourceFailureError: If a failure is injected or the id is unknown.
        """
        self.calls.append(product_id)
        if product_id in self._failures:
            raise SourceFailureError(
                ProvenanceSource.EVENT_LOGGER, product_id, self._failures[product_id]
            )
        if product_id not in self._events:
            raise SourceFailureError(
                ProvenanceSource.EVENT_LOGGER, product_id, self._not_found_code
            )
        return tuple(self._events[product_id])
