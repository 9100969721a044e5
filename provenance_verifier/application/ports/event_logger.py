"""Event logger port.

Events are returned in the order the logger recorded them.
"""

from __future__ import annotations

from typing import Protocol

from provenance_verifier.domain.models.provenance import ProvenanceEvent


class EventLoggerProtocol(Protocol):
    """Read-only access to the supply-chain event logger."""

    async def get_events(self, product_id: int) -> tuple[ProvenanceEvent, ...]:
        """Get the logged events of a product.

        Args:
            product_id: Positive integer identity of the product.

        Returns:
            Events in logging order. May be empty; emptiness is judged by
            the event rule, not by the source.

        Raises:
            SourceFailureError: If the logger cannot return events.
        """
        ...
