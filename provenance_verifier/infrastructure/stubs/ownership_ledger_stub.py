"""Ownership ledger stub for testing and local wiring."""

from __future__ import annotations

from provenance_verifier.application.ports.ownership_ledger import (
    OwnershipLedgerProtocol,
)
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.provenance import (
    OwnershipRecord,
    ProvenanceSource,
)

OWNERSHIP_NOT_FOUND_CODE = 110


class OwnershipLedgerStub(OwnershipLedgerProtocol):
    """In-memory ownership transfer ledger.

    Attributes:
        calls: Product ids requested, in call order.
    """

    def __init__(self, not_found_code: int = OWNERSHIP_NOT_FOUND_CODE) -> None:
        self._history: dict[int, list[OwnershipRecord]] = {}
        self._failures: dict[int, int] = {}
        self._not_found_code = not_found_code
        self.calls: list[int] = []

    def record_transfer(self, product_id: int, owner: str, timestamp: int) -> None:
        """Append an ownership transfer to a product's history."""
        self._history.setdefault(product_id, []).append(
            OwnershipRecord(owner=owner, timestamp=timestamp)
        )

    def set_failure(self, product_id: int, code: int) -> None:
        """Make reads for a product fail with a specific code."""
        self._failures[product_id] = code

    async def get_ownership_history(
        self, product_id: int
    ) -> tuple[OwnershipRecord, ...]:
        """Get the ownership history of a product, oldest first.

        Raises:
            SourceFailureError: If a failure is injected or no history exists.
        """
        self.calls.append(product_id)
        if product_id in self._failures:
            raise SourceFailureError(
                ProvenanceSource.OWNERSHIP_LEDGER,
                product_id,
                self._failures[product_id],
            )
        if product_id not in self._history:
            raise SourceFailureError(
                ProvenanceSource.OWNERSHIP_LEDGER, product_id, self._not_found_code
            )
        return tuple(self._history[product_id])
