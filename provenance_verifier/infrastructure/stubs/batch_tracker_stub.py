"""Batch tracker stub for testing and local wiring."""

from __future__ import annotations

from provenance_verifier.application.ports.batch_tracker import BatchTrackerProtocol
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.provenance import Batch, ProvenanceSource

BATCH_NOT_FOUND_CODE = 109


class BatchTrackerStub(BatchTrackerProtocol):
    """In-memory batch tracker keyed by product id.

    Attributes:
        calls: Product ids requested, in call order.
    """

    def __init__(self, not_found_code: int = BATCH_NOT_FOUND_CODE) -> None:
        self._batches: dict[int, Batch] = {}
        self._failures: dict[int, int] = {}
        self._not_found_code = not_found_code
        self.calls: list[int] = []

    def set_batch(self, product_id: int, batch: Batch) -> None:
        """Attach a batch to a product."""
        self._batches[product_id] = batch

    def set_failure(self, product_id: int, code: int) -> None:
        """Make reads for a product fail with a specific code."""
        self._failures[product_id] = code

    async def get_batch(self, product_id: int) -> Batch:
        """Get the batch of a product.

        Raises:
            SourceFailureError: If a failure is injected or no batch is known.
        """
        self.calls.append(product_id)
        code = self._failures.get(product_id)
        if code is None and product_id not in self._batches:
            code = self._not_found_code
        if code is not None:
            raise SourceFailureError(ProvenanceSource.BATCH_TRACKER, product_id, code)
        return self._batches[product_id]
