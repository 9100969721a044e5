"""Batch tracker port."""

from __future__ import annotations

from typing import Protocol

from provenance_verifier.domain.models.provenance import Batch


class BatchTrackerProtocol(Protocol):
    """Read-only access to the batch tracker."""

    async def get_batch(self, product_id: int) -> Batch:
        """Get the production batch a product belongs to."""
        ...
