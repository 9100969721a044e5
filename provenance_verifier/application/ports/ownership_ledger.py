"""Ownership ledger port.

The ownership history is read during verification for parity with the audit
path, but no compliance rule consumes it.
"""

from __future__ import annotations

from typing import Protocol

from provenance_verifier.domain.models.provenance import OwnershipRecord


class OwnershipLedgerProtocol(Protocol):
    """Read-only access to the ownership transfer ledger."""

    async def get_ownership_history(
        self, product_id: int
    ) -> tuple[OwnershipRecord, ...]:
        """Get the ownership transfers of a product, oldest first.

        Raises:
            SourceFailureError: If the ledger has no history for the product.
        """
        ...
