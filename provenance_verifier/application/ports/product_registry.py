"""Product registry port - read contract of the product registry.

The verifier only reads from the product registry; it never registers or
mutates records there. Failures are reported by raising SourceFailureError
with the source's own code, which the verifier propagates unchanged.
"""

from __future__ import annotations

from typing import Protocol

from provenance_verifier.domain.models.provenance import Product


class ProductRegistryProtocol(Protocol):
    """Read-only access to the product registry."""

    async def get_product(self, product_id: int) -> Product:
        """Read the product registry's record for a product.

        Args:
            product_id: Positive integer identity of the product.

        Returns:
            The registered product, including its validity flag.

        Raises:
            SourceFailureError: If the source cannot return a record.
        """
        ...
