"""Product registry stub for testing and local wiring.

In-memory implementation of ProductRegistryProtocol. Products are
injected by id; unknown ids fail with the registry's not-found code.
"""

from __future__ import annotations

from provenance_verifier.application.ports.product_registry import (
    ProductRegistryProtocol,
)
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.provenance import Product, ProvenanceSource

PRODUCT_NOT_FOUND_CODE = 108


class ProductRegistryStub(ProductRegistryProtocol):
    """In-memory product registry.

    Attributes:
        calls: Product ids requested, in call order.

    Example:
        ```python
        registry = ProductRegistryStub()
        registry.add_product(Product(1, "Coffee", "Ethiopia", True))
        product = await registry.get_product(1)
        ```
    """

    def __init__(self, not_found_code: int = PRODUCT_NOT_FOUND_CODE) -> None:
        self._products: dict[int, Product] = {}
        self._failures: dict[int, int] = {}
        self._not_found_code = not_found_code
        self.calls: list[int] = []

    def add_product(self, product: Product) -> None:
        """Register a product under its own id."""
        self._products[product.product_id] = product

    def set_failure(self, product_id: int, code: int) -> None:
        """Make reads for a product fail with a specific code."""
        self._failures[product_id] = code

    async def get_product(self, product_id: int) -> Product:
        """Get a product from memory.

        Raises:
            SourceFailureError: If a failure is injected or the id is unknown.
        """
        self.calls.append(product_id)
        if product_id in self._failures:
            raise SourceFailureError(
                ProvenanceSource.PRODUCT_REGISTRY, product_id, self._failures[product_id]
            )
        product = self._products.get(product_id)
        if product is None:
            raise SourceFailureError(
                ProvenanceSource.PRODUCT_REGISTRY, product_id, self._not_found_code
            )
        return product
