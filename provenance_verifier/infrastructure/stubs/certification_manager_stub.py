"""Certification manager stub for testing and local wiring."""

from __future__ import annotations

from collections.abc import Iterable

from provenance_verifier.application.ports.certification_manager import (
    CertificationManagerProtocol,
)
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.provenance import (
    Certification,
    ProvenanceSource,
)

CERTIFICATIONS_NOT_FOUND_CODE = 102


class CertificationManagerStub(CertificationManagerProtocol):
    """In-memory certification manager.

    A product with no injected certification set is unknown to the manager
    and fails with the not-found code. An explicitly injected empty set is
    returned as-is so the certification rule can judge it.

    Attributes:
        calls: Product ids requested, in call order.
    """

    def __init__(self, not_found_code: int = CERTIFICATIONS_NOT_FOUND_CODE) -> None:
        self._certifications: dict[int, tuple[Certification, ...]] = {}
        self._failures: dict[int, int] = {}
        self._not_found_code = not_found_code
        self.calls: list[int] = []

    def set_certifications(
        self, product_id: int, certifications: Iterable[Certification]
    ) -> None:
        """Replace the certification set of a product."""
        self._certifications[product_id] = tuple(certifications)

    def set_failure(self, product_id: int, code: int) -> None:
        """Make reads for a product fail with a specific code."""
        self._failures[product_id] = code

    async def get_certifications(self, product_id: int) -> tuple[Certification, ...]:
        """Get the certification set of a product.

        Raises:
            SourceFailureError: If a failure is injected or the id is unknown.
        """
        self.calls.append(product_id)
        if product_id in self._failures:
            raise SourceFailureError(
                ProvenanceSource.CERTIFICATION_MANAGER,
                product_id,
                self._failures[product_id],
            )
        if product_id not in self._certifications:
            raise SourceFailureError(
                ProvenanceSource.CERTIFICATION_MANAGER,
                product_id,
                self._not_found_code,
            )
        return self._certifications[product_id]
