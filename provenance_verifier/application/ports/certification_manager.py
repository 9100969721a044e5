"""Certification manager port.

Certifications are listed with their own validity flag; deciding whether
the set as a whole is acceptable belongs to the certification rule.
"""

from __future__ import annotations

from typing import Protocol

from provenance_verifier.domain.models.provenance import Certification


class CertificationManagerProtocol(Protocol):
    """Read-only access to the certification manager."""

    async def get_certifications(self, product_id: int) -> tuple[Certification, ...]:
        """Get every certification held for a product.

        Raises:
            SourceFailureError: If the manager has nothing on file.
        """
        ...
