"""Source failure errors.

Raised by source adapters when an external authoritative source cannot
return a record. The failure code belongs to the source and is never
translated by the verifier.
"""

from __future__ import annotations

from provenance_verifier.domain.exceptions import ProvenanceError
from provenance_verifier.domain.models.provenance import ProvenanceSource


class SourceFailureError(ProvenanceError):
    """Error raised when an external source returns a failure.

    Attributes:
        source: The source that failed.
        product_id: The product identity that was requested.
        code: The source-defined failure code, surfaced verbatim.

    Example:
        >>> error = SourceFailureError(
        ...     source=ProvenanceSource.PRODUCT_REGISTRY,
        ...     product_id=2,
        ...     code=108,
        ... )
        >>> error.code
        108
    """

    def __init__(
        self,
        source: ProvenanceSource,
        product_id: int,
        code: int,
        message: str | None = None,
    ) -> None:
        """Initialize SourceFailureError.

        Args:
            source: The source that failed.
            product_id: The product identity that was requested.
            code: The source-defined failure code.
            message: Optional custom error message.
        """
        self.source = source
        self.product_id = product_id
        self.code = code
        if message is None:
            message = (
                f"{source.value} failed for product {product_id} with code {code}"
            )
        super().__init__(message)
