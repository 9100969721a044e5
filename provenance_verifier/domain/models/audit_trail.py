"""Audit trail model.

The audit trail gathers the raw outcome of each source independently.
A failing source never aborts the others: each field reports its own
success value or failure code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from provenance_verifier.domain.models.provenance import (
    Batch,
    Certification,
    OwnershipRecord,
    Product,
    ProvenanceEvent,
    ProvenanceSource,
)

T = TypeVar("T")


@dataclass(frozen=True)
class SourceOutcome(Generic[T]):
    """Outcome of reading a single source.

    Exactly one of ``value`` or ``error_code`` is set.

    Attributes:
        source: The source that was read.
        value: The record returned on success.
        error_code: The source's opaque failure code on failure.
    """

    source: ProvenanceSource
    value: T | None = None
    error_code: int | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error_code is None):
            raise ValueError("SourceOutcome requires exactly one of value or error_code")

    @property
    def ok(self) -> bool:
        """True when the source returned a record."""
        return self.error_code is None

    @classmethod
    def success(cls, source: ProvenanceSource, value: T) -> SourceOutcome[T]:
        """Create a successful outcome."""
        return cls(source=source, value=value)

    @classmethod
    def failure(cls, source: ProvenanceSource, error_code: int) -> SourceOutcome[T]:
        """Create a failed outcome carrying the source's code."""
        return cls(source=source, error_code=error_code)


@dataclass(frozen=True)
class AuditTrail:
    """Independent per-source outcomes for one product.

    Attributes:
        product_id: Identity of the audited product.
        product: Product registry outcome.
        certifications: Certification manager outcome.
        batch: Batch tracker outcome.
        events: Event logger outcome.
        ownership_history: Ownership ledger outcome, None when not requested.
    """

    product_id: int
    product: SourceOutcome[Product]
    certifications: SourceOutcome[tuple[Certification, ...]]
    batch: SourceOutcome[Batch]
    events: SourceOutcome[tuple[ProvenanceEvent, ...]]
    ownership_history: SourceOutcome[tuple[OwnershipRecord, ...]] | None = None

    @property
    def outcomes(self) -> tuple[SourceOutcome[Any], ...]:
        """All collected outcomes in source order."""
        collected: list[SourceOutcome[Any]] = [
            self.product,
            self.certifications,
            self.batch,
            self.events,
        ]
        if self.ownership_history is not None:
            collected.append(self.ownership_history)
        return tuple(collected)

    @property
    def degraded_sources(self) -> tuple[ProvenanceSource, ...]:
        """Sources whose read failed."""
        return tuple(o.source for o in self.outcomes if not o.ok)
