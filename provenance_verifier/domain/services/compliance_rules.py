"""Compliance rules domain service.

Pure predicates over each source record type, plus the ordered chain that
applies them. The chain stops at the first violated rule, so a record set
failing several rules always reports the earliest one.

Rule order (observable, must not change):
1. Product rule       -> InvalidProductError
2. Certification rule -> InvalidCertificationError
3. Batch rule         -> InvalidBatchError
4. Event rule         -> InvalidEventsError
"""

from __future__ import annotations

from collections.abc import Sequence

from provenance_verifier.domain.errors.compliance import (
    InvalidBatchError,
    InvalidCertificationError,
    InvalidEventsError,
    InvalidProductError,
)
from provenance_verifier.domain.models.provenance import (
    Batch,
    Certification,
    Product,
    ProvenanceEvent,
)


def is_product_verifiable(product: Product) -> bool:
    """Product must be valid with a non-empty name and origin."""
    return product.valid and len(product.name) > 0 and len(product.origin) > 0


def are_certifications_verifiable(certifications: Sequence[Certification]) -> bool:
    """Certification set must be non-empty and every member valid."""
    return len(certifications) > 0 and all(c.valid for c in certifications)


def is_batch_verifiable(batch: Batch) -> bool:
    """Batch must be compliant with a positive quantity."""
    return batch.compliant and batch.quantity > 0


def are_events_verifiable(
    events: Sequence[ProvenanceEvent], max_events_per_product: int
) -> bool:
    """Event sequence must be non-empty, bounded, and fully compliant."""
    return (
        len(events) > 0
        and len(events) <= max_events_per_product
        and all(e.compliant for e in events)
    )


def check_product(product_id: int, product: Product) -> None:
    """Apply the product rule.

    Raises:
        InvalidProductError: If the product is not verifiable.
    """
    if is_product_verifiable(product):
        return
    if not product.valid:
        reason = "product is flagged invalid by the registry"
    elif not product.name:
        reason = "product name is empty"
    else:
        reason = "product origin is empty"
    raise InvalidProductError(product_id, reason)


def check_certifications(
    product_id: int, certifications: Sequence[Certification]
) -> None:
    """Apply the certification rule.

    Raises:
        InvalidCertificationError: If no certification exists or any is invalid.
    """
    if are_certifications_verifiable(certifications):
        return
    if not certifications:
        raise InvalidCertificationError(product_id, "no certifications on record")
    invalid = [c.certification_type for c in certifications if not c.valid]
    raise InvalidCertificationError(
        product_id, f"invalid certifications: {', '.join(invalid)}"
    )


def check_batch(product_id: int, batch: Batch) -> None:
    """Apply the batch rule.

    Raises:
        InvalidBatchError: If the batch is non-compliant or empty.
    """
    if is_batch_verifiable(batch):
        return
    if not batch.compliant:
        reason = f"batch {batch.batch_id} is not compliant"
    else:
        reason = f"batch {batch.batch_id} has zero quantity"
    raise InvalidBatchError(product_id, reason)


def check_events(
    product_id: int,
    events: Sequence[ProvenanceEvent],
    max_events_per_product: int,
) -> None:
    """Apply the event rule.

    Raises:
        InvalidEventsError: If there are no events, too many, or any non-compliant.
    """
    if are_events_verifiable(events, max_events_per_product):
        return
    if not events:
        reason = "no events on record"
    elif len(events) > max_events_per_product:
        reason = f"{len(events)} events exceeds limit of {max_events_per_product}"
    else:
        reason = "one or more events are not compliant"
    raise InvalidEventsError(product_id, reason)


def evaluate_compliance(
    product_id: int,
    product: Product,
    certifications: Sequence[Certification],
    batch: Batch,
    events: Sequence[ProvenanceEvent],
    max_events_per_product: int,
) -> None:
    """Apply every compliance rule in order, stopping at the first failure.

    Args:
        product_id: Identity of the product under verification.
        product: Product record.
        certifications: Certification set.
        batch: Batch record.
        events: Event sequence.
        max_events_per_product: Upper bound on the event sequence length.

    Raises:
        ComplianceRuleViolationError: The first violated rule's error.
    """
    check_product(product_id, product)
    check_certifications(product_id, certifications)
    check_batch(product_id, batch)
    check_events(product_id, events, max_events_per_product)
