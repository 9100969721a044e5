"""Unit tests for the compliance rules domain service.

Tests the per-record predicates and the ordered rule chain.
"""

from __future__ import annotations

import pytest

from provenance_verifier.domain.errors import (
    InvalidBatchError,
    InvalidCertificationError,
    InvalidEventsError,
    InvalidProductError,
    VerifierErrorCode,
)
from provenance_verifier.domain.models import (
    Batch,
    Certification,
    Product,
    ProvenanceEvent,
)
from provenance_verifier.domain.services.compliance_rules import (
    are_certifications_verifiable,
    are_events_verifiable,
    check_batch,
    check_certifications,
    check_events,
    check_product,
    evaluate_compliance,
    is_batch_verifiable,
    is_product_verifiable,
)

VALID_PRODUCT = Product(product_id=1, name="Coffee", origin="Ethiopia", valid=True)
ORGANIC = Certification(certification_type="Organic", issuer="ST2CERT", valid=True)
VALID_BATCH = Batch(batch_id=1, production_date=1000, quantity=500, compliant=True)
SHIPPED = ProvenanceEvent(event_type="Shipped", timestamp=90, compliant=True)


class TestProductRule:
    """Tests for the product predicate."""

    def test_valid_product_passes(self) -> None:
        assert is_product_verifiable(VALID_PRODUCT)
        check_product(1, VALID_PRODUCT)

    @pytest.mark.parametrize(
        "product",
        [
            Product(product_id=1, name="Coffee", origin="Ethiopia", valid=False),
            Product(product_id=1, name="", origin="Ethiopia", valid=True),
            Product(product_id=1, name="Coffee", origin="", valid=True),
        ],
        ids=["flagged-invalid", "empty-name", "empty-origin"],
    )
    def test_unverifiable_product_fails(self, product: Product) -> None:
        assert not is_product_verifiable(product)
        with pytest.raises(InvalidProductError) as exc_info:
            check_product(1, product)
        assert exc_info.value.code == VerifierErrorCode.INVALID_PRODUCT
        assert exc_info.value.product_id == 1

    def test_reason_names_empty_origin(self) -> None:
        product = Product(product_id=7, name="Tea", origin="", valid=True)
        with pytest.raises(InvalidProductError, match="origin is empty"):
            check_product(7, product)


class TestCertificationRule:
    """Tests for the certification predicate."""

    def test_all_valid_passes(self) -> None:
        fair_trade = Certification("FairTrade", "ST4CERT", True)
        assert are_certifications_verifiable((ORGANIC, fair_trade))

    def test_empty_set_fails(self) -> None:
        assert not are_certifications_verifiable(())
        with pytest.raises(InvalidCertificationError, match="no certifications"):
            check_certifications(1, ())

    def test_one_invalid_fails(self) -> None:
        revoked = Certification("FairTrade", "ST4CERT", False)
        with pytest.raises(InvalidCertificationError, match="FairTrade") as exc_info:
            check_certifications(1, (ORGANIC, revoked))
        assert exc_info.value.code == 112


class TestBatchRule:
    """Tests for the batch predicate."""

    def test_compliant_batch_passes(self) -> None:
        assert is_batch_verifiable(VALID_BATCH)

    def test_zero_quantity_fails(self) -> None:
        empty = Batch(batch_id=3, production_date=1000, quantity=0, compliant=True)
        with pytest.raises(InvalidBatchError, match="zero quantity") as exc_info:
            check_batch(1, empty)
        assert exc_info.value.code == 105

    def test_non_compliant_fails(self) -> None:
        tainted = Batch(batch_id=3, production_date=1000, quantity=10, compliant=False)
        with pytest.raises(InvalidBatchError, match="not compliant"):
            check_batch(1, tainted)


class TestEventRule:
    """Tests for the event predicate."""

    def test_single_compliant_event_passes(self) -> None:
        assert are_events_verifiable((SHIPPED,), max_events_per_product=100)

    def test_empty_sequence_fails(self) -> None:
        with pytest.raises(InvalidEventsError, match="no events") as exc_info:
            check_events(1, (), max_events_per_product=100)
        assert exc_info.value.code == 111

    def test_exactly_max_events_passes(self) -> None:
        events = (SHIPPED,) * 3
        assert are_events_verifiable(events, max_events_per_product=3)

    def test_more_than_max_events_fails(self) -> None:
        events = (SHIPPED,) * 4
        with pytest.raises(InvalidEventsError, match="exceeds limit of 3"):
            check_events(1, events, max_events_per_product=3)

    def test_non_compliant_event_fails(self) -> None:
        spoiled = ProvenanceEvent(event_type="Stored", timestamp=95, compliant=False)
        with pytest.raises(InvalidEventsError, match="not compliant"):
            check_events(1, (SHIPPED, spoiled), max_events_per_product=100)


class TestEvaluateCompliance:
    """Tests for rule ordering in the chain."""

    def test_all_rules_pass(self) -> None:
        evaluate_compliance(1, VALID_PRODUCT, (ORGANIC,), VALID_BATCH, (SHIPPED,), 100)

    def test_product_failure_reported_before_all_others(self) -> None:
        """A record set failing every rule reports the product rule."""
        with pytest.raises(InvalidProductError):
            evaluate_compliance(
                1,
                Product(product_id=1, name="", origin="", valid=False),
                (),
                Batch(batch_id=1, production_date=0, quantity=0, compliant=False),
                (),
                100,
            )

    def test_certification_failure_reported_before_batch_and_events(self) -> None:
        with pytest.raises(InvalidCertificationError):
            evaluate_compliance(
                1,
                VALID_PRODUCT,
                (),
                Batch(batch_id=1, production_date=0, quantity=0, compliant=False),
                (),
                100,
            )

    def test_batch_failure_reported_before_events(self) -> None:
        with pytest.raises(InvalidBatchError):
            evaluate_compliance(
                1,
                VALID_PRODUCT,
                (ORGANIC,),
                Batch(batch_id=1, production_date=0, quantity=0, compliant=True),
                (),
                100,
            )

    def test_event_failure_reported_last(self) -> None:
        with pytest.raises(InvalidEventsError):
            evaluate_compliance(1, VALID_PRODUCT, (ORGANIC,), VALID_BATCH, (), 100)
