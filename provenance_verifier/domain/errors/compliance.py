"""Compliance rule violation errors.

Each error maps to exactly one violated compliance predicate and carries a
core-defined code distinct from source failure codes, so callers can tell
"a source is unavailable" apart from "criteria not met".
"""

from __future__ import annotations

from provenance_verifier.domain.errors.codes import VerifierErrorCode
from provenance_verifier.domain.exceptions import ProvenanceError


class ComplianceRuleViolationError(ProvenanceError):
    """Base exception for all compliance rule failures.

    Attributes:
        product_id: The product that failed the rule.
        reason: Human-readable description of the violated predicate.
        code: Core-defined code of the violated rule.
    """

    code: int = 0
    rule_name: str = "compliance"

    def __init__(self, product_id: int, reason: str) -> None:
        """Initialize ComplianceRuleViolationError.

        Args:
            product_id: The product that failed the rule.
            reason: Human-readable description of the violated predicate.
        """
        self.product_id = product_id
        self.reason = reason
        super().__init__(
            f"{self.rule_name} rule failed for product {product_id}: {reason}"
        )


class InvalidProductError(ComplianceRuleViolationError):
    """Product is flagged invalid, or has an empty name or origin."""

    code = VerifierErrorCode.INVALID_PRODUCT
    rule_name = "product"


class InvalidCertificationError(ComplianceRuleViolationError):
    """No certifications, or at least one certification is invalid."""

    code = VerifierErrorCode.INVALID_CERTIFICATION
    rule_name = "certification"


class InvalidBatchError(ComplianceRuleViolationError):
    """Batch is non-compliant or has zero quantity."""

    code = VerifierErrorCode.INVALID_BATCH
    rule_name = "batch"


class InvalidEventsError(ComplianceRuleViolationError):
    """No events, too many events, or at least one non-compliant event."""

    code = VerifierErrorCode.INVALID_EVENTS
    rule_name = "event"
