"""Domain services - pure business rules."""

from provenance_verifier.domain.services.compliance_rules import (
    are_certifications_verifiable,
    are_events_verifiable,
    evaluate_compliance,
    is_batch_verifiable,
    is_product_verifiable,
)

__all__: list[str] = [
    "are_certifications_verifiable",
    "are_events_verifiable",
    "evaluate_compliance",
    "is_batch_verifiable",
    "is_product_verifiable",
]
