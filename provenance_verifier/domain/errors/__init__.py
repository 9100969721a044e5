"""Domain errors for the provenance verifier.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ProvenanceError and carry a numeric code.
"""

from provenance_verifier.domain.errors.codes import VerifierErrorCode
from provenance_verifier.domain.errors.compliance import (
    ComplianceRuleViolationError,
    InvalidBatchError,
    InvalidCertificationError,
    InvalidEventsError,
    InvalidProductError,
)
from provenance_verifier.domain.errors.configuration import (
    ConfigurationUpdateDeniedError,
    InvalidThresholdError,
)
from provenance_verifier.domain.errors.source import SourceFailureError

__all__: list[str] = [
    "ComplianceRuleViolationError",
    "ConfigurationUpdateDeniedError",
    "InvalidBatchError",
    "InvalidCertificationError",
    "InvalidEventsError",
    "InvalidProductError",
    "InvalidThresholdError",
    "SourceFailureError",
    "VerifierErrorCode",
]
