"""Provenance verifier API adapter.

Transforms domain results and domain errors into the Result-shaped
response models, and exposes the four caller-visible operations:

- verify_provenance(product_id) -> ProvenanceResultResponse
- get_verification(product_id) -> VerificationResponse | None
- get_audit_trail(product_id) -> AuditTrailResponse
- set_verification_threshold(value) -> ThresholdUpdateResponse

Caller identity and logical height are passed explicitly with each call.
"""

from __future__ import annotations

from typing import Any

from provenance_verifier.api.models.provenance import (
    AuditTrailResponse,
    BatchResponse,
    CertificationResponse,
    ConfigurationResponse,
    ErrorKind,
    EventResponse,
    OwnershipRecordResponse,
    ProductResponse,
    ProvenanceResultResponse,
    SourceOutcomeResponse,
    ThresholdUpdateResponse,
    VerificationBundleResponse,
    VerificationResponse,
)
from provenance_verifier.application.observability.correlation import (
    correlation_scope,
)
from provenance_verifier.application.services.audit_trail_service import (
    AuditTrailService,
)
from provenance_verifier.application.services.provenance_verification_service import (
    ProvenanceVerificationService,
)
from provenance_verifier.application.services.verifier_configuration_service import (
    VerifierConfigurationService,
)
from provenance_verifier.config.verifier_config import VerifierConfig
from provenance_verifier.domain.errors.compliance import ComplianceRuleViolationError
from provenance_verifier.domain.errors.configuration import (
    ConfigurationUpdateDeniedError,
    InvalidThresholdError,
)
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.audit_trail import AuditTrail, SourceOutcome
from provenance_verifier.domain.models.verification import (
    CallContext,
    Verification,
    VerificationBundle,
)


def _outcome_value(value: Any) -> Any:
    """Convert a source record, or a tuple of records, to plain data."""
    if isinstance(value, tuple):
        return [item.to_dict() for item in value]
    return value.to_dict()


class ProvenanceResponseAdapter:
    """Adapts domain results to API response models.

    No fields are hidden; records are copied as read from their source.
    """

    @staticmethod
    def to_bundle_response(bundle: VerificationBundle) -> VerificationBundleResponse:
        """Convert a verification bundle to its response model."""
        return VerificationBundleResponse(
            product_id=bundle.product_id,
            status=bundle.status,
            product=ProductResponse(**bundle.product.to_dict()),
            certifications=[
                CertificationResponse(**c.to_dict()) for c in bundle.certifications
            ],
            batch=BatchResponse(**bundle.batch.to_dict()),
            events=[EventResponse(**e.to_dict()) for e in bundle.events],
            ownership_history=[
                OwnershipRecordResponse(**o.to_dict()) for o in bundle.ownership_history
            ],
        )

    @staticmethod
    def to_verification_response(verification: Verification) -> VerificationResponse:
        """Convert a stored verification to its response model."""
        return VerificationResponse(**verification.to_dict())

    @staticmethod
    def to_outcome_response(outcome: SourceOutcome[Any]) -> SourceOutcomeResponse:
        """Convert one audit outcome to its response model."""
        return SourceOutcomeResponse(
            source=outcome.source.value,
            ok=outcome.ok,
            value=_outcome_value(outcome.value) if outcome.ok else None,
            error_code=outcome.error_code,
        )

    @staticmethod
    def to_audit_trail_response(trail: AuditTrail) -> AuditTrailResponse:
        """Convert an audit trail to its response model."""
        to_outcome = ProvenanceResponseAdapter.to_outcome_response
        return AuditTrailResponse(
            product_id=trail.product_id,
            product=to_outcome(trail.product),
            certifications=to_outcome(trail.certifications),
            batch=to_outcome(trail.batch),
            events=to_outcome(trail.events),
            ownership_history=(
                to_outcome(trail.ownership_history)
                if trail.ownership_history is not None
                else None
            ),
        )

    @staticmethod
    def to_configuration_response(config: VerifierConfig) -> ConfigurationResponse:
        """Convert the verifier configuration to its response model."""
        return ConfigurationResponse(
            verification_threshold=config.verification_threshold,
            max_events_per_product=config.max_events_per_product,
            contract_owner=config.contract_owner,
        )


class ProvenanceVerifierAdapter:
    """Result-shaped binding over the provenance verifier services.

    Domain errors are caught here and turned into failed envelopes; nothing
    else is caught. Each mutating or multi-source call runs in its own
    correlation scope.
    """

    def __init__(
        self,
        verification_service: ProvenanceVerificationService,
        audit_trail_service: AuditTrailService,
        configuration_service: VerifierConfigurationService,
    ) -> None:
        self._verification_service = verification_service
        self._audit_trail_service = audit_trail_service
        self._configuration_service = configuration_service

    async def verify_provenance(
        self, product_id: int, context: CallContext
    ) -> ProvenanceResultResponse:
        """Verify a product and wrap the outcome in a result envelope."""
        try:
            with correlation_scope():
                bundle = await self._verification_service.verify_provenance(
                    product_id, context
                )
        except SourceFailureError as e:
            return ProvenanceResultResponse(
                ok=False, error_code=e.code, error_kind=ErrorKind.SOURCE
            )
        except ComplianceRuleViolationError as e:
            return ProvenanceResultResponse(
                ok=False, error_code=int(e.code), error_kind=ErrorKind.RULE
            )
        return ProvenanceResultResponse(
            ok=True, value=ProvenanceResponseAdapter.to_bundle_response(bundle)
        )

    async def get_verification(self, product_id: int) -> VerificationResponse | None:
        """Get the latest verification, or None if absent."""
        verification = await self._verification_service.get_verification(product_id)
        if verification is None:
            return None
        return ProvenanceResponseAdapter.to_verification_response(verification)

    async def get_audit_trail(
        self, product_id: int, include_ownership: bool = True
    ) -> AuditTrailResponse:
        """Collect the audit trail of a product."""
        with correlation_scope():
            trail = await self._audit_trail_service.get_audit_trail(
                product_id, include_ownership=include_ownership
            )
        return ProvenanceResponseAdapter.to_audit_trail_response(trail)

    async def set_verification_threshold(
        self, new_threshold: int, context: CallContext
    ) -> ThresholdUpdateResponse:
        """Update the verification threshold as the calling identity."""
        try:
            with correlation_scope():
                await self._configuration_service.set_verification_threshold(
                    new_threshold, context
                )
        except ConfigurationUpdateDeniedError as e:
            return ThresholdUpdateResponse(
                ok=False, value=False, error_code=int(e.code), error_kind=ErrorKind.DENIED
            )
        except InvalidThresholdError as e:
            return ThresholdUpdateResponse(
                ok=False,
                value=False,
                error_code=int(e.code),
                error_kind=ErrorKind.VALIDATION,
            )
        return ThresholdUpdateResponse(ok=True, value=True)

    async def get_configuration(self) -> ConfigurationResponse:
        """Read the current configuration."""
        config = await self._configuration_service.get_configuration()
        return ProvenanceResponseAdapter.to_configuration_response(config)
