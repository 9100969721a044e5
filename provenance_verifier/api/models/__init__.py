"""API response models (pydantic)."""

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

__all__ = [
    "AuditTrailResponse",
    "BatchResponse",
    "CertificationResponse",
    "ConfigurationResponse",
    "ErrorKind",
    "EventResponse",
    "OwnershipRecordResponse",
    "ProductResponse",
    "ProvenanceResultResponse",
    "SourceOutcomeResponse",
    "ThresholdUpdateResponse",
    "VerificationBundleResponse",
    "VerificationResponse",
]
