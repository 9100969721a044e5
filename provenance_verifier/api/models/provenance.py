"""Provenance verifier response models.

Pydantic models for the Result-shaped contract exposed to binding layers:
every operation answers with an envelope carrying either a value or a
numeric error code, plus the kind of failure.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Classification of a failed operation."""

    SOURCE = "source"
    RULE = "rule"
    DENIED = "denied"
    VALIDATION = "validation"


class ProductResponse(BaseModel):
    """Product record as read from the registry."""

    product_id: int
    name: str
    origin: str
    valid: bool


class CertificationResponse(BaseModel):
    """Certification record as read from the certification manager."""

    certification_type: str = Field(..., examples=["Organic"])
    issuer: str = Field(..., examples=["ST2CERT"])
    valid: bool


class BatchResponse(BaseModel):
    """Batch record as read from the batch tracker."""

    batch_id: int
    production_date: int
    quantity: int = Field(..., ge=0)
    compliant: bool


class EventResponse(BaseModel):
    """Event record as read from the event logger."""

    event_type: str = Field(..., examples=["Shipped"])
    timestamp: int
    compliant: bool


class OwnershipRecordResponse(BaseModel):
    """Ownership transfer as read from the ownership ledger."""

    owner: str
    timestamp: int


class VerificationResponse(BaseModel):
    """Latest recorded verification of a product.

    Attributes:
        verified: Always True for recorded verifications.
        timestamp: Logical height of the successful verification.
        verifier: Identity that ran the verification.
    """

    verified: bool
    timestamp: int
    verifier: str


class VerificationBundleResponse(BaseModel):
    """Records read during a successful verification."""

    product_id: int
    status: str = Field(..., examples=["verified"])
    product: ProductResponse
    certifications: list[CertificationResponse]
    batch: BatchResponse
    events: list[EventResponse]
    ownership_history: list[OwnershipRecordResponse] = Field(default_factory=list)


class ProvenanceResultResponse(BaseModel):
    """Result envelope of a verification.

    Attributes:
        ok: True when the product was verified and recorded.
        value: The verification bundle when ok.
        error_code: Source or rule code when not ok.
        error_kind: SOURCE or RULE when not ok.
    """

    ok: bool
    value: Optional[VerificationBundleResponse] = None
    error_code: Optional[int] = None
    error_kind: Optional[ErrorKind] = None


class SourceOutcomeResponse(BaseModel):
    """Outcome of reading one source in the audit trail."""

    source: str
    ok: bool
    value: Optional[Any] = None
    error_code: Optional[int] = None


class AuditTrailResponse(BaseModel):
    """Audit trail envelope.

    The envelope itself is always ok; each field reports its own outcome.
    """

    ok: bool = True
    product_id: int
    product: SourceOutcomeResponse
    certifications: SourceOutcomeResponse
    batch: SourceOutcomeResponse
    events: SourceOutcomeResponse
    ownership_history: Optional[SourceOutcomeResponse] = None


class ThresholdUpdateResponse(BaseModel):
    """Result envelope of a threshold update."""

    ok: bool
    value: bool
    error_code: Optional[int] = None
    error_kind: Optional[ErrorKind] = None


class ConfigurationResponse(BaseModel):
    """Current verifier configuration."""

    verification_threshold: int = Field(..., ge=1, le=100)
    max_events_per_product: int = Field(..., ge=1)
    contract_owner: str
