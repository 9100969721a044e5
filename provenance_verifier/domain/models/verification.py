"""Verification records and the ambient call context.

Constraints:
- One Verification per product identity, overwritten on re-verification
- A Verification is only ever created by a fully successful verification
- No Verification is ever deleted (there is no revoked state)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from provenance_verifier.domain.models.provenance import (
    Batch,
    Certification,
    OwnershipRecord,
    Product,
    ProvenanceEvent,
)

VERIFIED_STATUS = "verified"


@dataclass(frozen=True)
class CallContext:
    """Ambient context of a single call, passed explicitly.

    Attributes:
        caller: Identity of the principal making the call.
        height: Current logical time of the call.
    """

    caller: str
    height: int

    def __post_init__(self) -> None:
        """Validate call context.

        Raises:
            ValueError: If caller is empty or height is negative.
        """
        if not self.caller:
            raise ValueError("caller must be a non-empty identity")
        if self.height < 0:
            raise ValueError(f"height must be non-negative, got {self.height}")


@dataclass(frozen=True)
class Verification:
    """The latest verification outcome recorded for a product.

    Attributes:
        verified: Always True for records written by the orchestrator.
        timestamp: Logical height at which verification succeeded.
        verifier: Identity of the caller that ran the verification.

    Example:
        >>> Verification(verified=True, timestamp=100, verifier="ST1TEST").timestamp
        100
    """

    verified: bool
    timestamp: int
    verifier: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "verified": self.verified,
            "timestamp": self.timestamp,
            "verifier": self.verifier,
        }


@dataclass(frozen=True)
class VerificationBundle:
    """Everything read during a successful verification.

    Attributes:
        product_id: Identity of the verified product.
        product: Product record from the registry.
        certifications: Certifications from the certification manager.
        batch: Batch record from the batch tracker.
        events: Events from the event logger.
        ownership_history: Ownership records read alongside (not rule-checked).
        status: Always "verified".
    """

    product_id: int
    product: Product
    certifications: tuple[Certification, ...]
    batch: Batch
    events: tuple[ProvenanceEvent, ...]
    ownership_history: tuple[OwnershipRecord, ...] = ()
    status: str = VERIFIED_STATUS

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "product_id": self.product_id,
            "status": self.status,
            "product": self.product.to_dict(),
            "certifications": [c.to_dict() for c in self.certifications],
            "batch": self.batch.to_dict(),
            "events": [e.to_dict() for e in self.events],
            "ownership_history": [o.to_dict() for o in self.ownership_history],
        }
