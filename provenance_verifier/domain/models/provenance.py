"""Provenance source records.

This module defines the immutable records returned by the five external
authoritative sources. The verifier never owns or mutates these records;
it only reads them and evaluates compliance rules over them.

Sources:
- Product registry -> Product
- Certification manager -> Certification (set)
- Batch tracker -> Batch
- Event logger -> ProvenanceEvent (sequence)
- Ownership transfer ledger -> OwnershipRecord (sequence, audit only)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ProvenanceSource(str, Enum):
    """The external authoritative sources consulted during verification.

    Member order is the order in which the orchestrator reads them.
    """

    PRODUCT_REGISTRY = "product_registry"
    CERTIFICATION_MANAGER = "certification_manager"
    BATCH_TRACKER = "batch_tracker"
    EVENT_LOGGER = "event_logger"
    OWNERSHIP_LEDGER = "ownership_ledger"


@dataclass(frozen=True)
class Product:
    """A product as held by the product registry.

    Attributes:
        product_id: Positive integer identity of the product.
        name: Product name (must be non-empty to be verifiable).
        origin: Place of origin (must be non-empty to be verifiable).
        valid: Validity flag set by the product registry.

    Example:
        >>> product = Product(product_id=1, name="Coffee", origin="Ethiopia", valid=True)
        >>> product.name
        'Coffee'
    """

    product_id: int
    name: str
    origin: str
    valid: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "product_id": self.product_id,
            "name": self.name,
            "origin": self.origin,
            "valid": self.valid,
        }


@dataclass(frozen=True)
class Certification:
    """A certification issued for a product by a certification authority.

    Attributes:
        certification_type: Kind of certification (e.g., "Organic").
        issuer: Identity of the issuing authority.
        valid: Validity flag set by the certification manager.
    """

    certification_type: str
    issuer: str
    valid: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "certification_type": self.certification_type,
            "issuer": self.issuer,
            "valid": self.valid,
        }


@dataclass(frozen=True)
class Batch:
    """A production batch as tracked by the batch tracker.

    Attributes:
        batch_id: Identity of the batch.
        production_date: Logical height at which the batch was produced.
        quantity: Number of units in the batch (non-negative).
        compliant: Compliance flag set by the batch tracker.
    """

    batch_id: int
    production_date: int
    quantity: int
    compliant: bool

    def __post_init__(self) -> None:
        """Validate batch quantity.

        Raises:
            ValueError: If quantity is negative.
        """
        if self.quantity < 0:
            raise ValueError(f"quantity must be non-negative, got {self.quantity}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "batch_id": self.batch_id,
            "production_date": self.production_date,
            "quantity": self.quantity,
            "compliant": self.compliant,
        }


@dataclass(frozen=True)
class ProvenanceEvent:
    """A supply-chain event recorded by the event logger.

    Attributes:
        event_type: Kind of event (e.g., "Shipped").
        timestamp: Logical height at which the event was logged.
        compliant: Compliance flag set by the event logger.
    """

    event_type: str
    timestamp: int
    compliant: bool

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {
            "event_type": self.event_type,
            "timestamp": self.timestamp,
            "compliant": self.compliant,
        }


@dataclass(frozen=True)
class OwnershipRecord:
    """A single ownership transfer entry.

    Read for audit purposes only; no compliance rule consumes it.

    Attributes:
        owner: Identity of the owner after the transfer.
        timestamp: Logical height of the transfer.
    """

    owner: str
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for serialization."""
        return {"owner": self.owner, "timestamp": self.timestamp}
