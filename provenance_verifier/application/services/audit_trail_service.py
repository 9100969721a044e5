"""Audit trail service - read-only view of every source's raw outcome.

Unlike verification, the audit path never stops at a failing source and
never applies compliance rules or writes state. Each source's outcome is
collected independently so degraded sources stay visible alongside the
healthy ones.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from provenance_verifier.application.ports.batch_tracker import BatchTrackerProtocol
from provenance_verifier.application.ports.certification_manager import (
    CertificationManagerProtocol,
)
from provenance_verifier.application.ports.event_logger import EventLoggerProtocol
from provenance_verifier.application.ports.ownership_ledger import (
    OwnershipLedgerProtocol,
)
from provenance_verifier.application.ports.product_registry import (
    ProductRegistryProtocol,
)
from provenance_verifier.application.services.base import LoggingMixin
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.audit_trail import AuditTrail, SourceOutcome
from provenance_verifier.domain.models.provenance import ProvenanceSource

T = TypeVar("T")


class AuditTrailService(LoggingMixin):
    """Gathers per-source outcomes for external inspection."""

    component = "audit"

    def __init__(
        self,
        product_registry: ProductRegistryProtocol,
        certification_manager: CertificationManagerProtocol,
        batch_tracker: BatchTrackerProtocol,
        event_logger: EventLoggerProtocol,
        ownership_ledger: OwnershipLedgerProtocol,
    ) -> None:
        self._product_registry = product_registry
        self._certification_manager = certification_manager
        self._batch_tracker = batch_tracker
        self._event_logger = event_logger
        self._ownership_ledger = ownership_ledger
        self._init_logger()

    async def _collect(
        self,
        source: ProvenanceSource,
        read: Callable[[int], Awaitable[T]],
        product_id: int,
    ) -> SourceOutcome[T]:
        """Read one source, turning a source failure into a failed outcome."""
        try:
            value = await read(product_id)
        except SourceFailureError as e:
            self._log_operation(
                "get_audit_trail", product_id=product_id
            ).info("audit_source_degraded", source=source.value, code=e.code)
            return SourceOutcome.failure(source, e.code)
        return SourceOutcome.success(source, value)

    async def get_audit_trail(
        self, product_id: int, include_ownership: bool = True
    ) -> AuditTrail:
        """Collect every source's outcome for a product.

        Never raises for a source failure; each field of the returned
        AuditTrail carries its own success value or failure code.

        Args:
            product_id: Product identity.
            include_ownership: Also read the ownership ledger (default True).

        Returns:
            AuditTrail with independent per-source outcomes.
        """
        product = await self._collect(
            ProvenanceSource.PRODUCT_REGISTRY,
            self._product_registry.get_product,
            product_id,
        )
        certifications = await self._collect(
            ProvenanceSource.CERTIFICATION_MANAGER,
            self._certification_manager.get_certifications,
            product_id,
        )
        batch = await self._collect(
            ProvenanceSource.BATCH_TRACKER,
            self._batch_tracker.get_batch,
            product_id,
        )
        events = await self._collect(
            ProvenanceSource.EVENT_LOGGER,
            self._event_logger.get_events,
            product_id,
        )
        ownership_history = None
        if include_ownership:
            ownership_history = await self._collect(
                ProvenanceSource.OWNERSHIP_LEDGER,
                self._ownership_ledger.get_ownership_history,
                product_id,
            )

        trail = AuditTrail(
            product_id=product_id,
            product=product,
            certifications=certifications,
            batch=batch,
            events=events,
            ownership_history=ownership_history,
        )
        self._log_operation("get_audit_trail", product_id=product_id).debug(
            "audit_trail_collected",
            degraded=[s.value for s in trail.degraded_sources],
        )
        return trail
