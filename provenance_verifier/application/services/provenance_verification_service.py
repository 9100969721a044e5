"""Provenance verification service - the verification orchestrator.

Reads the five authoritative sources in a fixed order, applies the
compliance rules in a fixed order, and records a Verification only when
everything passes.

Order (observable, must be preserved exactly):
1. Product registry
2. Certification manager
3. Batch tracker
4. Event logger
5. Ownership ledger (read, not rule-checked)
6-9. Product, certification, batch, event rules
10. Record Verification{verified, height, caller}

Guarantees:
- Source failures propagate with the source's own code
- Rule failures raise the first violated rule's error
- Steps 1-9 are pure reads; step 10 is the only write
- Calls for the same product id are serialized; distinct ids run concurrently
"""

from __future__ import annotations

import asyncio
import weakref

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
from provenance_verifier.application.ports.verification_store import (
    VerificationStoreProtocol,
)
from provenance_verifier.application.services.base import LoggingMixin
from provenance_verifier.domain.errors.compliance import ComplianceRuleViolationError
from provenance_verifier.domain.errors.source import SourceFailureError
from provenance_verifier.domain.models.verification import (
    CallContext,
    Verification,
    VerificationBundle,
)
from provenance_verifier.domain.services.compliance_rules import evaluate_compliance


class ProvenanceVerificationService(LoggingMixin):
    """Orchestrates provenance verification for a product.

    Example:
        ```python
        service = ProvenanceVerificationService(
            product_registry=registry,
            certification_manager=certifications,
            batch_tracker=batches,
            event_logger=events,
            ownership_ledger=ownership,
            verification_store=store,
        )
        bundle = await service.verify_provenance(
            1, CallContext(caller="ST1TEST", height=100)
        )
        assert bundle.status == "verified"
        ```
    """

    def __init__(
        self,
        product_registry: ProductRegistryProtocol,
        certification_manager: CertificationManagerProtocol,
        batch_tracker: BatchTrackerProtocol,
        event_logger: EventLoggerProtocol,
        ownership_ledger: OwnershipLedgerProtocol,
        verification_store: VerificationStoreProtocol,
    ) -> None:
        """Initialize the service.

        Args:
            product_registry: Product registry source.
            certification_manager: Certification manager source.
            batch_tracker: Batch tracker source.
            event_logger: Event logger source.
            ownership_ledger: Ownership transfer ledger source.
            verification_store: Store for verifications and configuration.
        """
        self._product_registry = product_registry
        self._certification_manager = certification_manager
        self._batch_tracker = batch_tracker
        self._event_logger = event_logger
        self._ownership_ledger = ownership_ledger
        self._verification_store = verification_store
        # Entries vanish once no call holds or awaits the lock.
        self._product_locks: weakref.WeakValueDictionary[int, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )
        self._init_logger()

    def _lock_for(self, product_id: int) -> asyncio.Lock:
        """Get the lock serializing verification of one product.

        The caller must keep the returned reference for as long as it holds
        or waits on the lock.
        """
        lock = self._product_locks.get(product_id)
        if lock is None:
            lock = asyncio.Lock()
            self._product_locks[product_id] = lock
        return lock

    async def verify_provenance(
        self, product_id: int, context: CallContext
    ) -> VerificationBundle:
        """Verify the provenance of a product and record the outcome.

        Args:
            product_id: Positive integer identity of the product.
            context: Caller identity and current logical height.

        Returns:
            VerificationBundle with status "verified" and every record read.

        Raises:
            SourceFailureError: If any source fails (its code, unchanged).
            ComplianceRuleViolationError: If any rule fails (first one only).
        """
        log = self._log_operation(
            "verify_provenance",
            product_id=product_id,
            caller=context.caller,
            height=context.height,
        )

        lock = self._lock_for(product_id)
        async with lock:
            log.info("verification_started")

            try:
                product = await self._product_registry.get_product(product_id)
                certifications = await self._certification_manager.get_certifications(
                    product_id
                )
                batch = await self._batch_tracker.get_batch(product_id)
                events = await self._event_logger.get_events(product_id)
                ownership_history = await self._ownership_ledger.get_ownership_history(
                    product_id
                )
            except SourceFailureError as e:
                log.warning(
                    "verification_source_failed",
                    source=e.source.value,
                    code=e.code,
                )
                raise

            config = await self._verification_store.get_configuration()

            try:
                evaluate_compliance(
                    product_id=product_id,
                    product=product,
                    certifications=certifications,
                    batch=batch,
                    events=events,
                    max_events_per_product=config.max_events_per_product,
                )
            except ComplianceRuleViolationError as e:
                log.warning(
                    "verification_rule_failed",
                    rule=e.rule_name,
                    code=int(e.code),
                    reason=e.reason,
                )
                raise

            verification = Verification(
                verified=True,
                timestamp=context.height,
                verifier=context.caller,
            )
            await self._verification_store.save_verification(product_id, verification)
            log.info("verification_recorded")

        return VerificationBundle(
            product_id=product_id,
            product=product,
            certifications=tuple(certifications),
            batch=batch,
            events=tuple(events),
            ownership_history=tuple(ownership_history),
        )

    async def get_verification(self, product_id: int) -> Verification | None:
        """Get the latest recorded verification for a product.

        The referenced product is not re-checked against the registry.

        Args:
            product_id: Product identity.

        Returns:
            The Verification, or None if the product was never verified.
        """
        return await self._verification_store.get_verification(product_id)
