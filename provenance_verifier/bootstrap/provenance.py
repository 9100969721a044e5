"""Bootstrap wiring for provenance verification dependencies."""

from __future__ import annotations

from provenance_verifier.api.adapters.provenance import ProvenanceVerifierAdapter
from provenance_verifier.application.ports.verification_store import (
    VerificationStoreProtocol,
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
from provenance_verifier.infrastructure.adapters.persistence import (
    InMemoryVerificationStore,
)
from provenance_verifier.infrastructure.stubs import (
    BatchTrackerStub,
    CertificationManagerStub,
    EventLoggerStub,
    OwnershipLedgerStub,
    ProductRegistryStub,
)

_product_registry: ProductRegistryStub | None = None
_certification_manager: CertificationManagerStub | None = None
_batch_tracker: BatchTrackerStub | None = None
_event_logger: EventLoggerStub | None = None
_ownership_ledger: OwnershipLedgerStub | None = None
_verification_store: VerificationStoreProtocol | None = None
_verification_service: ProvenanceVerificationService | None = None


def get_product_registry() -> ProductRegistryStub:
    """Get product registry instance."""
    global _product_registry
    if _product_registry is None:
        _product_registry = ProductRegistryStub()
    return _product_registry


def get_certification_manager() -> CertificationManagerStub:
    """Get certification manager instance."""
    global _certification_manager
    if _certification_manager is None:
        _certification_manager = CertificationManagerStub()
    return _certification_manager


def get_batch_tracker() -> BatchTrackerStub:
    """Get batch tracker instance."""
    global _batch_tracker
    if _batch_tracker is None:
        _batch_tracker = BatchTrackerStub()
    return _batch_tracker


def get_event_logger() -> EventLoggerStub:
    """Get event logger instance."""
    global _event_logger
    if _event_logger is None:
        _event_logger = EventLoggerStub()
    return _event_logger


def get_ownership_ledger() -> OwnershipLedgerStub:
    """Get ownership ledger instance."""
    global _ownership_ledger
    if _ownership_ledger is None:
        _ownership_ledger = OwnershipLedgerStub()
    return _ownership_ledger


def get_verification_store() -> VerificationStoreProtocol:
    """Get verification store instance, configured from the environment."""
    global _verification_store
    if _verification_store is None:
        _verification_store = InMemoryVerificationStore(
            config=VerifierConfig.from_environment()
        )
    return _verification_store


def get_verification_service() -> ProvenanceVerificationService:
    """Get the verification orchestrator.

    A single instance is shared so per-product serialization holds
    process-wide.
    """
    global _verification_service
    if _verification_service is None:
        _verification_service = ProvenanceVerificationService(
            product_registry=get_product_registry(),
            certification_manager=get_certification_manager(),
            batch_tracker=get_batch_tracker(),
            event_logger=get_event_logger(),
            ownership_ledger=get_ownership_ledger(),
            verification_store=get_verification_store(),
        )
    return _verification_service


def get_audit_trail_service() -> AuditTrailService:
    """Get audit trail service instance."""
    return AuditTrailService(
        product_registry=get_product_registry(),
        certification_manager=get_certification_manager(),
        batch_tracker=get_batch_tracker(),
        event_logger=get_event_logger(),
        ownership_ledger=get_ownership_ledger(),
    )


def get_configuration_service() -> VerifierConfigurationService:
    """Get configuration service instance."""
    return VerifierConfigurationService(verification_store=get_verification_store())


def build_provenance_verifier() -> ProvenanceVerifierAdapter:
    """Build the Result-shaped verifier over the process-wide dependencies."""
    return ProvenanceVerifierAdapter(
        verification_service=get_verification_service(),
        audit_trail_service=get_audit_trail_service(),
        configuration_service=get_configuration_service(),
    )


def reset_provenance_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _product_registry, _certification_manager, _batch_tracker
    global _event_logger, _ownership_ledger, _verification_store
    global _verification_service
    _product_registry = None
    _certification_manager = None
    _batch_tracker = None
    _event_logger = None
    _ownership_ledger = None
    _verification_store = None
    _verification_service = None
