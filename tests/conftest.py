"""
Pytest configuration and shared fixtures for provenance verifier tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from provenance_verifier.application.services.audit_trail_service import (
    AuditTrailService,
)
from provenance_verifier.application.services.provenance_verification_service import (
    ProvenanceVerificationService,
)
from provenance_verifier.application.services.verifier_configuration_service import (
    VerifierConfigurationService,
)
from provenance_verifier.infrastructure.adapters.persistence import (
    InMemoryVerificationStore,
)
from tests.helpers import FakeHeightClock, ProvenanceSources


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from provenance_verifier import __version__

    return __version__


@pytest.fixture
def clock() -> FakeHeightClock:
    """Owner identity at height 100."""
    return FakeHeightClock(caller="ST1TEST", height=100)


@pytest.fixture
def sources() -> ProvenanceSources:
    """Empty in-memory sources."""
    return ProvenanceSources()


@pytest.fixture
def coffee_id(sources: ProvenanceSources) -> int:
    """Seed the fully valid Coffee product and return its id."""
    return sources.seed_coffee(1)


@pytest.fixture
def verification_store() -> InMemoryVerificationStore:
    """Empty verification store with default configuration."""
    return InMemoryVerificationStore()


@pytest.fixture
def verification_service(
    sources: ProvenanceSources, verification_store: InMemoryVerificationStore
) -> ProvenanceVerificationService:
    """Verification orchestrator over the in-memory sources."""
    return ProvenanceVerificationService(
        product_registry=sources.product_registry,
        certification_manager=sources.certification_manager,
        batch_tracker=sources.batch_tracker,
        event_logger=sources.event_logger,
        ownership_ledger=sources.ownership_ledger,
        verification_store=verification_store,
    )


@pytest.fixture
def audit_trail_service(sources: ProvenanceSources) -> AuditTrailService:
    """Audit trail reader over the in-memory sources."""
    return AuditTrailService(
        product_registry=sources.product_registry,
        certification_manager=sources.certification_manager,
        batch_tracker=sources.batch_tracker,
        event_logger=sources.event_logger,
        ownership_ledger=sources.ownership_ledger,
    )


@pytest.fixture
def configuration_service(
    verification_store: InMemoryVerificationStore,
) -> VerifierConfigurationService:
    """Configuration service over the shared store."""
    return VerifierConfigurationService(verification_store=verification_store)
