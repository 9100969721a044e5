"""
Application layer - use cases orchestrating the domain.

This layer contains:
- Ports (abstract interfaces for sources and the verification store)
- Services (verification orchestrator, audit trail, configuration)
- Observability helpers (correlation ids)

Application may import from domain and config only.
"""
