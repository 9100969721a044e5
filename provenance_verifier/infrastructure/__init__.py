"""
Infrastructure layer - adapters for external collaborators.

This layer contains:
- Persistence adapters (verification store)
- In-memory stubs of the five provenance sources
- Observability (structlog configuration)
"""
