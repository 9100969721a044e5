"""
Provenance Verifier - trust layer for end-to-end product provenance.

Cross-checks the records held by independent authoritative sources
(product registry, certification manager, batch tracker, event logger and
ownership ledger) and records an immutable verification outcome when every
compliance rule passes.

Guarantees:
- Checks run in a fixed order and stop at the first failure
- Failures never leave a partial verification record behind
- Source failure codes are surfaced verbatim
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
