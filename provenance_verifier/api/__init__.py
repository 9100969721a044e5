"""
API layer - Result-shaped contract over the application services.

The API layer may import from application and domain; it must not import
infrastructure. Wiring lives in provenance_verifier.bootstrap.
"""
