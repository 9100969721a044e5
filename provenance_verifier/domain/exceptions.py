"""Base exception classes for the provenance verifier domain layer."""


class ProvenanceError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    Every subclass carries a numeric ``code`` so that a binding layer can
    surface the failure as a result envelope without inspecting its type.

    Attributes:
        code: Numeric failure code (0 when the error has no assigned code).
    """

    code: int = 0

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
