"""Structured logging shared by the provenance services.

Every service logs through a structlog logger bound with its class name
and a component. Operation loggers add the operation name, the active
correlation ID and, when the operation concerns one product, its id, so
that log lines can be filtered per product.

Usage:
    class AuditTrailService(LoggingMixin):
        component = "audit"

        def __init__(self, ...) -> None:
            ...
            self._init_logger()

        async def get_audit_trail(self, product_id: int) -> AuditTrail:
            log = self._log_operation("get_audit_trail", product_id=product_id)
            log.debug("audit_trail_collected")
"""

from typing import ClassVar

import structlog

from provenance_verifier.application.observability.correlation import (
    get_correlation_id,
)


class LoggingMixin:
    """Mixin providing structured logging for services.

    Attributes:
        component: Log category of the service, overridable per class.
        _log: The structlog BoundLogger for this service instance.
    """

    component: ClassVar[str] = "provenance"

    _log: structlog.BoundLogger

    def _init_logger(self) -> None:
        """Bind the service logger. Call once from __init__."""
        self._log = structlog.get_logger().bind(
            service=type(self).__name__,
            component=self.component,
        )

    def _log_operation(
        self,
        operation: str,
        product_id: int | None = None,
        **context: object,
    ) -> structlog.BoundLogger:
        """Logger scoped to one operation.

        Args:
            operation: Name of the operation being performed.
            product_id: Product the operation concerns, if any.
            **context: Additional context to bind.
        """
        if product_id is not None:
            context["product_id"] = product_id
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )
