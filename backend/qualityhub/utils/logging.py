"""Structured logging for the data-access layer."""

import logging
import uuid
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Set the level of the application's logger tree."""
    logging.getLogger("backend.qualityhub").setLevel(getattr(logging, level.upper(), logging.INFO))


class StructuredAccessLogger:
    """Structured logger for tenant isolation events."""

    def log_blocked(
        self,
        tenant_id: uuid.UUID,
        model: str,
        operation: str,
        reason: str,
    ) -> None:
        """Log an operation that tenant isolation hid or denied."""
        log_data: dict[str, Any] = {
            "tenant_id": str(tenant_id),
            "model": model,
            "operation": operation,
            "reason": reason,
        }

        logger.warning(
            f"Tenant isolation: {model}.{operation} - {reason}",
            extra={"structured": log_data},
        )

    def log_audit_failure(
        self,
        tenant_id: uuid.UUID,
        entity_type: str,
        action: str,
        error: BaseException,
    ) -> None:
        """Log an activity-log write that failed."""
        log_data: dict[str, Any] = {
            "tenant_id": str(tenant_id),
            "entity_type": entity_type,
            "action": action,
            "error_reason": type(error).__name__,
        }

        logger.error(
            f"Activity log write failed: {entity_type} {action}",
            extra={"structured": log_data},
            exc_info=error,
        )
