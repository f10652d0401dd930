"""Activity log: who did what to which tenant record."""

from enum import Enum
from typing import Any

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from backend.qualityhub.db.context import RequestContext
from backend.qualityhub.db.errors import DataAccessError
from backend.qualityhub.db.models import AuditLog
from backend.qualityhub.db.scoping import TenantScopedClient
from backend.qualityhub.utils.logging import StructuredAccessLogger
from backend.qualityhub.utils.metrics import PrometheusIsolationMetrics

_access_logger = StructuredAccessLogger()
_metrics = PrometheusIsolationMetrics()


class AuditAction(str, Enum):
    """Kinds of activity recorded in the audit log."""

    create = "create"
    update = "update"
    delete = "delete"
    status_change = "status_change"
    upload = "upload"
    download = "download"
    export = "export"


async def log_activity(
    db: TenantScopedClient,
    ctx: RequestContext,
    action: AuditAction,
    entity_type: str,
    entity_id: str,
    metadata: dict[str, Any] | None = None,
    ip_address: str | None = None,
) -> AuditLog | None:
    """Record an activity through the tenant-scoped client.

    The tenant is stamped by the scoped client, never taken from the caller.
    A failed write is logged and counted but never propagates, so the
    request that triggered it is not affected.

    Args:
        db: Tenant-scoped client for the current request
        ctx: Request context (acting user)
        action: What happened
        entity_type: Kind of record affected (e.g. "risk")
        entity_id: Id of the record affected
        metadata: Optional extra details
        ip_address: Client IP if known

    Returns:
        The stored entry, or None if the write failed
    """
    action_value = AuditAction(action).value
    try:
        async with db.session.begin_nested():
            return await db.delegate(AuditLog).create(
                {
                    "user_id": ctx.user_id,
                    "action": action_value,
                    "entity_type": entity_type,
                    "entity_id": str(entity_id),
                    "metadata_": metadata or {},
                    "ip_address": ip_address,
                }
            )
    except (SQLAlchemyError, DataAccessError) as e:
        _access_logger.log_audit_failure(db.tenant_id, entity_type, action_value, e)
        _metrics.inc_audit_log_failure(entity_type, action_value)
        return None


def get_client_ip(request: Request) -> str | None:
    """Extract the client IP from common proxy headers."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("x-real-ip") or None
