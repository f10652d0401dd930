"""Activity log listing for the current tenant."""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from backend.qualityhub.api.deps import SettingsDep, TenantDbDep
from backend.qualityhub.db.models import AuditLog
from backend.qualityhub.models.common import Page
from backend.qualityhub.models.records import AuditLogOut

router = APIRouter(prefix="/audit-logs", tags=["audit-logs"])


@router.get("", response_model=Page[AuditLogOut])
async def list_audit_logs(
    db: TenantDbDep,
    settings: SettingsDep,
    entity_type: str | None = None,
    entity_id: str | None = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> Page[AuditLogOut]:
    """List activity entries, newest first.

    Entries of other tenants are never visible here, even when filtering by
    an entity id that exists elsewhere.
    """
    limit = min(limit or settings.default_page_size, settings.max_page_size)

    where: dict[str, Any] = {}
    if entity_type:
        where["entity_type"] = entity_type
    if entity_id:
        where["entity_id"] = entity_id

    logs = db.delegate(AuditLog)
    rows = await logs.find_many(where, order_by={"created_at": "desc"}, limit=limit, offset=offset)
    total = await logs.count(where)

    return Page[AuditLogOut](
        items=[AuditLogOut.model_validate(row) for row in rows],
        total=total,
        limit=limit,
        offset=offset,
    )
