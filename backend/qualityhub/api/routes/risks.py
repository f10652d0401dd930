"""Risk register endpoints - all access goes through the tenant-scoped client."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from backend.qualityhub.api.deps import ContextDep, SettingsDep, TenantDbDep
from backend.qualityhub.db.audit_log import AuditAction, get_client_ip, log_activity
from backend.qualityhub.db.models import Risk
from backend.qualityhub.models.common import Page, RiskLevel, RiskStatus
from backend.qualityhub.models.records import RiskCreate, RiskOut, RiskUpdate

router = APIRouter(prefix="/risks", tags=["risks"])


@router.get("", response_model=Page[RiskOut])
async def list_risks(
    db: TenantDbDep,
    settings: SettingsDep,
    status_: Annotated[RiskStatus | None, Query(alias="status")] = None,
    risk_level: RiskLevel | None = None,
    project_id: UUID | None = None,
    q: Annotated[str | None, Query(min_length=1, max_length=100)] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> Page[RiskOut]:
    """List the current tenant's risks.

    Args:
        db: Tenant-scoped client
        status_: Optional status filter
        risk_level: Optional level filter
        project_id: Optional project filter
        q: Optional case-insensitive title search
        limit: Page size (defaults to settings.default_page_size)
        offset: Page offset

    Returns:
        One page of risks and the total for the filter
    """
    limit = min(limit or settings.default_page_size, settings.max_page_size)

    where: dict[str, Any] = {}
    if status_:
        where["status"] = status_.value
    if risk_level:
        where["risk_level"] = risk_level.value
    if project_id:
        where["project_id"] = project_id
    if q:
        where["title"] = {"contains": q}

    risks = db.delegate(Risk)
    rows = await risks.find_many(where, order_by={"created_at": "desc"}, limit=limit, offset=offset)
    total = await risks.count(where)

    return Page[RiskOut](
        items=[RiskOut.model_validate(row) for row in rows],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{risk_id}", response_model=RiskOut)
async def get_risk(risk_id: UUID, db: TenantDbDep) -> RiskOut:
    """Get one risk; risks of other tenants are reported as not found."""
    row = await db.delegate(Risk).find_unique({"id": risk_id})
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Risk not found")
    return RiskOut.model_validate(row)


@router.post("", response_model=RiskOut, status_code=status.HTTP_201_CREATED)
async def create_risk(
    body: RiskCreate,
    request: Request,
    ctx: ContextDep,
    db: TenantDbDep,
) -> RiskOut:
    """Create a risk owned by the current tenant."""
    row = await db.delegate(Risk).create(body.model_dump(mode="python"))
    await log_activity(
        db, ctx, AuditAction.create, "risk", str(row.id),
        metadata={"code": row.code}, ip_address=get_client_ip(request),
    )
    await db.commit()
    return RiskOut.model_validate(row)


@router.patch("/{risk_id}", response_model=RiskOut)
async def update_risk(
    risk_id: UUID,
    body: RiskUpdate,
    request: Request,
    ctx: ContextDep,
    db: TenantDbDep,
) -> RiskOut:
    """Update a risk; a risk outside the current tenant yields 403."""
    changes = body.model_dump(mode="python", exclude_unset=True)
    row = await db.delegate(Risk).update({"id": risk_id}, changes)
    action = AuditAction.status_change if "status" in changes else AuditAction.update
    await log_activity(
        db, ctx, action, "risk", str(row.id),
        metadata={"fields": sorted(changes)}, ip_address=get_client_ip(request),
    )
    await db.commit()
    return RiskOut.model_validate(row)


@router.delete("/{risk_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_risk(
    risk_id: UUID,
    request: Request,
    ctx: ContextDep,
    db: TenantDbDep,
) -> Response:
    """Delete a risk; a risk outside the current tenant yields 403."""
    row = await db.delegate(Risk).delete({"id": risk_id})
    await log_activity(
        db, ctx, AuditAction.delete, "risk", str(row.id),
        metadata={"code": row.code}, ip_address=get_client_ip(request),
    )
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
