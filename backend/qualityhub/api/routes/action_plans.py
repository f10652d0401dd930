"""Action plan endpoints."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from backend.qualityhub.api.deps import ContextDep, SettingsDep, TenantDbDep
from backend.qualityhub.db.audit_log import AuditAction, get_client_ip, log_activity
from backend.qualityhub.db.models import ActionPlan
from backend.qualityhub.models.common import ActionStatus, ActionType, Page
from backend.qualityhub.models.records import ActionPlanCreate, ActionPlanOut, ActionPlanUpdate

router = APIRouter(prefix="/action-plans", tags=["action-plans"])


@router.get("", response_model=Page[ActionPlanOut])
async def list_action_plans(
    db: TenantDbDep,
    settings: SettingsDep,
    status_: Annotated[list[ActionStatus] | None, Query(alias="status")] = None,
    type_: Annotated[ActionType | None, Query(alias="type")] = None,
    nonconformity_id: UUID | None = None,
    risk_id: UUID | None = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> Page[ActionPlanOut]:
    """List the current tenant's action plans, soonest due first."""
    limit = min(limit or settings.default_page_size, settings.max_page_size)

    where: dict[str, Any] = {}
    if status_:
        where["status"] = {"in": [s.value for s in status_]}
    if type_:
        where["type"] = type_.value
    if nonconformity_id:
        where["nonconformity_id"] = nonconformity_id
    if risk_id:
        where["risk_id"] = risk_id

    plans = db.delegate(ActionPlan)
    rows = await plans.find_many(
        where, order_by=[{"due_date": "asc"}, {"code": "asc"}], limit=limit, offset=offset
    )
    total = await plans.count(where)

    return Page[ActionPlanOut](
        items=[ActionPlanOut.model_validate(row) for row in rows],
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/{plan_id}", response_model=ActionPlanOut)
async def get_action_plan(plan_id: UUID, db: TenantDbDep) -> ActionPlanOut:
    row = await db.delegate(ActionPlan).find_unique({"id": plan_id})
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Action plan not found")
    return ActionPlanOut.model_validate(row)


@router.post("", response_model=ActionPlanOut, status_code=status.HTTP_201_CREATED)
async def create_action_plan(
    body: ActionPlanCreate,
    request: Request,
    ctx: ContextDep,
    db: TenantDbDep,
) -> ActionPlanOut:
    row = await db.delegate(ActionPlan).create(body.model_dump(mode="python"))
    await log_activity(
        db, ctx, AuditAction.create, "action_plan", str(row.id),
        metadata={"code": row.code}, ip_address=get_client_ip(request),
    )
    await db.commit()
    return ActionPlanOut.model_validate(row)


@router.patch("/{plan_id}", response_model=ActionPlanOut)
async def update_action_plan(
    plan_id: UUID,
    body: ActionPlanUpdate,
    request: Request,
    ctx: ContextDep,
    db: TenantDbDep,
) -> ActionPlanOut:
    changes = body.model_dump(mode="python", exclude_unset=True)
    row = await db.delegate(ActionPlan).update({"id": plan_id}, changes)
    action = AuditAction.status_change if "status" in changes else AuditAction.update
    await log_activity(
        db, ctx, action, "action_plan", str(row.id),
        metadata={"fields": sorted(changes)}, ip_address=get_client_ip(request),
    )
    await db.commit()
    return ActionPlanOut.model_validate(row)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_action_plan(
    plan_id: UUID,
    request: Request,
    ctx: ContextDep,
    db: TenantDbDep,
) -> Response:
    row = await db.delegate(ActionPlan).delete({"id": plan_id})
    await log_activity(
        db, ctx, AuditAction.delete, "action_plan", str(row.id),
        ip_address=get_client_ip(request),
    )
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
