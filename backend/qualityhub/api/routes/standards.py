"""Standards catalogue endpoints.

Standards are global reference data shared by every tenant, so reads go
through the tenant client's passthrough delegate rather than a scoped one.
"""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from backend.qualityhub.api.deps import TenantDbDep
from backend.qualityhub.db.models import Standard
from backend.qualityhub.models.records import StandardOut

router = APIRouter(prefix="/standards", tags=["standards"])


@router.get("", response_model=list[StandardOut])
async def list_standards(db: TenantDbDep, active_only: bool = True) -> list[StandardOut]:
    """List catalogued standards."""
    where = {"status": "active"} if active_only else None
    rows = await db.delegate(Standard).find_many(where, order_by={"code": "asc"})
    return [StandardOut.model_validate(row) for row in rows]


@router.get("/{standard_id}", response_model=StandardOut)
async def get_standard(standard_id: UUID, db: TenantDbDep) -> StandardOut:
    row = await db.delegate(Standard).find_unique({"id": standard_id})
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Standard not found")
    return StandardOut.model_validate(row)
