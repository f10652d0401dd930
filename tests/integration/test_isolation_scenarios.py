"""End-to-end isolation scenarios between two tenants sharing one session."""

import pytest

from backend.qualityhub.db.client import DataClient
from backend.qualityhub.db.errors import TenantAccessDenied
from backend.qualityhub.db.models import ActionPlan, Document, Risk, Standard
from backend.qualityhub.db.scoping import TenantScopedClient


@pytest.mark.asyncio
async def test_risk_created_with_foreign_tenant_id_is_stored_under_creator(
    db: DataClient, db_a: TenantScopedClient, db_b: TenantScopedClient
) -> None:
    risk = await db_a.delegate(Risk).create(
        {"code": "R-001", "title": "Key supplier insolvency", "tenant_id": db_b.tenant_id}
    )

    stored = await db.delegate(Risk).find_unique({"id": risk.id})
    assert stored.tenant_id == db_a.tenant_id
    assert await db_b.delegate(Risk).count() == 0


@pytest.mark.asyncio
async def test_document_lookup_from_other_tenant_returns_nothing(
    db_a: TenantScopedClient, db_b: TenantScopedClient
) -> None:
    doc = await db_a.delegate(Document).create({"code": "DOC-1", "title": "Quality manual"})

    assert await db_b.delegate(Document).find_unique({"id": doc.id}) is None
    assert await db_a.delegate(Document).find_unique({"id": doc.id}) is not None


@pytest.mark.asyncio
async def test_action_plan_update_from_other_tenant_is_denied(
    db: DataClient, db_a: TenantScopedClient, db_b: TenantScopedClient
) -> None:
    plan = await db_a.delegate(ActionPlan).create(
        {"code": "AP-1", "title": "Retrain operators", "status": "planned"}
    )

    with pytest.raises(TenantAccessDenied):
        await db_b.delegate(ActionPlan).update({"id": plan.id}, {"status": "completed"})

    stored = await db.delegate(ActionPlan).find_unique({"id": plan.id})
    assert stored.status == "planned"
    assert stored.title == "Retrain operators"


@pytest.mark.asyncio
async def test_counts_are_per_tenant(db_a: TenantScopedClient, db_b: TenantScopedClient) -> None:
    for i in range(3):
        await db_a.delegate(Risk).create({"code": f"A-{i}", "title": f"Risk A{i}"})
    for i in range(5):
        await db_b.delegate(Risk).create({"code": f"B-{i}", "title": f"Risk B{i}"})

    assert await db_a.delegate(Risk).count() == 3
    assert await db_b.delegate(Risk).count() == 5


@pytest.mark.asyncio
async def test_global_catalogue_is_shared(db: DataClient, db_a: TenantScopedClient) -> None:
    raw = await db.delegate(Standard).find_many(order_by={"code": "asc"})
    via_tenant = await db_a.delegate(Standard).find_many(order_by={"code": "asc"})

    assert [s.code for s in via_tenant] == [s.code for s in raw] == ["ISO27001", "ISO9001"]


@pytest.mark.asyncio
async def test_filters_are_combined_with_tenant_scope(
    db_a: TenantScopedClient, db_b: TenantScopedClient
) -> None:
    await db_a.delegate(Risk).create({"code": "A-1", "title": "Data breach", "risk_level": "high"})
    await db_a.delegate(Risk).create({"code": "A-2", "title": "Power outage", "risk_level": "low"})
    await db_b.delegate(Risk).create({"code": "B-1", "title": "Data loss", "risk_level": "high"})

    rows = await db_a.delegate(Risk).find_many(
        {"title": {"contains": "data"}, "risk_level": {"in": ["high", "critical"]}}
    )

    assert [r.code for r in rows] == ["A-1"]


@pytest.mark.asyncio
async def test_pagination_within_tenant(db_a: TenantScopedClient, db_b: TenantScopedClient) -> None:
    for i in range(5):
        await db_a.delegate(Risk).create({"code": f"A-{i}", "title": f"Risk {i}"})
    await db_b.delegate(Risk).create({"code": "A-9", "title": "Other tenant"})

    page = await db_a.delegate(Risk).find_many(order_by={"code": "asc"}, limit=2, offset=2)
    first = await db_a.delegate(Risk).find_first(order_by={"code": "desc"})

    assert [r.code for r in page] == ["A-2", "A-3"]
    assert first.code == "A-4"
