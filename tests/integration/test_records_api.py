"""HTTP tests for tenant-scoped record endpoints."""

import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from backend.qualityhub.config import Settings, get_settings
from backend.qualityhub.main import create_app


@pytest_asyncio.fixture
async def app(
    session_factory: async_sessionmaker[AsyncSession],
    tenants: tuple[uuid.UUID, uuid.UUID],
) -> FastAPI:
    app = create_app()
    app.state.session_factory = session_factory
    app.dependency_overrides[get_settings] = lambda: Settings(
        database_url="sqlite+aiosqlite:///:memory:", allow_dev_context=False
    )
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


def _auth(tenant_id: uuid.UUID, user_id: uuid.UUID | None = None) -> dict[str, str]:
    return {"Authorization": f"Bearer {tenant_id}:{user_id or uuid.uuid4()}"}


async def _create_risk(client: AsyncClient, owner: uuid.UUID, **fields: object) -> dict:
    body = {"code": f"R-{uuid.uuid4().hex[:6]}", "title": "Supplier failure", **fields}
    response = await client.post("/risks", json=body, headers=_auth(owner))
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_missing_authorization_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/risks")

    assert response.status_code == 401
    assert response.json() == {"detail": "Missing authorization header"}


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_tenant(
    client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    tenant_a, tenant_b = tenants

    risk = await _create_risk(client, tenant_a, tenant_id=str(tenant_b))

    listed_a = (await client.get("/risks", headers=_auth(tenant_a))).json()
    listed_b = (await client.get("/risks", headers=_auth(tenant_b))).json()
    assert [r["id"] for r in listed_a["items"]] == [risk["id"]]
    assert listed_a["total"] == 1
    assert listed_b == {"items": [], "total": 0, "limit": 50, "offset": 0}


@pytest.mark.asyncio
async def test_list_filters_and_paginates(client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]) -> None:
    tenant_a, _ = tenants
    await _create_risk(client, tenant_a, title="Data breach", risk_level="high")
    await _create_risk(client, tenant_a, title="Data centre flood", risk_level="high")
    await _create_risk(client, tenant_a, title="Late delivery", risk_level="low")

    response = await client.get(
        "/risks", params={"risk_level": "high", "q": "data", "limit": 1}, headers=_auth(tenant_a)
    )

    page = response.json()
    assert response.status_code == 200
    assert page["total"] == 2
    assert len(page["items"]) == 1
    assert page["limit"] == 1


@pytest.mark.asyncio
async def test_get_other_tenants_risk_is_not_found(
    client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    tenant_a, tenant_b = tenants
    risk = await _create_risk(client, tenant_a)

    own = await client.get(f"/risks/{risk['id']}", headers=_auth(tenant_a))
    other = await client.get(f"/risks/{risk['id']}", headers=_auth(tenant_b))

    assert own.status_code == 200
    assert own.json()["title"] == "Supplier failure"
    assert other.status_code == 404


@pytest.mark.asyncio
async def test_cross_tenant_patch_and_delete_are_forbidden(
    client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    tenant_a, tenant_b = tenants
    risk = await _create_risk(client, tenant_a)

    patched = await client.patch(f"/risks/{risk['id']}", json={"title": "Hijacked"}, headers=_auth(tenant_b))
    deleted = await client.delete(f"/risks/{risk['id']}", headers=_auth(tenant_b))

    assert patched.status_code == 403
    assert patched.json() == {"detail": "Access denied"}
    assert deleted.status_code == 403
    stored = (await client.get(f"/risks/{risk['id']}", headers=_auth(tenant_a))).json()
    assert stored["title"] == "Supplier failure"


@pytest.mark.asyncio
async def test_patch_unknown_id_is_forbidden_too(
    client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    response = await client.patch(f"/risks/{uuid.uuid4()}", json={"title": "x"}, headers=_auth(tenants[0]))

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_own_update_and_delete(client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]) -> None:
    tenant_a, _ = tenants
    risk = await _create_risk(client, tenant_a)

    patched = await client.patch(f"/risks/{risk['id']}", json={"status": "treated"}, headers=_auth(tenant_a))
    deleted = await client.delete(f"/risks/{risk['id']}", headers=_auth(tenant_a))
    gone = await client.get(f"/risks/{risk['id']}", headers=_auth(tenant_a))

    assert patched.status_code == 200
    assert patched.json()["status"] == "treated"
    assert deleted.status_code == 204
    assert gone.status_code == 404


@pytest.mark.asyncio
async def test_mutations_are_recorded_in_audit_log(
    client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    tenant_a, tenant_b = tenants
    risk = await _create_risk(client, tenant_a)
    await client.patch(
        f"/risks/{risk['id']}",
        json={"status": "analyzed"},
        headers={**_auth(tenant_a), "X-Forwarded-For": "198.51.100.4"},
    )

    logs_a = (await client.get("/audit-logs", params={"entity_id": risk["id"]}, headers=_auth(tenant_a))).json()
    logs_b = (await client.get("/audit-logs", params={"entity_id": risk["id"]}, headers=_auth(tenant_b))).json()

    assert sorted(entry["action"] for entry in logs_a["items"]) == ["create", "status_change"]
    assert {entry["entity_type"] for entry in logs_a["items"]} == {"risk"}
    assert "198.51.100.4" in {entry["ip_address"] for entry in logs_a["items"]}
    assert logs_b["total"] == 0


@pytest.mark.asyncio
async def test_action_plan_lifecycle(client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]) -> None:
    tenant_a, tenant_b = tenants
    headers = _auth(tenant_a)

    created = await client.post(
        "/action-plans",
        json={"code": "AP-1", "title": "Retrain operators", "type": "preventive", "due_date": "2026-12-01"},
        headers=headers,
    )
    plan = created.json()
    await client.post("/action-plans", json={"code": "AP-2", "title": "Replace gauge"}, headers=headers)

    patched = await client.patch(f"/action-plans/{plan['id']}", json={"status": "in_progress"}, headers=headers)
    in_progress = await client.get("/action-plans", params={"status": "in_progress"}, headers=headers)
    foreign = await client.patch(
        f"/action-plans/{plan['id']}", json={"status": "completed"}, headers=_auth(tenant_b)
    )

    assert created.status_code == 201
    assert plan["type"] == "preventive"
    assert plan["status"] == "planned"
    assert patched.json()["status"] == "in_progress"
    assert [p["code"] for p in in_progress.json()["items"]] == ["AP-1"]
    assert foreign.status_code == 403


@pytest.mark.asyncio
async def test_standards_are_shared_across_tenants(
    client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    tenant_a, tenant_b = tenants

    seen_a = (await client.get("/standards", headers=_auth(tenant_a))).json()
    seen_b = (await client.get("/standards", headers=_auth(tenant_b))).json()

    assert [s["code"] for s in seen_a] == ["ISO27001", "ISO9001"]
    assert seen_a == seen_b


@pytest.mark.asyncio
async def test_invalid_payload_is_rejected(client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]) -> None:
    response = await client.post(
        "/risks", json={"code": "R-1", "title": "x", "probability": 9}, headers=_auth(tenants[0])
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_page_size_follows_injected_settings(
    app: FastAPI, client: AsyncClient, tenants: tuple[uuid.UUID, uuid.UUID]
) -> None:
    tenant_a, _ = tenants
    app.dependency_overrides[get_settings] = lambda: Settings(
        database_url="sqlite+aiosqlite:///:memory:", default_page_size=2, max_page_size=3
    )
    for _ in range(4):
        await _create_risk(client, tenant_a)

    default_page = (await client.get("/risks", headers=_auth(tenant_a))).json()
    capped_page = (await client.get("/risks", params={"limit": 100}, headers=_auth(tenant_a))).json()
    capped_logs = (await client.get("/audit-logs", params={"limit": 100}, headers=_auth(tenant_a))).json()

    assert default_page["limit"] == 2
    assert len(default_page["items"]) == 2
    assert default_page["total"] == 4
    assert capped_page["limit"] == 3
    assert len(capped_page["items"]) == 3
    assert capped_logs["limit"] == 3
