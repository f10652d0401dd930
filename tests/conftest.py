"""Shared pytest fixtures for all test suites."""

import uuid
from collections.abc import AsyncGenerator
from typing import Any

import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.qualityhub.db.client import DataClient
from backend.qualityhub.db.engine import create_session_factory
from backend.qualityhub.db.models import Base, Standard, Tenant
from backend.qualityhub.db.scoping import TenantScopedClient, tenant_client


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the full schema.

    StaticPool keeps a single connection so every session sees the same
    database. The connect/begin listeners let aiosqlite run SAVEPOINTs.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def tenants(session_factory: async_sessionmaker[AsyncSession]) -> tuple[uuid.UUID, uuid.UUID]:
    """Two committed tenants, A and B."""
    async with session_factory() as seed:
        db = DataClient(seed)
        tenant_a = await db.delegate(Tenant).create({"name": "Tenant A", "slug": "tenant-a"})
        tenant_b = await db.delegate(Tenant).create({"name": "Tenant B", "slug": "tenant-b"})
        await db.delegate(Standard).create(
            {"code": "ISO9001", "name": "Quality management systems", "version": "2015", "year": 2015}
        )
        await db.delegate(Standard).create(
            {"code": "ISO27001", "name": "Information security", "version": "2022", "year": 2022}
        )
        await db.commit()
        return tenant_a.id, tenant_b.id


@pytest_asyncio.fixture
async def db(session: AsyncSession) -> DataClient:
    return DataClient(session)


@pytest_asyncio.fixture
async def db_a(db: DataClient, tenants: tuple[uuid.UUID, uuid.UUID]) -> TenantScopedClient:
    return tenant_client(db, tenants[0])


@pytest_asyncio.fixture
async def db_b(db: DataClient, tenants: tuple[uuid.UUID, uuid.UUID]) -> TenantScopedClient:
    return tenant_client(db, tenants[1])
