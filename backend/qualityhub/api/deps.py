"""FastAPI dependencies wiring sessions, contexts and data clients."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.qualityhub.api.auth import get_current_context
from backend.qualityhub.config import Settings, get_settings
from backend.qualityhub.db.client import DataClient
from backend.qualityhub.db.context import RequestContext
from backend.qualityhub.db.engine import get_session
from backend.qualityhub.db.scoping import TenantScopedClient, tenant_client


async def get_db(session: Annotated[AsyncSession, Depends(get_session)]) -> DataClient:
    """Unrestricted client - only for global tables and administrative paths."""
    return DataClient(session)


async def get_tenant_db(
    db: Annotated[DataClient, Depends(get_db)],
    ctx: Annotated[RequestContext, Depends(get_current_context)],
) -> TenantScopedClient:
    """Client confined to the tenant of the current request."""
    return tenant_client(db, ctx.tenant_id)


SettingsDep = Annotated[Settings, Depends(get_settings)]
ContextDep = Annotated[RequestContext, Depends(get_current_context)]
DbDep = Annotated[DataClient, Depends(get_db)]
TenantDbDep = Annotated[TenantScopedClient, Depends(get_tenant_db)]
