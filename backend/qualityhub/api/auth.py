"""Request context resolution.

Session handling lives with the external identity provider. This dependency
only turns an already-resolved ``Bearer <tenant_id>:<user_id>`` credential
into a ``RequestContext``.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from backend.qualityhub.config import Settings, get_settings
from backend.qualityhub.db.context import RequestContext


async def get_current_context(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Extract request context from authorization header.

    Args:
        settings: Application settings
        authorization: Authorization header (e.g., "Bearer <tenant_id>:<user_id>")

    Returns:
        RequestContext with tenant_id and user_id

    Raises:
        HTTPException: If authorization is missing or invalid
    """
    if not authorization:
        if settings.allow_dev_context:
            return RequestContext(tenant_id=settings.dev_tenant_id, user_id=settings.dev_user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = authorization[7:]  # Strip "Bearer "

    if ":" not in token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid bearer token (expected tenant_id:user_id)",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        tenant_id_str, user_id_str = token.split(":", 1)
        return RequestContext(
            tenant_id=uuid.UUID(tenant_id_str),
            user_id=uuid.UUID(user_id_str),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token format (expected tenant_id:user_id)",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
