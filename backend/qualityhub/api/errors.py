"""Map data-layer errors to HTTP responses.

Cross-tenant reads already surface as "not found" (None / empty results);
cross-tenant writes raise ``TenantAccessDenied`` and become a generic 403
that never reveals whether the record exists elsewhere.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from backend.qualityhub.db.errors import (
    InvalidQueryError,
    RecordNotFoundError,
    TenantAccessDenied,
    UnknownModelError,
)


async def tenant_access_denied_handler(request: Request, exc: TenantAccessDenied) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": "Access denied"})


async def record_not_found_handler(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not found"})


async def invalid_query_handler(request: Request, exc: InvalidQueryError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def unknown_model_handler(request: Request, exc: UnknownModelError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not found"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the data-layer exception handlers on ``app``."""
    app.add_exception_handler(TenantAccessDenied, tenant_access_denied_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RecordNotFoundError, record_not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidQueryError, invalid_query_handler)  # type: ignore[arg-type]
    app.add_exception_handler(UnknownModelError, unknown_model_handler)  # type: ignore[arg-type]
