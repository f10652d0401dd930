"""Tenant-scoping wrapper around the generic data-access client.

``tenant_client(client, tenant_id)`` returns a handle with the same shape as
``DataClient``. For every model in ``TENANT_SCOPED_MODELS`` the handle's
delegate enforces tenant isolation on every operation:

* find_many / find_first / count / update_many / delete_many merge
  ``tenant_id`` into the caller's filter, overriding any caller value.
* find_unique runs the lookup as given and hides rows owned by another
  tenant, so guessing ids from another tenant looks like "not found".
* create stamps ``tenant_id`` into the payload, overriding any caller value.
* update / delete load the target with ``tenant_id`` in the WHERE clause, so
  a cross-tenant write never executes, and raise ``TenantAccessDenied`` when
  nothing matches. Ownership of the written row is verified again afterwards.

Models outside the scoped set are passed through to the plain delegate.
"""

import uuid
from collections.abc import Mapping
from typing import Any

from backend.qualityhub.db.client import DataClient, ModelDelegate, ModelT
from backend.qualityhub.db.errors import InvalidQueryError, TenantAccessDenied
from backend.qualityhub.db.filters import Where, require_unique_where
from backend.qualityhub.db.models import TENANT_SCOPED_MODELS, Base
from backend.qualityhub.utils.logging import StructuredAccessLogger
from backend.qualityhub.utils.metrics import PrometheusIsolationMetrics

TENANT_COLUMN = "tenant_id"

_access_logger = StructuredAccessLogger()
_metrics = PrometheusIsolationMetrics()


class TenantScopedDelegate(ModelDelegate[ModelT]):
    """Delegate that confines every operation to one tenant."""

    def __init__(self, client: DataClient, model: type[ModelT], tenant_id: uuid.UUID) -> None:
        super().__init__(client.session, model)
        self.tenant_id = tenant_id

    def _blocked(self, operation: str, reason: str) -> None:
        _access_logger.log_blocked(self.tenant_id, self.name, operation, reason)
        _metrics.inc_blocked(self.name, operation)

    def _owns(self, row: Any) -> bool:
        return getattr(row, TENANT_COLUMN) == self.tenant_id

    def _scope_where(self, where: Where | None) -> Where:
        return {**(where or {}), TENANT_COLUMN: self.tenant_id}

    def _scope_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {**data, TENANT_COLUMN: self.tenant_id}

    def _scope_changes(self, data: Mapping[str, Any]) -> dict[str, Any]:
        # tenant_id is immutable after creation
        return {key: value for key, value in data.items() if key != TENANT_COLUMN}

    async def find_unique(self, where: Where) -> ModelT | None:
        row = await super().find_unique(where)
        if row is not None and not self._owns(row):
            self._blocked("find_unique", "record owned by another tenant")
            return None
        return row

    async def _locate(self, where: Where, operation: str) -> ModelT:
        require_unique_where(self.model, where)
        result = await self._session.scalars(self._select(self._scope_where(where)))
        row = result.one_or_none()
        if row is None:
            self._blocked(operation, "no matching record in tenant")
            raise TenantAccessDenied(self.name, operation)
        return row

    def _verify(self, row: ModelT, operation: str) -> ModelT:
        if not self._owns(row):
            self._blocked(operation, "record owned by another tenant")
            raise TenantAccessDenied(self.name, operation)
        return row


class TenantScopedClient(DataClient):
    """``DataClient`` whose tenant-scoped models are confined to one tenant."""

    def __init__(self, client: DataClient, tenant_id: uuid.UUID) -> None:
        super().__init__(client.session, client.registry)
        self.tenant_id = tenant_id

    def is_scoped(self, entity: str | type[Base]) -> bool:
        return self.resolve(entity) in TENANT_SCOPED_MODELS

    def _make_delegate(self, model: type[Base]) -> ModelDelegate[Any]:
        if model in TENANT_SCOPED_MODELS:
            return TenantScopedDelegate(self, model, self.tenant_id)
        return super()._make_delegate(model)


def _coerce_tenant_id(tenant_id: uuid.UUID | str) -> uuid.UUID:
    if isinstance(tenant_id, uuid.UUID):
        return tenant_id
    try:
        return uuid.UUID(str(tenant_id))
    except ValueError as e:
        raise InvalidQueryError(f"Invalid tenant id: {tenant_id!r}") from e


def tenant_client(client: DataClient, tenant_id: uuid.UUID | str) -> TenantScopedClient:
    """Build a tenant-confined handle sharing ``client``'s session.

    Args:
        client: Unrestricted data client
        tenant_id: Tenant resolved for the current request

    Returns:
        Handle enforcing isolation for tenant-scoped models and passing
        every other model through unchanged

    Raises:
        InvalidQueryError: If ``tenant_id`` is not a valid UUID.
    """
    return TenantScopedClient(client, _coerce_tenant_id(tenant_id))
