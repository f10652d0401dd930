"""Generic async data-access client over the ORM models.

``DataClient`` hands out one ``ModelDelegate`` per entity type. A delegate
exposes the same operation set for every model (find_many, find_first,
find_unique, count, create, update, delete and their bulk variants), with
filters expressed as plain mappings (see ``db.filters``).

Writes flush but never commit; the caller owns the transaction.
"""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.qualityhub.db.errors import InvalidQueryError, RecordNotFoundError, UnknownModelError
from backend.qualityhub.db.filters import (
    OrderBy,
    Where,
    build_filters,
    build_order_by,
    require_unique_where,
)
from backend.qualityhub.db.models import MODEL_REGISTRY, Base

ModelT = TypeVar("ModelT", bound=Base)


class ModelDelegate(Generic[ModelT]):
    """Unrestricted data access for a single model."""

    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        self._session = session
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__name__

    # --- hooks overridden by scoped delegates ---

    def _scope_where(self, where: Where | None) -> Where | None:
        return where

    def _scope_data(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return dict(data)

    def _scope_changes(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return dict(data)

    async def _locate(self, where: Where, operation: str) -> ModelT:
        row = await self.find_unique(where)
        if row is None:
            raise RecordNotFoundError(self.name, operation)
        return row

    def _verify(self, row: ModelT, operation: str) -> ModelT:
        return row

    # --- helpers ---

    def _select(self, where: Where | None, order_by: OrderBy | None = None) -> Select[tuple[ModelT]]:
        stmt = select(self.model).where(*build_filters(self.model, where))
        ordering = build_order_by(self.model, order_by)
        if ordering:
            stmt = stmt.order_by(*ordering)
        return stmt

    def _check_payload(self, data: Mapping[str, Any]) -> dict[str, Any]:
        columns = inspect(self.model).column_attrs
        unknown = [key for key in data if key not in columns]
        if unknown:
            raise InvalidQueryError(f"{self.name} has no column(s): {', '.join(sorted(unknown))}")
        return dict(data)

    # --- reads ---

    async def find_many(
        self,
        where: Where | None = None,
        *,
        order_by: OrderBy | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[ModelT]:
        """Return every row matching ``where``."""
        stmt = self._select(self._scope_where(where), order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        result = await self._session.scalars(stmt)
        return list(result.all())

    async def find_first(
        self, where: Where | None = None, *, order_by: OrderBy | None = None
    ) -> ModelT | None:
        """Return the first row matching ``where``, or None."""
        stmt = self._select(self._scope_where(where), order_by).limit(1)
        result = await self._session.scalars(stmt)
        return result.first()

    async def find_unique(self, where: Where) -> ModelT | None:
        """Look a row up by primary key or unique column set.

        Raises:
            InvalidQueryError: If ``where`` does not name a unique key.
        """
        require_unique_where(self.model, where)
        result = await self._session.scalars(self._select(where))
        return result.one_or_none()

    async def count(self, where: Where | None = None) -> int:
        """Count rows matching ``where``."""
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(*build_filters(self.model, self._scope_where(where)))
        )
        return int(await self._session.scalar(stmt) or 0)

    # --- writes ---

    async def create(self, data: Mapping[str, Any]) -> ModelT:
        """Insert a row and return it with server defaults loaded."""
        row = self.model(**self._check_payload(self._scope_data(data)))
        self._session.add(row)
        await self._session.flush()
        await self._session.refresh(row)
        return self._verify(row, "create")

    async def update(self, where: Where, data: Mapping[str, Any]) -> ModelT:
        """Update the single row identified by ``where``.

        Raises:
            RecordNotFoundError: If no row matches (unscoped models).
        """
        payload = self._check_payload(self._scope_changes(data))
        row = await self._locate(where, "update")
        for key, value in payload.items():
            setattr(row, key, value)
        await self._session.flush()
        await self._session.refresh(row)
        return self._verify(row, "update")

    async def delete(self, where: Where) -> ModelT:
        """Delete the single row identified by ``where`` and return it.

        Raises:
            RecordNotFoundError: If no row matches (unscoped models).
        """
        row = await self._locate(where, "delete")
        self._verify(row, "delete")
        await self._session.delete(row)
        await self._session.flush()
        return row

    async def update_many(self, where: Where | None, data: Mapping[str, Any]) -> int:
        """Update every row matching ``where``; returns the affected row count.

        Rows are loaded and changed through the session so objects already
        held by the caller stay consistent with the database.
        """
        payload = self._check_payload(self._scope_changes(data))
        if not payload:
            return 0
        rows = await self.find_many(where)
        for row in rows:
            for key, value in payload.items():
                setattr(row, key, value)
        await self._session.flush()
        for row in rows:
            await self._session.refresh(row)
        return len(rows)

    async def delete_many(self, where: Where | None = None) -> int:
        """Delete every row matching ``where``; returns the affected row count."""
        rows = await self.find_many(where)
        for row in rows:
            await self._session.delete(row)
        await self._session.flush()
        return len(rows)


class DataClient:
    """Session-bound client exposing a delegate per registered model."""

    def __init__(
        self,
        session: AsyncSession,
        registry: Mapping[str, type[Base]] = MODEL_REGISTRY,
    ) -> None:
        self._session = session
        self._registry = dict(registry)
        self._models = set(self._registry.values())
        self._delegates: dict[type[Base], ModelDelegate[Any]] = {}

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def registry(self) -> Mapping[str, type[Base]]:
        return self._registry

    def resolve(self, entity: str | type[Base]) -> type[Base]:
        """Map a registry name or model class to a registered model class.

        Raises:
            UnknownModelError: If the entity is not registered.
        """
        if isinstance(entity, str):
            model = self._registry.get(entity)
            if model is None:
                raise UnknownModelError(f"Unknown model '{entity}'")
            return model
        if entity not in self._models:
            raise UnknownModelError(f"Model {getattr(entity, '__name__', entity)!r} is not registered")
        return entity

    def delegate(self, entity: str | type[ModelT]) -> ModelDelegate[ModelT]:
        """Return the delegate for ``entity`` (a model class or registry name)."""
        model = self.resolve(entity)
        if model not in self._delegates:
            self._delegates[model] = self._make_delegate(model)
        return self._delegates[model]

    def _make_delegate(self, model: type[Base]) -> ModelDelegate[Any]:
        return ModelDelegate(self._session, model)

    async def flush(self) -> None:
        await self._session.flush()

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()
