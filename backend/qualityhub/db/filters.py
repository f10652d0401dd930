"""Translate dict-shaped filters and orderings into SQLAlchemy clauses.

A filter is a mapping of column name to condition, combined with AND::

    {"status": "open", "severity": {"in": ["major", "critical"]}}

A plain value means equality (``None`` means IS NULL). A dict condition may
use the operators in ``OPERATORS``; several operators in one dict are ANDed.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, UniqueConstraint, inspect
from sqlalchemy.orm import InstrumentedAttribute

from backend.qualityhub.db.errors import InvalidQueryError

Where = Mapping[str, Any]
OrderBy = Mapping[str, str] | Sequence[Mapping[str, str]]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


OPERATORS: dict[str, Callable[[InstrumentedAttribute, Any], ColumnElement[bool]]] = {
    "equals": lambda col, v: col.is_(None) if v is None else col == v,
    "not": lambda col, v: col.is_not(None) if v is None else col != v,
    "in": lambda col, v: col.in_(list(v)),
    "not_in": lambda col, v: col.not_in(list(v)),
    "lt": lambda col, v: col < v,
    "lte": lambda col, v: col <= v,
    "gt": lambda col, v: col > v,
    "gte": lambda col, v: col >= v,
    "contains": lambda col, v: col.ilike(f"%{_escape_like(v)}%", escape="\\"),
    "startswith": lambda col, v: col.ilike(f"{_escape_like(v)}%", escape="\\"),
}


def column_for(model: type, name: str) -> InstrumentedAttribute:
    """Resolve a mapped column attribute by name.

    Raises:
        InvalidQueryError: If the model has no such column.
    """
    mapper = inspect(model)
    if name not in mapper.column_attrs:
        raise InvalidQueryError(f"{model.__name__} has no column '{name}'")
    return getattr(model, name)


def build_filters(model: type, where: Where | None) -> list[ColumnElement[bool]]:
    """Build a list of WHERE clauses for ``model`` from a filter mapping.

    Args:
        model: Mapped ORM class
        where: Filter mapping, or None for no filtering

    Returns:
        Clauses to AND together (empty list when unfiltered)

    Raises:
        InvalidQueryError: On unknown columns or operators.
    """
    clauses: list[ColumnElement[bool]] = []
    if not where:
        return clauses

    for name, condition in where.items():
        col = column_for(model, name)

        if not isinstance(condition, Mapping):
            clauses.append(OPERATORS["equals"](col, condition))
            continue

        if not condition:
            raise InvalidQueryError(f"Empty condition for column '{name}'")

        for op, value in condition.items():
            builder = OPERATORS.get(op)
            if builder is None:
                raise InvalidQueryError(f"Unknown filter operator '{op}' on column '{name}'")
            clauses.append(builder(col, value))

    return clauses


def build_order_by(model: type, order_by: OrderBy | None) -> list[ColumnElement[Any]]:
    """Build ORDER BY clauses from ``{"column": "asc"|"desc"}`` or a list of them."""
    if not order_by:
        return []

    items = [order_by] if isinstance(order_by, Mapping) else list(order_by)
    clauses: list[ColumnElement[Any]] = []

    for item in items:
        for name, direction in item.items():
            col = column_for(model, name)
            direction = str(direction).lower()
            if direction == "asc":
                clauses.append(col.asc())
            elif direction == "desc":
                clauses.append(col.desc())
            else:
                raise InvalidQueryError(f"Invalid sort direction '{direction}' for column '{name}'")

    return clauses


def unique_keys(model: type) -> list[frozenset[str]]:
    """Column sets that identify at most one row: primary key and unique constraints."""
    mapper = inspect(model)
    table = mapper.local_table
    by_column = {prop.columns[0].key: key for key, prop in mapper.column_attrs.items()}

    keys = [frozenset(by_column[c.key] for c in mapper.primary_key)]
    for column in table.columns:
        if column.unique:
            keys.append(frozenset({by_column[column.key]}))
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint):
            keys.append(frozenset(by_column[c.key] for c in constraint.columns))

    return keys


def require_unique_where(model: type, where: Where) -> None:
    """Check that ``where`` pins down a single row with plain equality.

    Raises:
        InvalidQueryError: If no primary key or unique column set is fully
            specified by equality conditions.
    """
    equality_keys = {
        name
        for name, condition in where.items()
        if not isinstance(condition, Mapping) and condition is not None
    }
    if not any(key <= equality_keys for key in unique_keys(model)):
        raise InvalidQueryError(
            f"{model.__name__}: unique lookup requires a primary key or unique column set"
        )
