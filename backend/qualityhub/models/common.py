"""Common types and enums shared across API schemas."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class RiskStatus(str, Enum):
    """Risk lifecycle status."""

    identified = "identified"
    analyzed = "analyzed"
    treated = "treated"
    accepted = "accepted"
    closed = "closed"


class RiskLevel(str, Enum):
    """Risk level derived from probability x impact."""

    low = "low"
    medium = "medium"
    high = "high"
    critical = "critical"


class ActionType(str, Enum):
    """Kind of action plan."""

    corrective = "corrective"
    preventive = "preventive"
    improvement = "improvement"


class ActionStatus(str, Enum):
    """Action plan status."""

    planned = "planned"
    in_progress = "in_progress"
    completed = "completed"
    verified = "verified"
    effective = "effective"
    ineffective = "ineffective"


class Page(BaseModel, Generic[T]):
    """One page of a listing plus the total for the same filter."""

    items: list[T]
    total: int
    limit: int
    offset: int
