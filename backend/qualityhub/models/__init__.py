"""Models package - re-exports for convenience."""

from backend.qualityhub.models.common import (
    ActionStatus,
    ActionType,
    Page,
    RiskLevel,
    RiskStatus,
)
from backend.qualityhub.models.records import (
    ActionPlanCreate,
    ActionPlanOut,
    ActionPlanUpdate,
    AuditLogOut,
    RiskCreate,
    RiskOut,
    RiskUpdate,
    StandardOut,
)

__all__ = [
    # Common
    "ActionStatus",
    "ActionType",
    "Page",
    "RiskLevel",
    "RiskStatus",
    # Records
    "ActionPlanCreate",
    "ActionPlanOut",
    "ActionPlanUpdate",
    "AuditLogOut",
    "RiskCreate",
    "RiskOut",
    "RiskUpdate",
    "StandardOut",
]
