"""Request and response schemas for tenant records and catalogues."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from backend.qualityhub.models.common import ActionStatus, ActionType, RiskLevel, RiskStatus


class RiskCreate(BaseModel):
    """Request body for POST /risks."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    code: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    category: str = "operational"
    probability: int = Field(1, ge=1, le=5)
    impact: int = Field(1, ge=1, le=5)
    risk_level: RiskLevel = RiskLevel.low
    treatment: str | None = None
    project_id: UUID | None = None
    responsible_id: UUID | None = None


class RiskUpdate(BaseModel):
    """Request body for PATCH /risks/{id}; only provided fields change."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: str | None = None
    probability: int | None = Field(None, ge=1, le=5)
    impact: int | None = Field(None, ge=1, le=5)
    risk_level: RiskLevel | None = None
    treatment: str | None = None
    status: RiskStatus | None = None
    responsible_id: UUID | None = None


class RiskOut(BaseModel):
    """Risk as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    title: str
    description: str
    category: str
    probability: int
    impact: int
    risk_level: str
    treatment: str | None
    status: str
    project_id: UUID | None
    responsible_id: UUID | None
    created_at: datetime
    updated_at: datetime


class ActionPlanCreate(BaseModel):
    """Request body for POST /action-plans."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    code: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    type: ActionType = ActionType.corrective
    due_date: date | None = None
    project_id: UUID | None = None
    responsible_id: UUID | None = None
    nonconformity_id: UUID | None = None
    risk_id: UUID | None = None


class ActionPlanUpdate(BaseModel):
    """Request body for PATCH /action-plans/{id}; only provided fields change."""

    model_config = ConfigDict(use_enum_values=True, validate_default=True)

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    status: ActionStatus | None = None
    due_date: date | None = None
    responsible_id: UUID | None = None
    is_effective: bool | None = None


class ActionPlanOut(BaseModel):
    """Action plan as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    title: str
    description: str
    type: str
    status: str
    due_date: date | None
    project_id: UUID | None
    responsible_id: UUID | None
    nonconformity_id: UUID | None
    risk_id: UUID | None
    is_effective: bool | None
    created_at: datetime
    updated_at: datetime


class StandardOut(BaseModel):
    """Catalogued standard (global, not tenant-owned)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    version: str
    year: int
    status: str
    description: str | None


class AuditLogOut(BaseModel):
    """Activity log entry."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    action: str
    entity_type: str
    entity_id: str
    metadata: dict[str, Any] = Field(validation_alias="metadata_")
    ip_address: str | None
    created_at: datetime
