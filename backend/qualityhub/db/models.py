"""SQLAlchemy ORM models for the quality-management schema."""

import uuid
from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    SmallInteger,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

JsonType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """created_at / updated_at columns maintained by the database."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class TenantScopedMixin:
    """Owning tenant column shared by every tenant-scoped table.

    Set once at creation by the tenant-scoped client and never changed.
    """

    @declared_attr
    def tenant_id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, ForeignKey("tenants.id"), nullable=False, index=True)


# --- Global tables ---


class Tenant(Base, TimestampMixin):
    """Tenant table - top-level isolation boundary."""

    __tablename__ = "tenants"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="trial")
    settings: Mapped[dict[str, Any]] = mapped_column(JsonType, nullable=False, default=dict)
    trial_ends_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class User(Base, TimestampMixin):
    """User table - identities shared across tenants via membership."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    is_super_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class TenantMember(Base):
    """Tenant membership - resolved before a tenant context exists, so not scoped."""

    __tablename__ = "tenant_members"
    __table_args__ = (UniqueConstraint("tenant_id", "user_id", name="uq_member_tenant_user"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tenant_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("tenants.id"), nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), nullable=False)
    role: Mapped[str] = mapped_column(Text, nullable=False, default="junior_consultant")
    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Plan(Base, TimestampMixin):
    """Subscription plan catalogue."""

    __tablename__ = "plans"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    max_users: Mapped[int] = mapped_column(Integer, nullable=False)
    max_projects: Mapped[int] = mapped_column(Integer, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Standard(Base, TimestampMixin):
    """Management-system standard catalogue (ISO 9001, ISO 27001, ...)."""

    __tablename__ = "standards"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="active")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class StandardClause(Base):
    """Clause of a catalogued standard."""

    __tablename__ = "standard_clauses"
    __table_args__ = (UniqueConstraint("standard_id", "code", name="uq_clause_standard_code"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    standard_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("standards.id", ondelete="CASCADE"), nullable=False
    )
    code: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


# --- Tenant-scoped tables ---


class ConsultingClient(TenantScopedMixin, TimestampMixin, Base):
    """Client organization served by a consulting tenant."""

    __tablename__ = "consulting_clients"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    contact_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    sector: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="active")


class Project(TenantScopedMixin, TimestampMixin, Base):
    """Implementation project for one or more standards."""

    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    client_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("consulting_clients.id"), nullable=True
    )
    status: Mapped[str] = mapped_column(Text, nullable=False, default="planning")
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    progress: Mapped[float] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=False, default=0)


class ProjectRequirement(TenantScopedMixin, TimestampMixin, Base):
    """Status of one standard clause within a project."""

    __tablename__ = "project_requirements"
    __table_args__ = (UniqueConstraint("tenant_id", "project_id", "clause_id", name="uq_requirement_project_clause"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    clause_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("standard_clauses.id"), nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="not_started")
    maturity: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    evidence: Mapped[str | None] = mapped_column(Text, nullable=True)


class ProjectControl(TenantScopedMixin, TimestampMixin, Base):
    """Implementation status of a standard control within a project."""

    __tablename__ = "project_controls"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    control_code: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="not_started")
    maturity: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    implementation_notes: Mapped[str | None] = mapped_column(Text, nullable=True)


class SoaEntry(TenantScopedMixin, TimestampMixin, Base):
    """Statement of Applicability entry."""

    __tablename__ = "soa_entries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False)
    control_code: Mapped[str] = mapped_column(Text, nullable=False)
    applicable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    justification: Mapped[str | None] = mapped_column(Text, nullable=True)
    implementation_status: Mapped[str | None] = mapped_column(Text, nullable=True)


class Risk(TenantScopedMixin, TimestampMixin, Base):
    """Risk register entry."""

    __tablename__ = "risks"
    __table_args__ = (Index("idx_risk_tenant_project", "tenant_id", "project_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(Text, nullable=False, default="operational")
    probability: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    impact: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    risk_level: Mapped[str] = mapped_column(Text, nullable=False, default="low")
    treatment: Mapped[str | None] = mapped_column(Text, nullable=True)
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="identified")


class Nonconformity(TenantScopedMixin, TimestampMixin, Base):
    """Nonconformity record."""

    __tablename__ = "nonconformities"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    origin: Mapped[str] = mapped_column(Text, nullable=False, default="internal_audit")
    severity: Mapped[str] = mapped_column(Text, nullable=False, default="minor")
    status: Mapped[str] = mapped_column(Text, nullable=False, default="open")
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    closed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class ActionPlan(TenantScopedMixin, TimestampMixin, Base):
    """Corrective, preventive or improvement action."""

    __tablename__ = "action_plans"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    type: Mapped[str] = mapped_column(Text, nullable=False, default="corrective")
    status: Mapped[str] = mapped_column(Text, nullable=False, default="planned")
    responsible_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    nonconformity_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("nonconformities.id"), nullable=True
    )
    risk_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("risks.id"), nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    is_effective: Mapped[bool | None] = mapped_column(Boolean, nullable=True)


class Audit(TenantScopedMixin, TimestampMixin, Base):
    """Internal or external audit."""

    __tablename__ = "audits"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="internal")
    title: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="planned")
    lead_auditor_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    scope: Mapped[str | None] = mapped_column(Text, nullable=True)
    conclusion: Mapped[str | None] = mapped_column(Text, nullable=True)


class AuditFinding(TenantScopedMixin, Base):
    """Finding recorded during an audit."""

    __tablename__ = "audit_findings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    audit_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("audits.id", ondelete="CASCADE"), nullable=False)
    classification: Mapped[str] = mapped_column(Text, nullable=False, default="observation")
    description: Mapped[str] = mapped_column(Text, nullable=False)
    evidence: Mapped[str | None] = mapped_column(Text, nullable=True)
    nonconformity_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("nonconformities.id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Document(TenantScopedMixin, TimestampMixin, Base):
    """Controlled document."""

    __tablename__ = "documents"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    code: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="procedure")
    version: Mapped[str] = mapped_column(Text, nullable=False, default="1.0")
    status: Mapped[str] = mapped_column(Text, nullable=False, default="draft")
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    file_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    author_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    next_review_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class DocumentVersion(TenantScopedMixin, Base):
    """Historical version of a controlled document."""

    __tablename__ = "document_versions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("documents.id", ondelete="CASCADE"), nullable=False
    )
    version: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    changed_by_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    change_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Indicator(TenantScopedMixin, TimestampMixin, Base):
    """Performance indicator (KPI)."""

    __tablename__ = "indicators"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    unit: Mapped[str] = mapped_column(Text, nullable=False, default="%")
    frequency: Mapped[str] = mapped_column(Text, nullable=False, default="monthly")
    target: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False, default=0)
    lower_limit: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    upper_limit: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)


class IndicatorMeasurement(TenantScopedMixin, Base):
    """Single measured value of an indicator for a period."""

    __tablename__ = "indicator_measurements"
    __table_args__ = (UniqueConstraint("tenant_id", "indicator_id", "period", name="uq_measurement_indicator_period"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    indicator_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("indicators.id", ondelete="CASCADE"), nullable=False
    )
    value: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    period: Mapped[date] = mapped_column(Date, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class ManagementReview(TenantScopedMixin, TimestampMixin, Base):
    """Management review meeting."""

    __tablename__ = "management_reviews"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    scheduled_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    actual_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="scheduled")
    minutes: Mapped[str | None] = mapped_column(Text, nullable=True)
    decisions: Mapped[list[Any]] = mapped_column(JsonType, nullable=False, default=list)


class Notification(TenantScopedMixin, Base):
    """In-app notification for a user within a tenant."""

    __tablename__ = "notifications"
    __table_args__ = (Index("idx_notification_tenant_user", "tenant_id", "user_id", "is_read"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    link: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class AuditLog(TenantScopedMixin, Base):
    """Activity log entry - who did what to which record."""

    __tablename__ = "audit_logs"
    __table_args__ = (Index("idx_audit_log_tenant_entity", "tenant_id", "entity_type", "entity_id"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    action: Mapped[str] = mapped_column(Text, nullable=False)
    entity_type: Mapped[str] = mapped_column(Text, nullable=False)
    entity_id: Mapped[str] = mapped_column(Text, nullable=False)
    metadata_: Mapped[dict[str, Any]] = mapped_column("metadata", JsonType, nullable=False, default=dict)
    ip_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class OrganizationContext(TenantScopedMixin, TimestampMixin, Base):
    """Internal/external issues analysis (context of the organization)."""

    __tablename__ = "organization_contexts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="swot")
    category: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    impact: Mapped[str | None] = mapped_column(Text, nullable=True)


class InterestedParty(TenantScopedMixin, TimestampMixin, Base):
    """Interested party and its requirements."""

    __tablename__ = "interested_parties"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("projects.id"), nullable=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(Text, nullable=False, default="external")
    needs: Mapped[str | None] = mapped_column(Text, nullable=True)
    expectations: Mapped[str | None] = mapped_column(Text, nullable=True)
    monitoring_method: Mapped[str | None] = mapped_column(Text, nullable=True)


# Every entity type whose rows must never be visible or mutable outside
# their owning tenant.
TENANT_SCOPED_MODELS: tuple[type[Base], ...] = (
    Risk,
    ActionPlan,
    Nonconformity,
    Audit,
    AuditFinding,
    Document,
    DocumentVersion,
    Indicator,
    IndicatorMeasurement,
    Project,
    ProjectRequirement,
    ProjectControl,
    SoaEntry,
    ConsultingClient,
    ManagementReview,
    Notification,
    AuditLog,
    OrganizationContext,
    InterestedParty,
)

MODEL_REGISTRY: dict[str, type[Base]] = {
    "tenant": Tenant,
    "user": User,
    "tenant_member": TenantMember,
    "plan": Plan,
    "standard": Standard,
    "standard_clause": StandardClause,
    "risk": Risk,
    "action_plan": ActionPlan,
    "nonconformity": Nonconformity,
    "audit": Audit,
    "audit_finding": AuditFinding,
    "document": Document,
    "document_version": DocumentVersion,
    "indicator": Indicator,
    "indicator_measurement": IndicatorMeasurement,
    "project": Project,
    "project_requirement": ProjectRequirement,
    "project_control": ProjectControl,
    "soa_entry": SoaEntry,
    "consulting_client": ConsultingClient,
    "management_review": ManagementReview,
    "notification": Notification,
    "audit_log": AuditLog,
    "organization_context": OrganizationContext,
    "interested_party": InterestedParty,
}
