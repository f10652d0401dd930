"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18

Creates the global catalogue tables (tenants, users, tenant_members, plans,
standards, standard_clauses) and the tenant-owned tables, each of which
carries an indexed, non-null tenant_id.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _id() -> sa.Column:
    return sa.Column(
        "id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")
    )


def _tenant() -> sa.Column:
    return sa.Column("tenant_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("tenants.id"), nullable=False)


def _project(nullable: bool = True) -> sa.Column:
    ondelete = None if nullable else "CASCADE"
    return sa.Column(
        "project_id",
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("projects.id", ondelete=ondelete),
        nullable=nullable,
    )


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _updated_at() -> sa.Column:
    return sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


# Tenant-owned tables in creation order (dependencies first).
TENANT_TABLES = (
    "consulting_clients",
    "projects",
    "project_requirements",
    "project_controls",
    "soa_entries",
    "risks",
    "nonconformities",
    "action_plans",
    "audits",
    "audit_findings",
    "documents",
    "document_versions",
    "indicators",
    "indicator_measurements",
    "management_reviews",
    "notifications",
    "audit_logs",
    "organization_contexts",
    "interested_parties",
)


def upgrade() -> None:
    """Create all tables."""
    uuid_type = postgresql.UUID(as_uuid=True)

    # --- global tables ---
    op.create_table(
        "tenants",
        _id(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("slug", sa.Text(), nullable=False, unique=True),
        sa.Column("status", sa.Text(), server_default="trial", nullable=False),
        sa.Column("settings", postgresql.JSONB(), server_default=sa.text("'{}'::jsonb"), nullable=False),
        sa.Column("trial_ends_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.Text(), nullable=False, unique=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("is_super_admin", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "tenant_members",
        _id(),
        sa.Column("tenant_id", uuid_type, sa.ForeignKey("tenants.id"), nullable=False),
        sa.Column("user_id", uuid_type, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("role", sa.Text(), server_default="junior_consultant", nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.UniqueConstraint("tenant_id", "user_id", name="uq_member_tenant_user"),
    )

    op.create_table(
        "plans",
        _id(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("slug", sa.Text(), nullable=False, unique=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("max_users", sa.Integer(), nullable=False),
        sa.Column("max_projects", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "standards",
        _id(),
        sa.Column("code", sa.Text(), nullable=False, unique=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("version", sa.Text(), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("status", sa.Text(), server_default="active", nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "standard_clauses",
        _id(),
        sa.Column("standard_id", uuid_type, sa.ForeignKey("standards.id", ondelete="CASCADE"), nullable=False),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        sa.UniqueConstraint("standard_id", "code", name="uq_clause_standard_code"),
    )

    # --- tenant-owned tables ---
    op.create_table(
        "consulting_clients",
        _id(),
        _tenant(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("contact_name", sa.Text(), nullable=True),
        sa.Column("contact_email", sa.Text(), nullable=True),
        sa.Column("sector", sa.Text(), nullable=True),
        sa.Column("status", sa.Text(), server_default="active", nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "projects",
        _id(),
        _tenant(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("client_id", uuid_type, sa.ForeignKey("consulting_clients.id"), nullable=True),
        sa.Column("status", sa.Text(), server_default="planning", nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("progress", sa.Numeric(5, 2), server_default="0", nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "project_requirements",
        _id(),
        _tenant(),
        _project(nullable=False),
        sa.Column("clause_id", uuid_type, sa.ForeignKey("standard_clauses.id"), nullable=False),
        sa.Column("status", sa.Text(), server_default="not_started", nullable=False),
        sa.Column("maturity", sa.SmallInteger(), server_default="0", nullable=False),
        sa.Column("responsible_id", uuid_type, nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("evidence", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
        sa.UniqueConstraint("tenant_id", "project_id", "clause_id", name="uq_requirement_project_clause"),
    )

    op.create_table(
        "project_controls",
        _id(),
        _tenant(),
        _project(nullable=False),
        sa.Column("control_code", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), server_default="not_started", nullable=False),
        sa.Column("maturity", sa.SmallInteger(), server_default="0", nullable=False),
        sa.Column("implementation_notes", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "soa_entries",
        _id(),
        _tenant(),
        _project(nullable=False),
        sa.Column("control_code", sa.Text(), nullable=False),
        sa.Column("applicable", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("justification", sa.Text(), nullable=True),
        sa.Column("implementation_status", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "risks",
        _id(),
        _tenant(),
        _project(),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("category", sa.Text(), server_default="operational", nullable=False),
        sa.Column("probability", sa.SmallInteger(), server_default="1", nullable=False),
        sa.Column("impact", sa.SmallInteger(), server_default="1", nullable=False),
        sa.Column("risk_level", sa.Text(), server_default="low", nullable=False),
        sa.Column("treatment", sa.Text(), nullable=True),
        sa.Column("responsible_id", uuid_type, nullable=True),
        sa.Column("status", sa.Text(), server_default="identified", nullable=False),
        _created_at(),
        _updated_at(),
    )
    op.create_index("idx_risk_tenant_project", "risks", ["tenant_id", "project_id"])

    op.create_table(
        "nonconformities",
        _id(),
        _tenant(),
        _project(),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("origin", sa.Text(), server_default="internal_audit", nullable=False),
        sa.Column("severity", sa.Text(), server_default="minor", nullable=False),
        sa.Column("status", sa.Text(), server_default="open", nullable=False),
        sa.Column("responsible_id", uuid_type, nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("closed_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "action_plans",
        _id(),
        _tenant(),
        _project(),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("type", sa.Text(), server_default="corrective", nullable=False),
        sa.Column("status", sa.Text(), server_default="planned", nullable=False),
        sa.Column("responsible_id", uuid_type, nullable=True),
        sa.Column("nonconformity_id", uuid_type, sa.ForeignKey("nonconformities.id"), nullable=True),
        sa.Column("risk_id", uuid_type, sa.ForeignKey("risks.id"), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_effective", sa.Boolean(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "audits",
        _id(),
        _tenant(),
        _project(),
        sa.Column("type", sa.Text(), server_default="internal", nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("status", sa.Text(), server_default="planned", nullable=False),
        sa.Column("lead_auditor_id", uuid_type, nullable=True),
        sa.Column("scope", sa.Text(), nullable=True),
        sa.Column("conclusion", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "audit_findings",
        _id(),
        _tenant(),
        sa.Column("audit_id", uuid_type, sa.ForeignKey("audits.id", ondelete="CASCADE"), nullable=False),
        sa.Column("classification", sa.Text(), server_default="observation", nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("evidence", sa.Text(), nullable=True),
        sa.Column("nonconformity_id", uuid_type, sa.ForeignKey("nonconformities.id"), nullable=True),
        _created_at(),
    )

    op.create_table(
        "documents",
        _id(),
        _tenant(),
        _project(),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), server_default="procedure", nullable=False),
        sa.Column("version", sa.Text(), server_default="1.0", nullable=False),
        sa.Column("status", sa.Text(), server_default="draft", nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("file_url", sa.Text(), nullable=True),
        sa.Column("author_id", uuid_type, nullable=True),
        sa.Column("next_review_date", sa.Date(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "document_versions",
        _id(),
        _tenant(),
        sa.Column("document_id", uuid_type, sa.ForeignKey("documents.id", ondelete="CASCADE"), nullable=False),
        sa.Column("version", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("changed_by_id", uuid_type, nullable=True),
        sa.Column("change_notes", sa.Text(), nullable=True),
        _created_at(),
    )

    op.create_table(
        "indicators",
        _id(),
        _tenant(),
        _project(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("unit", sa.Text(), server_default="%", nullable=False),
        sa.Column("frequency", sa.Text(), server_default="monthly", nullable=False),
        sa.Column("target", sa.Numeric(12, 2), server_default="0", nullable=False),
        sa.Column("lower_limit", sa.Numeric(12, 2), nullable=True),
        sa.Column("upper_limit", sa.Numeric(12, 2), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "indicator_measurements",
        _id(),
        _tenant(),
        sa.Column("indicator_id", uuid_type, sa.ForeignKey("indicators.id", ondelete="CASCADE"), nullable=False),
        sa.Column("value", sa.Numeric(12, 2), nullable=False),
        sa.Column("period", sa.Date(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
        sa.UniqueConstraint("tenant_id", "indicator_id", "period", name="uq_measurement_indicator_period"),
    )

    op.create_table(
        "management_reviews",
        _id(),
        _tenant(),
        _project(),
        sa.Column("scheduled_date", sa.Date(), nullable=True),
        sa.Column("actual_date", sa.Date(), nullable=True),
        sa.Column("status", sa.Text(), server_default="scheduled", nullable=False),
        sa.Column("minutes", sa.Text(), nullable=True),
        sa.Column("decisions", postgresql.JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "notifications",
        _id(),
        _tenant(),
        sa.Column("user_id", uuid_type, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), server_default="", nullable=False),
        sa.Column("link", sa.Text(), nullable=True),
        sa.Column("is_read", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        _created_at(),
    )
    op.create_index("idx_notification_tenant_user", "notifications", ["tenant_id", "user_id", "is_read"])

    op.create_table(
        "audit_logs",
        _id(),
        _tenant(),
        sa.Column("user_id", uuid_type, nullable=False),
        sa.Column("action", sa.Text(), nullable=False),
        sa.Column("entity_type", sa.Text(), nullable=False),
        sa.Column("entity_id", sa.Text(), nullable=False),
        sa.Column("metadata", postgresql.JSONB(), server_default=sa.text("'{}'::jsonb"), nullable=False),
        sa.Column("ip_address", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("idx_audit_log_tenant_entity", "audit_logs", ["tenant_id", "entity_type", "entity_id"])

    op.create_table(
        "organization_contexts",
        _id(),
        _tenant(),
        _project(),
        sa.Column("type", sa.Text(), server_default="swot", nullable=False),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("impact", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "interested_parties",
        _id(),
        _tenant(),
        _project(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), server_default="external", nullable=False),
        sa.Column("needs", sa.Text(), nullable=True),
        sa.Column("expectations", sa.Text(), nullable=True),
        sa.Column("monitoring_method", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    # Every tenant-owned table is filtered by tenant_id on every query
    for table in TENANT_TABLES:
        op.create_index(f"ix_{table}_tenant_id", table, ["tenant_id"])


def downgrade() -> None:
    """Drop all tables."""
    for table in reversed(TENANT_TABLES):
        op.drop_table(table)
    op.drop_table("standard_clauses")
    op.drop_table("standards")
    op.drop_table("plans")
    op.drop_table("tenant_members")
    op.drop_table("users")
    op.drop_table("tenants")
