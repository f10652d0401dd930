"""Sample payloads for every tenant-scoped model."""

import uuid
from collections.abc import Callable
from datetime import date
from typing import Any

from backend.qualityhub.db.models import (
    ActionPlan,
    Audit,
    AuditFinding,
    AuditLog,
    Base,
    ConsultingClient,
    Document,
    DocumentVersion,
    Indicator,
    IndicatorMeasurement,
    InterestedParty,
    ManagementReview,
    Nonconformity,
    Notification,
    OrganizationContext,
    Project,
    ProjectControl,
    ProjectRequirement,
    Risk,
    SoaEntry,
)

USER_ID = uuid.UUID("00000000-0000-0000-0000-0000000000aa")


def _code() -> str:
    return f"C-{uuid.uuid4().hex[:8]}"


# Minimal valid payload per tenant-scoped model, plus one free-text column
# that tests can change. Foreign keys point at random ids: SQLite does not
# enforce them unless asked to.
SAMPLE_DATA: dict[type[Base], tuple[Callable[[], dict[str, Any]], str]] = {
    ConsultingClient: (lambda: {"name": "Acme Ltd"}, "name"),
    Project: (lambda: {"name": "ISO 9001 rollout"}, "name"),
    ProjectRequirement: (
        lambda: {"project_id": uuid.uuid4(), "clause_id": uuid.uuid4()},
        "notes",
    ),
    ProjectControl: (
        lambda: {"project_id": uuid.uuid4(), "control_code": "A.5.1"},
        "implementation_notes",
    ),
    SoaEntry: (lambda: {"project_id": uuid.uuid4(), "control_code": "A.8.2"}, "justification"),
    Risk: (lambda: {"code": _code(), "title": "Supplier failure"}, "title"),
    Nonconformity: (lambda: {"code": _code(), "title": "Missing calibration"}, "title"),
    ActionPlan: (lambda: {"code": _code(), "title": "Recalibrate gauges"}, "title"),
    Audit: (lambda: {"title": "Internal audit Q1"}, "title"),
    AuditFinding: (
        lambda: {"audit_id": uuid.uuid4(), "description": "Records incomplete"},
        "evidence",
    ),
    Document: (lambda: {"code": _code(), "title": "Quality manual"}, "title"),
    DocumentVersion: (lambda: {"document_id": uuid.uuid4(), "version": "1.0"}, "change_notes"),
    Indicator: (lambda: {"name": "On-time delivery"}, "name"),
    IndicatorMeasurement: (
        lambda: {"indicator_id": uuid.uuid4(), "value": 97.5, "period": date(2026, 1, 1)},
        "notes",
    ),
    ManagementReview: (lambda: {"status": "scheduled"}, "minutes"),
    Notification: (
        lambda: {"user_id": USER_ID, "type": "deadline", "title": "Action plan due"},
        "title",
    ),
    AuditLog: (
        lambda: {
            "user_id": USER_ID,
            "action": "create",
            "entity_type": "risk",
            "entity_id": str(uuid.uuid4()),
        },
        "entity_type",
    ),
    OrganizationContext: (
        lambda: {"category": "strength", "description": "Experienced staff"},
        "impact",
    ),
    InterestedParty: (lambda: {"name": "Customers"}, "needs"),
}


def sample_payload(model: type[Base]) -> dict[str, Any]:
    """Fresh create payload for ``model``."""
    factory, _ = SAMPLE_DATA[model]
    return factory()


def editable_field(model: type[Base]) -> str:
    """A free-text column of ``model`` that tests may overwrite."""
    return SAMPLE_DATA[model][1]
