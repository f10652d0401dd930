"""Request context for tenancy enforcement."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class RequestContext:
    """Request context containing tenant and user identity.

    Built once per request by the auth dependency and handed to the
    tenant-scoped client. Never persisted.
    """

    tenant_id: UUID
    user_id: UUID
