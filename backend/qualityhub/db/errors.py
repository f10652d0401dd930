"""Data-access error taxonomy."""


class DataAccessError(Exception):
    """Base class for errors raised by the data-access layer."""


class InvalidQueryError(DataAccessError, ValueError):
    """Filter, ordering or payload refers to something the model does not have."""


class UnknownModelError(DataAccessError, KeyError):
    """Entity name or class is not registered with the client."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown model"


class RecordNotFoundError(DataAccessError):
    """A single-record mutation matched no row."""

    def __init__(self, model: str, operation: str) -> None:
        super().__init__(f"{model}: no record found for {operation}")
        self.model = model
        self.operation = operation


class TenantAccessDenied(DataAccessError):
    """A mutation targeted a record outside the current tenant.

    Raised both for records owned by another tenant and for records that do
    not exist at all, so callers cannot probe other tenants' ids.
    """

    def __init__(self, model: str, operation: str) -> None:
        super().__init__("Access denied: record belongs to another tenant")
        self.model = model
        self.operation = operation
