"""Customer domain exceptions.

Raised by the service layer when a business rule is violated or a target
row is missing. The API layer translates them into HTTP responses through
the handlers registered in ``customer_service.api.main``.
"""

from __future__ import annotations

from typing import Any


class CustomerServiceError(Exception):
    """Base class for errors surfaced to API clients.

    Subclasses set ``status_code``; the API handler uses it as the HTTP status.
    """

    status_code: int

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message}


class CustomerAlreadyExistsError(CustomerServiceError):
    """A customer with the same first name already exists."""

    status_code = 409

    def __init__(self):
        super().__init__("Customer already exists")


class CustomerNotFoundError(CustomerServiceError):
    """A read found no customer (by id, or on the requested page)."""

    status_code = 404

    def __init__(self):
        super().__init__("Customer not found")


class ResourceNotFoundError(CustomerServiceError):
    """An update or delete target does not exist.

    Carries the resource name, the key field name and the key value so that
    clients can tell which lookup failed.
    """

    status_code = 404

    def __init__(self, resource_name: str, field_name: str, field_value: Any):
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value
        super().__init__(f"Resource {resource_name} not found with name {field_name} and id {field_value}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.message,
            "resource": self.resource_name,
            "field": self.field_name,
            "value": self.field_value,
        }
