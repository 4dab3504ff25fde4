"""
Service-level exceptions.

Services raise these; API routers translate them into HTTP errors.
"""
from typing import Optional


class ServiceError(Exception):
    """Base class for failures surfaced to API callers as client errors."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class NotFound(ServiceError):
    """A referenced task, label or task list does not exist."""
    status_code = 404


class AlreadyExists(ServiceError):
    """
    Creation or update would violate a uniqueness rule.

    `field` names the unique field that collided (e.g. "title", "name", "color").
    """
    status_code = 409

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
