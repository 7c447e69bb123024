"""Exception hierarchy shared by the portal services and the API layer."""

from typing import Optional


class PortalError(Exception):
    """Base class for portal errors."""


class ValidationError(PortalError):
    """Raised when an input payload is invalid."""


class PermissionDeniedError(PortalError):
    """Raised when the acting user is not allowed to perform an action."""


class NotFoundError(PortalError):
    """Raised when a referenced record does not exist."""


class DataServiceError(PortalError):
    """Raised when the hosted data service rejects or fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


__all__ = [
    "PortalError",
    "ValidationError",
    "PermissionDeniedError",
    "NotFoundError",
    "DataServiceError",
]
