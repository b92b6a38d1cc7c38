"""
Domain errors raised by the services.

Each error carries the HTTP status it maps to; the handlers registered in
``src.main`` turn them into ``{"error": message}`` responses.
"""

from typing import Optional


class ComplaintDeskError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ValidationError(ComplaintDeskError):
    """Missing or malformed input."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthError(ComplaintDeskError):
    """Bad credentials. Never says which half of the pair was wrong."""

    status_code = 401
    code = "AUTH_FAILED"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class NotFoundError(ComplaintDeskError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(ComplaintDeskError):
    """Duplicate email or duplicate complaint id."""

    status_code = 409
    code = "CONFLICT"


class StorageError(ComplaintDeskError):
    """Database or filesystem failure. The message is logged, not returned."""

    status_code = 500
    code = "STORAGE_ERROR"

    def to_dict(self) -> dict:
        return {"error": "Internal server error"}
