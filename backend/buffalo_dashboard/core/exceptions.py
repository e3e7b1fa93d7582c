"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
main.py turn them into the response envelope.
"""
from typing import Optional


class AppError(Exception):
    """Base class for errors surfaced to API clients."""
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or invalid input the client can fix."""
    status_code = 400
    default_message = "Validation failed"


class UnauthorizedError(AppError):
    """Missing or invalid credentials or token."""
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    """Operation disabled for this deployment."""
    status_code = 403
    default_message = "Operation not permitted"


class NotFoundError(AppError):
    """Identifier does not resolve to a stored record."""
    status_code = 404
    default_message = "Not found"


class StoreError(AppError):
    """Underlying persistence failure."""
    status_code = 500
    default_message = "Database error"
