"""
Domain exceptions for the Design Studio backend.

Every error carries the HTTP status it maps to, so the API error handlers
can translate them without knowing about individual services.
"""

from typing import Any


class DesignStudioError(Exception):
    """Base exception for all Design Studio errors."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the JSON body returned to clients."""
        return {"error": self.message}


class ValidationError(DesignStudioError):
    """Required field missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class NoFileProvidedError(DesignStudioError):
    """Upload request carried no file payload."""

    status_code = 400
    default_message = "No file uploaded"


class AuthenticationError(DesignStudioError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401
    default_message = "Authentication required"


class InvalidCredentialsError(AuthenticationError):
    """Wrong email or password. Never says which one."""

    default_message = "Invalid email or password"


class MissingTokenError(AuthenticationError):
    """No bearer token on a protected route."""

    default_message = "Missing authorization token"


class InvalidTokenError(AuthenticationError):
    """Bearer token is malformed, tampered with or expired."""

    default_message = "Invalid or expired token"


class UserNotFoundError(AuthenticationError):
    """Token is valid but its user no longer resolves."""

    default_message = "User not found"


class NotFoundError(DesignStudioError):
    """Resource not found."""

    status_code = 404
    default_message = "Not found"


class DuplicateEmailError(DesignStudioError):
    """An account with this email already exists."""

    status_code = 409
    default_message = "Email already registered"


class UploadTooLargeError(DesignStudioError):
    """Upload exceeds the configured size limit."""

    status_code = 413
    default_message = "File too large"


class StorageError(DesignStudioError):
    """Persistence failure. The message is logged, never sent to clients."""

    status_code = 500

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.default_message}
