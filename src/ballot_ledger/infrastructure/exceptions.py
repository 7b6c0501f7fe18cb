"""Infrastructure layer exceptions."""

from typing import Any


class InfrastructureException(Exception):
    """Base exception for infrastructure failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DatabaseError(InfrastructureException):
    """Raised when a database operation fails."""


class ConfigurationError(InfrastructureException):
    """Raised when settings are missing or invalid."""
