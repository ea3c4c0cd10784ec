"""
Exception hierarchy shared by the SAFE-Rescue services.

Service classes raise these exceptions; the endpoint layer turns them
into HTTP responses through ``core.error_handling``.  Every exception
carries the HTTP status it maps to, so the mapping is the same in all
five services.
"""

from typing import Any, Dict, Optional

from fastapi import status


class SafeRescueError(Exception):
    """Base exception for all domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(SafeRescueError):
    """Raised when a row (local or remote) does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: Any = None, details: Optional[Dict[str, Any]] = None) -> None:
        details = details or {}
        if entity_id is not None:
            details["id"] = entity_id
            message = f"{entity} no encontrado con ID: {entity_id}"
        else:
            message = f"{entity} no encontrado"
        self.entity = entity
        super().__init__(message, details)


class ValidationError(SafeRescueError):
    """Raised when input is missing, malformed or breaks a constraint."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConflictError(SafeRescueError):
    """Raised when the operation clashes with existing rows."""

    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(SafeRescueError):
    """Raised when credentials are rejected."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ExternalServiceError(SafeRescueError):
    """Raised when another SAFE-Rescue service cannot be reached or fails."""

    status_code = status.HTTP_502_BAD_GATEWAY
