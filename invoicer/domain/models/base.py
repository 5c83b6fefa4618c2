"""
Base entity and domain exceptions.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime, timezone
from typing import Optional, Any


def utcnow() -> datetime:
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


class BaseEntity:
    """
    Base class for all domain entities.
    Subclasses are dataclasses that declare ``id``, ``created_at`` and ``updated_at``.
    """

    id: Optional[str]
    updated_at: Optional[datetime]

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utcnow()

    def validate(self) -> None:
        """
        Validate the entity's state.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when entity validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, "VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainException):
    """
    Exception raised when an entity is not found.
    Also raised for entities owned by another account, so the message never
    includes the identifier.
    """

    def __init__(self, entity_type: str, entity_id: Any = None):
        message = f"{entity_type} not found"
        super().__init__(message, "NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class UnauthorizedError(DomainException):
    """Exception raised when an operation is attempted without an identity."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, "UNAUTHORIZED")

