"""
Base use case classes for the application layer.
Every use case is an error boundary: it returns a UseCaseResult envelope and
never lets an exception escape to the caller.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, TypeVar

from invoicer.domain.models.base import (
    EntityNotFoundError,
    UnauthorizedError,
    ValidationError,
)


logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


UNAUTHORIZED = "UNAUTHORIZED"
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
UPSTREAM_FAILURE = "UPSTREAM_FAILURE"
DELIVERY_FAILED = "DELIVERY_FAILED"


@dataclass(frozen=True)
class CurrentIdentity:
    """Authenticated caller, as asserted by the identity provider."""

    id: str
    email: Optional[str] = None
    role: str = "USER"
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    currency: Optional[str] = None
    name: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> "CurrentIdentity":
        """Build an identity from verified token claims."""
        return cls(
            id=str(claims["sub"]),
            email=claims.get("email"),
            role=claims.get("role") or "USER",
            first_name=claims.get("first_name"),
            last_name=claims.get("last_name"),
            currency=claims.get("currency"),
            name=claims.get("name"),
            image=claims.get("picture"),
        )


@dataclass
class UseCaseResult(Generic[T]):
    """Result wrapper for use case operations."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    message: Optional[str] = None
    pagination: Optional[Dict[str, int]] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success_result(
        cls,
        data: T = None,
        message: Optional[str] = None,
        pagination: Optional[Dict[str, int]] = None
    ) -> "UseCaseResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, message=message, pagination=pagination)

    @classmethod
    def error_result(cls, error: str, error_code: Optional[str] = None) -> "UseCaseResult[T]":
        """Create an error result."""
        return cls(success=False, error=error, error_code=error_code)

    def to_envelope(self) -> Dict[str, Any]:
        """Public shape: {success, data} or {success, error}, plus pagination/message when set."""
        if not self.success:
            return {"success": False, "error": self.error}

        envelope: Dict[str, Any] = {"success": True}
        if self.message is not None:
            envelope["message"] = self.message
        if self.message is None or self.data is not None:
            envelope["data"] = self.data
        if self.pagination is not None:
            envelope["pagination"] = self.pagination
        return envelope


class BaseUseCase(ABC, Generic[T, R]):
    """
    Base class for all use cases.

    ``execute`` authenticates the caller and converts failures:
    missing identity -> "Unauthorized", EntityNotFoundError -> "<Entity> not found",
    ValidationError -> its message, anything else -> ``failure_message``
    (logged with traceback, never returned to the caller).
    """

    failure_message: str = "Request failed"
    requires_identity: bool = True

    def __init__(self):
        self.execution_start: Optional[datetime] = None
        self.execution_end: Optional[datetime] = None

    async def execute(self, identity: Optional[CurrentIdentity], request: T = None) -> UseCaseResult[R]:
        """
        Execute the use case with error handling and timing metadata.
        """
        self.execution_start = datetime.now(timezone.utc)

        try:
            if self.requires_identity and identity is None:
                raise UnauthorizedError()

            outcome = await self._execute_business_logic(identity, request)
            result = outcome if isinstance(outcome, UseCaseResult) else UseCaseResult.success_result(outcome)

        except UnauthorizedError as exc:
            logger.warning(f"{type(self).__name__}: unauthorized call")
            result = UseCaseResult.error_result(exc.message, UNAUTHORIZED)
        except EntityNotFoundError as exc:
            logger.info(f"{type(self).__name__}: {exc.entity_type} {exc.entity_id} not found")
            result = UseCaseResult.error_result(exc.message, NOT_FOUND)
        except ValidationError as exc:
            logger.info(f"{type(self).__name__}: validation failed: {exc.message}")
            result = UseCaseResult.error_result(exc.message, VALIDATION_ERROR)
        except Exception:
            logger.exception(f"{type(self).__name__} failed")
            result = UseCaseResult.error_result(self.failure_message, UPSTREAM_FAILURE)

        self.execution_end = datetime.now(timezone.utc)
        result.metadata["execution_time_seconds"] = (
            self.execution_end - self.execution_start
        ).total_seconds()
        return result

    @abstractmethod
    async def _execute_business_logic(self, identity: CurrentIdentity, request: T) -> Any:
        """
        Execute the core business logic. Returns the payload or a ready UseCaseResult.
        """
        pass


class PaginatedQueryUseCase(BaseUseCase[T, R]):
    """
    Base class for paginated query use cases.
    """

    def __init__(self, max_page_size: int = 100):
        super().__init__()
        self.max_page_size = max_page_size

    def _validate_page(self, page: int, limit: int) -> None:
        if page < 1:
            raise ValidationError("Page must be positive", "page")
        if limit < 1:
            raise ValidationError("Page size must be positive", "limit")
        if limit > self.max_page_size:
            raise ValidationError(f"Page size cannot exceed {self.max_page_size}", "limit")
