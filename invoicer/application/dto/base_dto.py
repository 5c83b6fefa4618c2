"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, Optional
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pydantic import BaseModel, Field, ConfigDict


CENT = Decimal("0.01")


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginationDTO(BaseDTO):
    """Pagination block attached to list envelopes."""

    total: int = Field(description="Total number of items")
    pages: int = Field(description="Total number of pages")
    page: int = Field(description="Current page number")
    limit: int = Field(description="Items per page")

    @classmethod
    def create(cls, total: int, page: int, limit: int) -> "PaginationDTO":
        pages = (total + limit - 1) // limit  # Ceiling division
        return cls(total=total, pages=pages, page=page, limit=limit)


def money(value: Optional[Decimal]) -> Optional[float]:
    """Decimal amount as a JSON number."""
    return float(value) if value is not None else None


def quantize_money(value: Any) -> Any:
    """Round a submitted amount to cents. Values that are not numbers pass through."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError):
        return value


def to_dict(obj: Any, exclude_none: bool = False) -> Dict[str, Any]:
    """Convert a DTO to a JSON-ready dictionary."""
    return obj.model_dump(mode="json", exclude_none=exclude_none)
