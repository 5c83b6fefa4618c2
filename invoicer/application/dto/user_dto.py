"""
Account DTOs for the application layer.
"""

from typing import Optional
from pydantic import Field, field_validator

from invoicer.domain.models.user import Account, UserRole
from .base_dto import RequestDTO, ResponseDTO, TimestampMixin


class UpdateUserRequestDTO(RequestDTO):
    """Profile patch. Omitted fields are left unchanged."""

    first_name: Optional[str] = Field(default=None, max_length=100, description="First name")
    last_name: Optional[str] = Field(default=None, max_length=100, description="Last name")
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3, description="Preferred currency")

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v):
        return v.upper() if v else v


class UserResponseDTO(ResponseDTO, TimestampMixin):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image: Optional[str] = None
    currency: Optional[str] = None
    role: UserRole = UserRole.USER

    @classmethod
    def from_domain(cls, account: Account) -> "UserResponseDTO":
        return cls(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            image=account.image,
            currency=account.currency,
            role=account.role,
            created_at=account.created_at,
            updated_at=account.updated_at
        )
