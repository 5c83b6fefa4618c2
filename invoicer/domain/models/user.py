"""
Account domain model.
Accounts are provisioned from the OAuth identity provider on first sign-in.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from invoicer.domain.models.base import BaseEntity, ValidationError


class UserRole(str, Enum):
    """Account roles."""
    USER = "USER"
    ADMIN = "ADMIN"


@dataclass
class Account(BaseEntity):
    """Account that owns invoices and settings."""

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image: Optional[str] = None
    currency: Optional[str] = None
    role: UserRole = UserRole.USER
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if not self.email or "@" not in self.email:
            raise ValidationError("Email is required", "email")

    @property
    def display_name(self) -> str:
        """Full name when known, otherwise the email address."""
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) if parts else self.email

    def update_profile(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        currency: Optional[str] = None,
    ) -> None:
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if currency is not None:
            self.currency = currency
        self.mark_as_updated()
