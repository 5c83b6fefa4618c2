"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from invoicer.domain.models.user import Account


class UserRepository(ABC):
    """Repository interface for accounts."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[Account]:
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """
        Insert a new account (id may be preassigned by the identity provider)
        or update the profile fields of an existing one.
        """
        pass
