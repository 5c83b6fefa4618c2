"""Settings repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from invoicer.domain.models.settings import AccountSettings


class SettingsRepository(ABC):
    """Repository interface for per-account settings."""

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> Optional[AccountSettings]:
        """
        Settings with signature, or None when never saved.
        """
        pass

    @abstractmethod
    async def save(self, settings: AccountSettings) -> AccountSettings:
        """
        Insert new settings or update existing ones, upserting the signature.
        """
        pass
