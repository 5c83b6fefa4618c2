"""
Settings repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from invoicer.domain.models.settings import AccountSettings
from invoicer.domain.repositories.settings_repository import SettingsRepository as SettingsRepositoryInterface
from invoicer.infrastructure.db.models import SettingsModel
from invoicer.infrastructure.mappers.settings_mapper import SettingsMapper


class SQLAlchemySettingsRepository(SettingsRepositoryInterface):
    """SQLAlchemy implementation of settings repository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.mapper = SettingsMapper()

    def _owner_query(self, owner_id: str):
        return (
            select(SettingsModel)
            .options(selectinload(SettingsModel.signature))
            .where(SettingsModel.user_id == owner_id)
        )

    async def find_by_owner(self, owner_id: str) -> Optional[AccountSettings]:
        async with self.session_factory() as session:
            model = (await session.execute(self._owner_query(owner_id))).scalar_one_or_none()

            if not model:
                return None

            return self.mapper.model_to_domain(model)

    async def save(self, settings: AccountSettings) -> AccountSettings:
        """Insert or update the owner's settings row and upsert its signature."""
        async with self.session_factory() as session:
            async with session.begin():
                stmt = self._owner_query(settings.owner_id).with_for_update()
                model = (await session.execute(stmt)).scalar_one_or_none()

                if model is None:
                    model = self.mapper.domain_to_model(settings)
                    session.add(model)
                else:
                    self.mapper.update_model(model, settings)

            return self.mapper.model_to_domain(model)
