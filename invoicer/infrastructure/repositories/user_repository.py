"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from invoicer.domain.models.user import Account
from invoicer.domain.repositories.user_repository import UserRepository as UserRepositoryInterface
from invoicer.infrastructure.db.models import UserModel
from invoicer.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.mapper = UserMapper()

    async def find_by_id(self, user_id: str) -> Optional[Account]:
        async with self.session_factory() as session:
            model = await session.get(UserModel, user_id)
            return self.mapper.model_to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Case-insensitive lookup by email address."""
        async with self.session_factory() as session:
            stmt = select(UserModel).where(func.lower(UserModel.email) == email.strip().lower())
            model = (await session.execute(stmt)).scalar_one_or_none()
            return self.mapper.model_to_domain(model) if model else None

    async def save(self, account: Account) -> Account:
        async with self.session_factory() as session:
            async with session.begin():
                model = None
                if account.id:
                    model = await session.get(UserModel, account.id)

                if model is None:
                    model = self.mapper.domain_to_model(account)
                    session.add(model)
                else:
                    self.mapper.update_model(model, account)

            return self.mapper.model_to_domain(model)
