"""
User mapper for converting between domain entities and database models.
"""

from invoicer.domain.models.user import Account, UserRole
from invoicer.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between Account domain entity and UserModel database model."""

    def domain_to_model(self, account: Account) -> UserModel:
        """Convert Account domain entity to UserModel."""
        return UserModel(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            image=account.image,
            currency=account.currency,
            role=account.role,
            created_at=account.created_at
        )

    def update_model(self, model: UserModel, account: Account) -> None:
        """Copy the editable profile fields onto a loaded model."""
        model.first_name = account.first_name
        model.last_name = account.last_name
        model.image = account.image
        model.currency = account.currency

    def model_to_domain(self, model: UserModel) -> Account:
        """Convert UserModel to Account domain entity."""
        return Account(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            image=model.image,
            currency=model.currency,
            role=UserRole(model.role) if model.role else UserRole.USER,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
