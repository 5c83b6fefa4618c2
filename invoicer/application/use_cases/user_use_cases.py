"""
Account use cases for the application layer.
Profile reads and edits, and account provisioning after OAuth sign-in.
"""

import logging

from invoicer.application.use_cases.base_use_case import BaseUseCase, CurrentIdentity
from invoicer.application.dto.base_dto import to_dict
from invoicer.application.dto.user_dto import UpdateUserRequestDTO, UserResponseDTO
from invoicer.domain.models.base import EntityNotFoundError, ValidationError
from invoicer.domain.models.invoice import DEFAULT_CURRENCY
from invoicer.domain.models.user import Account, UserRole
from invoicer.domain.repositories.user_repository import UserRepository


logger = logging.getLogger(__name__)


class GetCurrentUserUseCase(BaseUseCase[None, dict]):
    """The caller's account; ``None`` when it has not been provisioned yet."""

    failure_message = "Failed to fetch user"

    def __init__(self, user_repository: UserRepository):
        super().__init__()
        self.user_repository = user_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: None = None):
        account = await self.user_repository.find_by_id(identity.id)
        if not account:
            return None
        return to_dict(UserResponseDTO.from_domain(account))


class UpdateUserUseCase(BaseUseCase[UpdateUserRequestDTO, dict]):
    """Patch the caller's profile."""

    failure_message = "Failed to update user"

    def __init__(self, user_repository: UserRepository):
        super().__init__()
        self.user_repository = user_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: UpdateUserRequestDTO) -> dict:
        account = await self.user_repository.find_by_id(identity.id)
        if not account:
            raise EntityNotFoundError("User", identity.id)

        account.update_profile(
            first_name=request.first_name,
            last_name=request.last_name,
            currency=request.currency
        )

        saved = await self.user_repository.save(account)
        return to_dict(UserResponseDTO.from_domain(saved))


class SyncAccountUseCase(BaseUseCase[None, dict]):
    """
    Backend half of the OAuth sign-in callback: make sure an account exists
    for the identity's email address and return it.
    """

    failure_message = "Failed to sync account"

    def __init__(self, user_repository: UserRepository):
        super().__init__()
        self.user_repository = user_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: None = None) -> dict:
        if not identity.email:
            raise ValidationError("Email is required", "email")

        account = await self.user_repository.find_by_email(identity.email)
        if account is None:
            first_name, last_name = self._split_name(identity)
            account = Account(
                id=identity.id,
                email=identity.email,
                first_name=first_name,
                last_name=last_name,
                image=identity.image,
                currency=identity.currency or DEFAULT_CURRENCY,
                role=UserRole.USER
            )
            account.validate()
            account = await self.user_repository.save(account)
            logger.info(f"Provisioned account {account.id} for {account.email}")

        return to_dict(UserResponseDTO.from_domain(account))

    @staticmethod
    def _split_name(identity: CurrentIdentity):
        if identity.first_name or identity.last_name:
            return identity.first_name, identity.last_name
        if not identity.name:
            return None, None
        first, _, last = identity.name.strip().partition(" ")
        return first or None, last or None
