"""
Account settings use cases.
"""

import logging

from invoicer.application.use_cases.base_use_case import BaseUseCase, CurrentIdentity
from invoicer.application.dto.base_dto import to_dict
from invoicer.application.dto.settings_dto import UpdateSettingsRequestDTO, SettingsResponseDTO
from invoicer.domain.models.settings import AccountSettings
from invoicer.domain.repositories.settings_repository import SettingsRepository


logger = logging.getLogger(__name__)


class GetSettingsUseCase(BaseUseCase[None, dict]):
    """Settings with signature; ``None`` when the account never saved any."""

    failure_message = "Failed to fetch settings"

    def __init__(self, settings_repository: SettingsRepository):
        super().__init__()
        self.settings_repository = settings_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: None = None):
        settings = await self.settings_repository.find_by_owner(identity.id)
        if not settings:
            return None
        return to_dict(SettingsResponseDTO.from_domain(settings))


class UpdateSettingsUseCase(BaseUseCase[UpdateSettingsRequestDTO, dict]):
    """
    Create the settings row on first use, otherwise patch it.
    The signature is upserted, never duplicated.
    """

    failure_message = "Failed to update settings"

    def __init__(self, settings_repository: SettingsRepository):
        super().__init__()
        self.settings_repository = settings_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: UpdateSettingsRequestDTO) -> dict:
        signature = request.signature.to_domain() if request.signature else None

        settings = await self.settings_repository.find_by_owner(identity.id)
        if settings is None:
            settings = AccountSettings.create(
                owner_id=identity.id,
                invoice_logo=request.invoice_logo,
                signature=signature
            )
            logger.info(f"Creating settings for account {identity.id}")
        else:
            settings.apply_update(invoice_logo=request.invoice_logo, signature=signature)

        saved = await self.settings_repository.save(settings)
        return to_dict(SettingsResponseDTO.from_domain(saved))
