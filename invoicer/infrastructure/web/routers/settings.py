"""
Account settings router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from invoicer.application.dto.settings_dto import UpdateSettingsRequestDTO
from invoicer.application.use_cases.settings_use_cases import GetSettingsUseCase, UpdateSettingsUseCase
from invoicer.domain.repositories.settings_repository import SettingsRepository
from invoicer.infrastructure.auth.dependencies import AuthenticatedIdentityDep
from invoicer.infrastructure.db.database import get_session_factory
from invoicer.infrastructure.repositories.settings_repository import SQLAlchemySettingsRepository
from invoicer.infrastructure.web.responses import envelope_response


router = APIRouter()


def get_settings_repository(session_factory=Depends(get_session_factory)) -> SettingsRepository:
    """Dependency to get settings repository."""
    return SQLAlchemySettingsRepository(session_factory)


SettingsRepositoryDep = Annotated[SettingsRepository, Depends(get_settings_repository)]


@router.get("")
async def get_account_settings(identity: AuthenticatedIdentityDep, repository: SettingsRepositoryDep):
    """Invoice logo and signature; data is null until settings are first saved."""
    result = await GetSettingsUseCase(repository).execute(identity)
    return envelope_response(result)


@router.put("")
async def update_account_settings(
    request: UpdateSettingsRequestDTO,
    identity: AuthenticatedIdentityDep,
    repository: SettingsRepositoryDep
):
    """Create or patch settings; a provided signature is upserted."""
    result = await UpdateSettingsUseCase(repository).execute(identity, request)
    return envelope_response(result)
