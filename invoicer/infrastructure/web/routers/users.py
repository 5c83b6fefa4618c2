"""
User profile router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from invoicer.application.dto.user_dto import UpdateUserRequestDTO
from invoicer.application.use_cases.user_use_cases import GetCurrentUserUseCase, UpdateUserUseCase
from invoicer.domain.repositories.user_repository import UserRepository
from invoicer.infrastructure.auth.dependencies import AuthenticatedIdentityDep
from invoicer.infrastructure.db.database import get_session_factory
from invoicer.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from invoicer.infrastructure.web.responses import envelope_response


router = APIRouter()


def get_user_repository(session_factory=Depends(get_session_factory)) -> UserRepository:
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session_factory)


UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


@router.get("/me")
async def get_current_user(identity: AuthenticatedIdentityDep, repository: UserRepositoryDep):
    """Get the caller's account."""
    result = await GetCurrentUserUseCase(repository).execute(identity)
    return envelope_response(result)


@router.patch("/me")
async def update_current_user(
    request: UpdateUserRequestDTO,
    identity: AuthenticatedIdentityDep,
    repository: UserRepositoryDep
):
    """
    Update the caller's profile.

    - **first_name**, **last_name**, **currency**: each optional
    """
    result = await UpdateUserUseCase(repository).execute(identity, request)
    return envelope_response(result)
