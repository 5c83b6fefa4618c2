"""
Authentication router.
Sign-in itself happens at the identity provider; this router provisions the
local account once the provider has issued a token.
"""

from fastapi import APIRouter

from invoicer.application.use_cases.user_use_cases import SyncAccountUseCase
from invoicer.infrastructure.auth.dependencies import AuthenticatedIdentityDep
from invoicer.infrastructure.web.responses import envelope_response
from invoicer.infrastructure.web.routers.users import UserRepositoryDep


router = APIRouter()


@router.post("/session")
async def sync_session(identity: AuthenticatedIdentityDep, repository: UserRepositoryDep):
    """
    Ensure an account exists for the signed-in identity and return it.
    """
    result = await SyncAccountUseCase(repository).execute(identity)
    return envelope_response(result)
