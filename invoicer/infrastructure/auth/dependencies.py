"""
Authentication dependencies for FastAPI.
"""

import logging
from typing import Optional, Annotated

from fastapi import Depends, Request

from invoicer.application.use_cases.base_use_case import CurrentIdentity
from invoicer.infrastructure.auth.jwt_handler import JWTHandler
from invoicer.domain.models.base import ValidationError, UnauthorizedError


logger = logging.getLogger(__name__)

# Global instances
jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


async def get_current_identity(
    request: Request,
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> Optional[CurrentIdentity]:
    """
    FastAPI dependency resolving the caller from the bearer token.
    Returns None if there is no token or the token is invalid; use cases
    turn a missing identity into an "Unauthorized" result.
    """
    authorization = request.headers.get("authorization")
    if not authorization or not authorization.startswith("Bearer "):
        return None

    token = authorization[7:]  # Remove "Bearer " prefix
    try:
        payload = jwt_handler.verify_token(token)
    except ValidationError as e:
        logger.debug(f"Rejected bearer token: {e.message}")
        return None

    return CurrentIdentity.from_claims(payload)


CurrentIdentityDep = Annotated[Optional[CurrentIdentity], Depends(get_current_identity)]


async def require_identity(identity: CurrentIdentityDep) -> CurrentIdentity:
    """
    FastAPI dependency for protected routes.
    Dependencies resolve before the request body is validated, so an
    anonymous caller gets the 401 envelope even when the body is invalid.
    """
    if identity is None:
        raise UnauthorizedError()
    return identity


AuthenticatedIdentityDep = Annotated[CurrentIdentity, Depends(require_identity)]
