"""
Authentication infrastructure.
"""

from .jwt_handler import JWTHandler
from .dependencies import get_current_identity, get_jwt_handler, CurrentIdentityDep

__all__ = [
    "JWTHandler",
    "get_current_identity",
    "get_jwt_handler",
    "CurrentIdentityDep",
]
