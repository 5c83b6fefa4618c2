"""
JWT token handler.
Validates bearer tokens issued by the identity provider and extracts the caller.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt

from invoicer.config import get_settings
from invoicer.domain.models.base import ValidationError


class JWTHandler:
    """Handles JWT token validation and creation."""

    def __init__(self, secret: Optional[str] = None, algorithm: Optional[str] = None):
        self.settings = get_settings()
        self.jwt_secret = secret or self.settings.auth_secret
        self.jwt_algorithm = algorithm or self.settings.jwt_algorithm

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dict containing token payload

        Raises:
            ValidationError: If token is invalid or expired
        """
        # Remove 'Bearer ' prefix if present
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise ValidationError(f"Invalid JWT token: {str(e)}")

        # Validate required claims
        if not payload.get('sub'):
            raise ValidationError("Token missing user ID (sub claim)")

        return payload

    def create_access_token(
        self,
        user_id: str,
        email: Optional[str] = None,
        expires_minutes: Optional[int] = None,
        **claims: Any
    ) -> str:
        """
        Mint a signed token for the given account. Used by tests and local tooling.

        Args:
            user_id: Account ID placed in the ``sub`` claim
            email: Account email
            expires_minutes: Lifetime, defaults to the configured expiry
            claims: Extra claims (role, first_name, last_name, currency, name, picture)

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        minutes = expires_minutes if expires_minutes is not None else self.settings.jwt_access_token_expire_minutes
        expire = now + timedelta(minutes=minutes)

        payload = {
            "sub": user_id,  # Subject (user ID)
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expire.timestamp()),  # Expires at
        }
        if email is not None:
            payload["email"] = email
        payload.update({key: value for key, value in claims.items() if value is not None})

        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)
