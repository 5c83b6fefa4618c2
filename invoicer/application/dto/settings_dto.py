"""
Account settings DTOs.
"""

from typing import Optional
from pydantic import Field

from invoicer.domain.models.settings import AccountSettings, Signature
from .base_dto import RequestDTO, ResponseDTO, TimestampMixin


class SignatureDTO(RequestDTO):
    name: Optional[str] = Field(default=None, max_length=255, description="Signer name")
    image: Optional[str] = Field(default=None, max_length=2048, description="Signature image URL")

    def to_domain(self) -> Signature:
        return Signature(name=self.name, image=self.image)


class UpdateSettingsRequestDTO(RequestDTO):
    """Partial settings update. Omitted fields are left unchanged."""

    invoice_logo: Optional[str] = Field(default=None, max_length=2048, description="Logo image URL")
    signature: Optional[SignatureDTO] = Field(default=None, description="Signature to upsert")


class SignatureResponseDTO(ResponseDTO):
    name: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_domain(cls, signature: Signature) -> "SignatureResponseDTO":
        return cls(id=signature.id, name=signature.name, image=signature.image)


class SettingsResponseDTO(ResponseDTO, TimestampMixin):
    user_id: str
    invoice_logo: Optional[str] = None
    signature: Optional[SignatureResponseDTO] = None

    @classmethod
    def from_domain(cls, settings: AccountSettings) -> "SettingsResponseDTO":
        return cls(
            id=settings.id,
            user_id=settings.owner_id,
            invoice_logo=settings.invoice_logo,
            signature=SignatureResponseDTO.from_domain(settings.signature) if settings.signature else None,
            created_at=settings.created_at,
            updated_at=settings.updated_at
        )
