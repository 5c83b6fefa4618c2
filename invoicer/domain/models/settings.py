"""
Account settings domain model.
One settings record per account, with an optional signature.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from invoicer.domain.models.base import BaseEntity, ValidationError


@dataclass
class Signature(BaseEntity):
    """Signature printed on invoices."""

    name: Optional[str] = None
    image: Optional[str] = None
    id: Optional[str] = None
    updated_at: Optional[datetime] = None


@dataclass
class AccountSettings(BaseEntity):
    """Per-account invoice preferences."""

    owner_id: str
    invoice_logo: Optional[str] = None
    signature: Optional[Signature] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        owner_id: str,
        invoice_logo: Optional[str] = None,
        signature: Optional[Signature] = None,
    ) -> "AccountSettings":
        if not owner_id:
            raise ValidationError("Settings owner is required", "owner_id")
        return cls(owner_id=owner_id, invoice_logo=invoice_logo, signature=signature)

    def apply_update(
        self,
        invoice_logo: Optional[str] = None,
        signature: Optional[Signature] = None,
    ) -> None:
        """
        Patch the settings. A provided signature overwrites the existing one
        in place or is attached when none exists yet.
        """
        if invoice_logo is not None:
            self.invoice_logo = invoice_logo

        if signature is not None:
            if self.signature is None:
                self.signature = Signature(name=signature.name, image=signature.image)
            else:
                self.signature.name = signature.name
                self.signature.image = signature.image

        self.mark_as_updated()
