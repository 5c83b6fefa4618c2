"""
Settings mapper for converting between account settings and database models.
"""

from invoicer.domain.models.base import utcnow
from invoicer.domain.models.settings import AccountSettings, Signature
from invoicer.infrastructure.db.models import SettingsModel, SignatureModel


class SettingsMapper:
    """Maps between AccountSettings and SettingsModel with its signature."""

    def domain_to_model(self, settings: AccountSettings) -> SettingsModel:
        model = SettingsModel(
            id=settings.id,
            user_id=settings.owner_id,
            invoice_logo=settings.invoice_logo,
            created_at=settings.created_at
        )
        model.signature = None
        if settings.signature:
            model.signature = SignatureModel(
                name=settings.signature.name,
                image=settings.signature.image
            )
        return model

    def update_model(self, model: SettingsModel, settings: AccountSettings) -> None:
        """Patch a loaded model, inserting the signature row or updating it in place."""
        model.invoice_logo = settings.invoice_logo
        model.updated_at = settings.updated_at or utcnow()

        if settings.signature is None:
            return
        if model.signature is None:
            model.signature = SignatureModel(
                name=settings.signature.name,
                image=settings.signature.image
            )
        else:
            model.signature.name = settings.signature.name
            model.signature.image = settings.signature.image

    def model_to_domain(self, model: SettingsModel) -> AccountSettings:
        signature = None
        if model.signature is not None:
            signature = Signature(
                id=model.signature.id,
                name=model.signature.name,
                image=model.signature.image,
                updated_at=model.signature.updated_at
            )

        return AccountSettings(
            id=model.id,
            owner_id=model.user_id,
            invoice_logo=model.invoice_logo,
            signature=signature,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
