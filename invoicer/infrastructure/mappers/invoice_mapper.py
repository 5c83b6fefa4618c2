"""
Invoice mapper for converting between the invoice aggregate and database models.
"""

from typing import List

from invoicer.domain.models.base import utcnow
from invoicer.domain.models.invoice import Invoice, Address, LineItem, InvoiceStatus
from invoicer.infrastructure.db.models import InvoiceModel, AddressModel, ItemModel


class InvoiceMapper:
    """Maps between the Invoice aggregate and InvoiceModel with its addresses and items."""

    def domain_to_model(self, invoice: Invoice) -> InvoiceModel:
        """Convert a new Invoice to an InvoiceModel graph ready to be added to a session."""
        return InvoiceModel(
            id=invoice.id,
            user_id=invoice.owner_id,
            invoice_no=invoice.invoice_no,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            currency=invoice.currency,
            sub_total=invoice.sub_total,
            discount=invoice.discount,
            tax_percentage=invoice.tax_percentage,
            total=invoice.total,
            notes=invoice.notes,
            status=invoice.status,
            created_at=invoice.created_at,
            from_address=self.address_to_model(invoice.from_address),
            to_address=self.address_to_model(invoice.to_address),
            items=self.items_to_models(invoice.items)
        )

    def update_model(self, model: InvoiceModel, invoice: Invoice) -> None:
        """Copy scalar fields and address contents from the domain onto a loaded model."""
        model.invoice_no = invoice.invoice_no
        model.invoice_date = invoice.invoice_date
        model.due_date = invoice.due_date
        model.currency = invoice.currency
        model.sub_total = invoice.sub_total
        model.discount = invoice.discount
        model.tax_percentage = invoice.tax_percentage
        model.total = invoice.total
        model.notes = invoice.notes
        model.status = invoice.status
        model.updated_at = invoice.updated_at or utcnow()

        for address_model, address in (
            (model.from_address, invoice.from_address),
            (model.to_address, invoice.to_address),
        ):
            address_model.name = address.name
            address_model.email = address.email
            address_model.address1 = address.address1
            address_model.address2 = address.address2
            address_model.address3 = address.address3

    def model_to_domain(self, model: InvoiceModel, include_items: bool = True) -> Invoice:
        """
        Convert InvoiceModel to the Invoice aggregate.
        Pass include_items=False when the items relationship was not loaded.
        """
        return Invoice(
            id=model.id,
            owner_id=model.user_id,
            invoice_no=model.invoice_no,
            invoice_date=model.invoice_date,
            due_date=model.due_date,
            from_address=self.address_to_domain(model.from_address),
            to_address=self.address_to_domain(model.to_address),
            items=[self.item_to_domain(item) for item in model.items] if include_items else [],
            currency=model.currency,
            sub_total=model.sub_total,
            discount=model.discount,
            tax_percentage=model.tax_percentage,
            total=model.total,
            notes=model.notes,
            status=InvoiceStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at
        )

    def address_to_model(self, address: Address) -> AddressModel:
        return AddressModel(
            id=address.id,
            name=address.name,
            email=address.email,
            address1=address.address1 or "",
            address2=address.address2,
            address3=address.address3
        )

    def address_to_domain(self, model: AddressModel) -> Address:
        return Address(
            id=model.id,
            name=model.name,
            email=model.email,
            address1=model.address1 or "",
            address2=model.address2,
            address3=model.address3,
            updated_at=model.updated_at
        )

    def items_to_models(self, items: List[LineItem]) -> List[ItemModel]:
        """Line items in submitted order."""
        return [
            ItemModel(
                position=position,
                item_name=item.item_name,
                quantity=item.quantity,
                price=item.price,
                total=item.total
            )
            for position, item in enumerate(items)
        ]

    def item_to_domain(self, model: ItemModel) -> LineItem:
        return LineItem(
            id=model.id,
            item_name=model.item_name,
            quantity=model.quantity,
            price=model.price,
            total=model.total,
            updated_at=model.updated_at
        )
