"""
Invoice domain model.
An invoice aggregate owns its sender address, recipient address and line items.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, List

from invoicer.domain.models.base import BaseEntity, ValidationError


DEFAULT_CURRENCY = "USD"


class InvoiceStatus(str, Enum):
    """Invoice status."""
    UNPAID = "UNPAID"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"


@dataclass
class Address(BaseEntity):
    """Postal/contact record used as the sender or recipient of one invoice."""

    name: str
    address1: str = ""
    email: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    id: Optional[str] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Address name is required", "name")

    def update_from(self, other: "Address") -> None:
        """Copy contact fields from another address, keeping this record's identity."""
        self.name = other.name
        self.email = other.email
        self.address1 = other.address1
        self.address2 = other.address2
        self.address3 = other.address3


@dataclass
class LineItem(BaseEntity):
    """One billable row. The line total is supplied by the caller and stored as-is."""

    item_name: str
    quantity: int
    price: Decimal
    total: Decimal
    id: Optional[str] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if not self.item_name or not self.item_name.strip():
            raise ValidationError("Item name is required", "item_name")

        if self.quantity < 0:
            raise ValidationError("Quantity cannot be negative", "quantity")

        if self.price < 0:
            raise ValidationError("Price cannot be negative", "price")


@dataclass
class Invoice(BaseEntity):
    """
    Invoice aggregate root.

    Totals (sub_total, discount, tax_percentage, total) are computed by the
    client and persisted exactly as submitted.
    """

    owner_id: str
    invoice_no: str
    invoice_date: date
    due_date: date
    from_address: Address
    to_address: Address
    items: List[LineItem] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY
    sub_total: Decimal = Decimal("0")
    discount: Optional[Decimal] = None
    tax_percentage: Optional[Decimal] = None
    total: Decimal = Decimal("0")
    notes: Optional[str] = None
    status: InvoiceStatus = InvoiceStatus.UNPAID

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        owner_id: str,
        invoice_no: str,
        invoice_date: date,
        due_date: date,
        from_address: Address,
        to_address: Address,
        items: List[LineItem],
        sub_total: Decimal,
        total: Decimal,
        currency: Optional[str] = None,
        discount: Optional[Decimal] = None,
        tax_percentage: Optional[Decimal] = None,
        notes: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
    ) -> "Invoice":
        """Build a new, validated invoice. Currency defaults to USD and status to UNPAID."""
        invoice = cls(
            owner_id=owner_id,
            invoice_no=invoice_no,
            invoice_date=invoice_date,
            due_date=due_date,
            from_address=from_address,
            to_address=to_address,
            items=list(items),
            currency=currency or DEFAULT_CURRENCY,
            sub_total=sub_total,
            discount=discount,
            tax_percentage=tax_percentage,
            total=total,
            notes=notes,
            status=InvoiceStatus(status) if status else InvoiceStatus.UNPAID,
        )
        invoice.validate()
        return invoice

    def validate(self) -> None:
        if not self.owner_id:
            raise ValidationError("Invoice owner is required", "owner_id")

        if not self.invoice_no or not self.invoice_no.strip():
            raise ValidationError("Invoice number is required", "invoice_no")

        if self.due_date < self.invoice_date:
            raise ValidationError("Due date must be on or after invoice date", "due_date")

        for amount_field in ("sub_total", "total"):
            if getattr(self, amount_field) < 0:
                raise ValidationError(f"{amount_field} cannot be negative", amount_field)

        self.from_address.validate()
        self.to_address.validate()
        for item in self.items:
            item.validate()

    def revise(
        self,
        invoice_no: str,
        invoice_date: date,
        due_date: date,
        from_address: Address,
        to_address: Address,
        items: List[LineItem],
        sub_total: Decimal,
        total: Decimal,
        currency: Optional[str] = None,
        discount: Optional[Decimal] = None,
        tax_percentage: Optional[Decimal] = None,
        notes: Optional[str] = None,
        status: Optional[InvoiceStatus] = None,
    ) -> None:
        """
        Apply an edit. Addresses keep their identity and are changed in place,
        the item collection is replaced wholesale, and optional fields left as
        None keep their current value.
        """
        self.invoice_no = invoice_no
        self.invoice_date = invoice_date
        self.due_date = due_date
        self.from_address.update_from(from_address)
        self.to_address.update_from(to_address)
        self.replace_items(items)
        self.sub_total = sub_total
        self.total = total

        if currency is not None:
            self.currency = currency
        if discount is not None:
            self.discount = discount
        if tax_percentage is not None:
            self.tax_percentage = tax_percentage
        if notes is not None:
            self.notes = notes
        if status is not None:
            self.status = InvoiceStatus(status)

        self.validate()
        self.mark_as_updated()

    def replace_items(self, items: List[LineItem]) -> None:
        """Replace every line item with a fresh, unpersisted set."""
        self.items = [
            LineItem(
                item_name=item.item_name,
                quantity=item.quantity,
                price=item.price,
                total=item.total,
            )
            for item in items
        ]

    @property
    def recipient_email(self) -> Optional[str]:
        return self.to_address.email or None
