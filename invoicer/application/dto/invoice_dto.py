"""
Invoice DTOs for the application layer.
Data Transfer Objects for invoice create/edit forms and invoice responses.
"""

from typing import Optional, List
from datetime import date
from decimal import Decimal
from pydantic import Field, EmailStr, field_validator, model_validator

from invoicer.domain.models.invoice import Invoice, Address, LineItem, InvoiceStatus
from .base_dto import RequestDTO, ResponseDTO, TimestampMixin, money, quantize_money


# Nested DTOs
class AddressDTO(RequestDTO):
    """DTO for the sender or recipient block of an invoice form."""

    name: str = Field(min_length=1, max_length=255, description="Name")
    email: Optional[EmailStr] = Field(default=None, description="Contact email")
    address1: str = Field(default="", max_length=255, description="Address line 1")
    address2: Optional[str] = Field(default=None, max_length=255, description="Address line 2")
    address3: Optional[str] = Field(default=None, max_length=255, description="Address line 3")

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_domain(self) -> Address:
        return Address(
            name=self.name,
            email=self.email,
            address1=self.address1,
            address2=self.address2,
            address3=self.address3
        )


class LineItemDTO(RequestDTO):
    """DTO for one line item. ``total`` is taken as submitted."""

    item_name: str = Field(min_length=1, max_length=255, description="Item name")
    quantity: int = Field(ge=0, description="Quantity")
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2, description="Unit price")
    total: Decimal = Field(ge=0, max_digits=12, decimal_places=2, description="Line total")

    @field_validator("price", "total", mode="before")
    @classmethod
    def round_to_cents(cls, v):
        return quantize_money(v)

    def to_domain(self) -> LineItem:
        return LineItem(
            item_name=self.item_name,
            quantity=self.quantity,
            price=self.price,
            total=self.total
        )


# Request DTOs
class InvoiceFormDTO(RequestDTO):
    """Full invoice form, as submitted on create and on edit."""

    invoice_no: str = Field(min_length=1, max_length=50, description="Invoice number")
    invoice_date: date = Field(description="Invoice date")
    due_date: date = Field(description="Payment due date")
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3, description="ISO currency code")
    from_address: AddressDTO = Field(alias="from", description="Sender")
    to_address: AddressDTO = Field(alias="to", description="Recipient")
    items: List[LineItemDTO] = Field(description="Line items")
    sub_total: Decimal = Field(ge=0, max_digits=12, decimal_places=2, description="Subtotal")
    discount: Optional[Decimal] = Field(default=None, ge=0, max_digits=12, decimal_places=2, description="Discount")
    tax_percentage: Optional[Decimal] = Field(default=None, ge=0, max_digits=5, decimal_places=2, description="Tax percentage")
    total: Decimal = Field(ge=0, max_digits=12, decimal_places=2, description="Grand total")
    notes: Optional[str] = Field(default=None, max_length=2000, description="Notes")
    status: Optional[InvoiceStatus] = Field(default=None, description="Invoice status")

    @field_validator("sub_total", "discount", "tax_percentage", "total", mode="before")
    @classmethod
    def round_to_cents(cls, v):
        return quantize_money(v)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v):
        return v.upper() if v else v

    @model_validator(mode="after")
    def validate_due_date(self):
        """Validate due date is not before the invoice date."""
        if self.due_date < self.invoice_date:
            raise ValueError("Due date must be on or after invoice date")
        return self

    def domain_fields(self) -> dict:
        """Keyword arguments shared by Invoice.create and Invoice.revise."""
        return dict(
            invoice_no=self.invoice_no,
            invoice_date=self.invoice_date,
            due_date=self.due_date,
            from_address=self.from_address.to_domain(),
            to_address=self.to_address.to_domain(),
            items=[item.to_domain() for item in self.items],
            sub_total=self.sub_total,
            total=self.total,
            currency=self.currency,
            discount=self.discount,
            tax_percentage=self.tax_percentage,
            notes=self.notes,
            status=self.status,
        )


class CreateInvoiceRequestDTO(InvoiceFormDTO):
    """DTO for invoice creation requests."""
    pass


class UpdateInvoiceRequestDTO(InvoiceFormDTO):
    """DTO for invoice edit requests. ``invoice_id`` comes from the path."""

    invoice_id: Optional[str] = Field(default=None, description="Invoice ID")


class GetInvoiceRequestDTO(RequestDTO):
    invoice_id: str = Field(min_length=1, description="Invoice ID")


class ListInvoicesRequestDTO(RequestDTO):
    """DTO for listing invoices. Bounds are enforced by the use case."""

    page: int = Field(default=1, description="Page number")
    limit: int = Field(default=5, description="Items per page")

    @property
    def offset(self) -> int:
        """Calculate offset for database queries."""
        return (self.page - 1) * self.limit


# Response DTOs
class AddressResponseDTO(ResponseDTO):
    name: str
    email: Optional[str] = None
    address1: str = ""
    address2: Optional[str] = None
    address3: Optional[str] = None

    @classmethod
    def from_domain(cls, address: Address) -> "AddressResponseDTO":
        return cls(
            id=address.id,
            name=address.name,
            email=address.email,
            address1=address.address1,
            address2=address.address2,
            address3=address.address3
        )


class LineItemResponseDTO(ResponseDTO):
    item_name: str
    quantity: int
    price: float
    total: float

    @classmethod
    def from_domain(cls, item: LineItem) -> "LineItemResponseDTO":
        return cls(
            id=item.id,
            item_name=item.item_name,
            quantity=item.quantity,
            price=money(item.price),
            total=money(item.total)
        )


class InvoiceSummaryResponseDTO(ResponseDTO, TimestampMixin):
    """DTO for invoice summary (dashboard recent invoices)."""

    invoice_no: str = Field(description="Invoice number")
    invoice_date: date = Field(description="Invoice date")
    due_date: date = Field(description="Due date")
    currency: str = Field(description="Currency")
    total: float = Field(description="Grand total")
    status: InvoiceStatus = Field(description="Invoice status")
    from_address: AddressResponseDTO = Field(description="Sender")
    to_address: AddressResponseDTO = Field(description="Recipient")

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceSummaryResponseDTO":
        return cls(
            id=invoice.id,
            invoice_no=invoice.invoice_no,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            currency=invoice.currency,
            total=money(invoice.total),
            status=invoice.status,
            from_address=AddressResponseDTO.from_domain(invoice.from_address),
            to_address=AddressResponseDTO.from_domain(invoice.to_address),
            created_at=invoice.created_at,
            updated_at=invoice.updated_at
        )


class InvoiceResponseDTO(InvoiceSummaryResponseDTO):
    """DTO for the full invoice aggregate."""

    user_id: str = Field(description="Owning account ID")
    items: List[LineItemResponseDTO] = Field(default_factory=list, description="Line items")
    sub_total: float = Field(description="Subtotal")
    discount: Optional[float] = Field(default=None, description="Discount")
    tax_percentage: Optional[float] = Field(default=None, description="Tax percentage")
    notes: Optional[str] = Field(default=None, description="Notes")

    @classmethod
    def from_domain(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            user_id=invoice.owner_id,
            invoice_no=invoice.invoice_no,
            invoice_date=invoice.invoice_date,
            due_date=invoice.due_date,
            currency=invoice.currency,
            sub_total=money(invoice.sub_total),
            discount=money(invoice.discount),
            tax_percentage=money(invoice.tax_percentage),
            total=money(invoice.total),
            notes=invoice.notes,
            status=invoice.status,
            from_address=AddressResponseDTO.from_domain(invoice.from_address),
            to_address=AddressResponseDTO.from_domain(invoice.to_address),
            items=[LineItemResponseDTO.from_domain(item) for item in invoice.items],
            created_at=invoice.created_at,
            updated_at=invoice.updated_at
        )
