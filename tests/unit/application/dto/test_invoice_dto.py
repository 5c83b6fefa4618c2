"""
Unit tests for the invoice form DTOs.
"""

import pytest
from decimal import Decimal
from datetime import date

from pydantic import ValidationError

from invoicer.application.dto.base_dto import PaginationDTO
from invoicer.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO,
    InvoiceResponseDTO,
    ListInvoicesRequestDTO,
    UpdateInvoiceRequestDTO,
)
from invoicer.domain.models.invoice import Invoice, InvoiceStatus


class TestInvoiceForm:
    """Test cases for the create/edit invoice form."""

    def test_aliases_and_defaults(self, invoice_payload):
        form = CreateInvoiceRequestDTO.model_validate(invoice_payload(currency="eur"))

        assert form.from_address.name == "Acme Studio"
        assert form.to_address.email == "jane@client.example.com"
        assert form.currency == "EUR"
        assert form.items[0].total == Decimal("20")
        assert form.status is None

    def test_blank_recipient_email(self, invoice_payload):
        payload = invoice_payload()
        payload["to"]["email"] = ""

        form = CreateInvoiceRequestDTO.model_validate(payload)

        assert form.to_address.email is None

    def test_due_date_before_invoice_date(self, invoice_payload):
        with pytest.raises(ValidationError):
            CreateInvoiceRequestDTO.model_validate(
                invoice_payload(invoice_date="2026-10-19", due_date="2026-10-18")
            )

    def test_items_may_be_empty(self, invoice_payload):
        form = CreateInvoiceRequestDTO.model_validate(invoice_payload(items=[], sub_total=0, total=0))

        assert form.items == []

    def test_items_key_required(self, invoice_payload):
        payload = invoice_payload()
        payload.pop("items")

        with pytest.raises(ValidationError):
            CreateInvoiceRequestDTO.model_validate(payload)

    def test_float_artifacts_are_rounded_to_cents(self, invoice_payload):
        items = [{"item_name": "Stamps", "quantity": 3, "price": 0.1, "total": 0.30000000000000004}]

        form = CreateInvoiceRequestDTO.model_validate(
            invoice_payload(items=items, sub_total=0.30000000000000004, total=0.30000000000000004, tax_percentage=7.125)
        )

        assert form.items[0].price == Decimal("0.10")
        assert form.items[0].total == Decimal("0.30")
        assert form.sub_total == Decimal("0.30")
        assert form.total == Decimal("0.30")
        assert form.tax_percentage == Decimal("7.13")

    def test_non_numeric_amount(self, invoice_payload):
        with pytest.raises(ValidationError):
            CreateInvoiceRequestDTO.model_validate(invoice_payload(total="twenty"))

    def test_negative_price(self, invoice_payload):
        items = [{"item_name": "Design", "quantity": 1, "price": -1, "total": 0}]

        with pytest.raises(ValidationError):
            CreateInvoiceRequestDTO.model_validate(invoice_payload(items=items))

    def test_unknown_status(self, invoice_payload):
        with pytest.raises(ValidationError):
            CreateInvoiceRequestDTO.model_validate(invoice_payload(status="LOST"))

    def test_domain_fields_build_an_invoice(self, invoice_payload):
        form = UpdateInvoiceRequestDTO.model_validate(invoice_payload(status="PAID"))

        invoice = Invoice.create(owner_id="account-1", **form.domain_fields())

        assert invoice.status == InvoiceStatus.PAID
        assert invoice.to_address.address2 == "Suite 5"
        assert len(invoice.items) == 1


class TestListRequest:

    def test_defaults(self):
        request = ListInvoicesRequestDTO()

        assert request.page == 1
        assert request.limit == 5
        assert request.offset == 0

    def test_offset(self):
        assert ListInvoicesRequestDTO(page=3, limit=5).offset == 10


class TestPagination:

    @pytest.mark.parametrize("total,limit,pages", [(0, 5, 0), (5, 5, 1), (12, 5, 3)])
    def test_pages_round_up(self, total, limit, pages):
        assert PaginationDTO.create(total=total, page=1, limit=limit).pages == pages


class TestInvoiceResponse:

    def test_money_is_serialized_as_numbers(self, invoice_form):
        invoice = Invoice.create(owner_id="account-1", **invoice_form().domain_fields())
        invoice.id = "invoice-1"

        body = InvoiceResponseDTO.from_domain(invoice).model_dump(mode="json")

        assert body["id"] == "invoice-1"
        assert body["user_id"] == "account-1"
        assert body["total"] == 20.0
        assert body["items"][0]["price"] == 10.0
        assert body["status"] == "UNPAID"
        assert body["invoice_date"] == date.today().isoformat()
