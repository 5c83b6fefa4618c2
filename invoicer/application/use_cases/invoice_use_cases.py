"""
Invoice use cases for the application layer.
Create, edit, list and fetch invoices owned by the calling account.
"""

import asyncio
import logging

from invoicer.application.use_cases.base_use_case import (
    BaseUseCase, PaginatedQueryUseCase, CurrentIdentity, UseCaseResult
)
from invoicer.application.dto.base_dto import PaginationDTO, to_dict
from invoicer.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO, UpdateInvoiceRequestDTO, GetInvoiceRequestDTO,
    ListInvoicesRequestDTO, InvoiceResponseDTO
)
from invoicer.domain.models.base import EntityNotFoundError
from invoicer.domain.models.invoice import Invoice
from invoicer.domain.repositories.invoice_repository import InvoiceRepository


logger = logging.getLogger(__name__)


class CreateInvoiceUseCase(BaseUseCase[CreateInvoiceRequestDTO, dict]):
    """Use case for creating a new invoice with its addresses and items."""

    failure_message = "Failed to create invoice"

    def __init__(self, invoice_repository: InvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: CreateInvoiceRequestDTO) -> dict:
        invoice = Invoice.create(owner_id=identity.id, **request.domain_fields())

        saved_invoice = await self.invoice_repository.create(invoice)
        logger.info(f"Invoice {saved_invoice.id} created for account {identity.id}")

        return to_dict(InvoiceResponseDTO.from_domain(saved_invoice))


class UpdateInvoiceUseCase(BaseUseCase[UpdateInvoiceRequestDTO, dict]):
    """
    Use case for editing an invoice.

    Addresses are updated in place and the item set is replaced wholesale.
    An invoice owned by another account is reported exactly like a missing one.
    """

    failure_message = "Failed to update invoice"

    def __init__(self, invoice_repository: InvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: UpdateInvoiceRequestDTO) -> dict:
        if not request.invoice_id:
            raise EntityNotFoundError("Invoice")

        invoice = await self.invoice_repository.find_by_id(request.invoice_id, identity.id)
        if not invoice:
            raise EntityNotFoundError("Invoice", request.invoice_id)

        invoice.revise(**request.domain_fields())

        updated_invoice = await self.invoice_repository.update(invoice)
        if not updated_invoice:
            raise EntityNotFoundError("Invoice", request.invoice_id)

        logger.info(f"Invoice {updated_invoice.id} updated with {len(updated_invoice.items)} items")
        return to_dict(InvoiceResponseDTO.from_domain(updated_invoice))


class ListInvoicesUseCase(PaginatedQueryUseCase[ListInvoicesRequestDTO, list]):
    """Use case for one page of the caller's invoices, newest first."""

    failure_message = "Failed to fetch invoices"

    def __init__(self, invoice_repository: InvoiceRepository, max_page_size: int = 100):
        super().__init__(max_page_size)
        self.invoice_repository = invoice_repository

    async def _execute_business_logic(
        self,
        identity: CurrentIdentity,
        request: ListInvoicesRequestDTO
    ) -> UseCaseResult[list]:
        request = request or ListInvoicesRequestDTO()
        self._validate_page(request.page, request.limit)

        invoices, total = await asyncio.gather(
            self.invoice_repository.list_by_owner(identity.id, request.offset, request.limit),
            self.invoice_repository.count_by_owner(identity.id)
        )

        pagination = PaginationDTO.create(total=total, page=request.page, limit=request.limit)
        return UseCaseResult.success_result(
            data=[to_dict(InvoiceResponseDTO.from_domain(invoice)) for invoice in invoices],
            pagination=pagination.model_dump()
        )


class GetInvoiceUseCase(BaseUseCase[GetInvoiceRequestDTO, dict]):
    """Use case for one invoice with addresses and items."""

    failure_message = "Failed to fetch invoice"

    def __init__(self, invoice_repository: InvoiceRepository):
        super().__init__()
        self.invoice_repository = invoice_repository

    async def _execute_business_logic(self, identity: CurrentIdentity, request: GetInvoiceRequestDTO) -> dict:
        invoice = await self.invoice_repository.find_by_id(request.invoice_id, identity.id)
        if not invoice:
            raise EntityNotFoundError("Invoice", request.invoice_id)

        return to_dict(InvoiceResponseDTO.from_domain(invoice))
