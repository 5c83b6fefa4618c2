"""
Invoice management router.
Handles invoice creation, editing, listing and emailing.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from invoicer.config import Settings, get_settings
from invoicer.application.dto.email_dto import SendInvoiceEmailRequestDTO
from invoicer.application.dto.invoice_dto import (
    CreateInvoiceRequestDTO,
    UpdateInvoiceRequestDTO,
    GetInvoiceRequestDTO,
    ListInvoicesRequestDTO,
)
from invoicer.application.use_cases.email_use_cases import SendInvoiceEmailUseCase
from invoicer.application.use_cases.invoice_use_cases import (
    CreateInvoiceUseCase,
    UpdateInvoiceUseCase,
    ListInvoicesUseCase,
    GetInvoiceUseCase,
)
from invoicer.domain.repositories.invoice_repository import InvoiceRepository
from invoicer.domain.services.email_service import EmailDeliveryChannel
from invoicer.infrastructure.auth.dependencies import AuthenticatedIdentityDep
from invoicer.infrastructure.db.database import get_session_factory
from invoicer.infrastructure.email.resend_client import get_email_channel
from invoicer.infrastructure.email.template_loader import EmailTemplateLoader
from invoicer.infrastructure.repositories.invoice_repository import SQLAlchemyInvoiceRepository
from invoicer.infrastructure.web.responses import envelope_response


router = APIRouter()


def get_invoice_repository(session_factory=Depends(get_session_factory)) -> InvoiceRepository:
    """Dependency to get invoice repository."""
    return SQLAlchemyInvoiceRepository(session_factory)


@lru_cache()
def get_template_loader() -> EmailTemplateLoader:
    """Dependency to get the email template loader."""
    return EmailTemplateLoader()


InvoiceRepositoryDep = Annotated[InvoiceRepository, Depends(get_invoice_repository)]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_invoice(
    request: CreateInvoiceRequestDTO,
    identity: AuthenticatedIdentityDep,
    repository: InvoiceRepositoryDep
):
    """
    Create a new invoice.

    - **invoice_no**, **invoice_date**, **due_date**: required
    - **from** / **to**: sender and recipient addresses
    - **items**: at least one line item; totals are stored as submitted
    - **currency**: defaults to USD; **status** defaults to UNPAID
    """
    use_case = CreateInvoiceUseCase(repository)
    result = await use_case.execute(identity, request)
    return envelope_response(result, status.HTTP_201_CREATED)


@router.get("")
async def list_invoices(
    identity: AuthenticatedIdentityDep,
    repository: InvoiceRepositoryDep,
    settings: Annotated[Settings, Depends(get_settings)],
    page: int = Query(1, description="Page number, starting at 1"),
    limit: Optional[int] = Query(None, description="Invoices per page")
):
    """
    List the caller's invoices, newest first, with pagination totals.
    """
    if limit is None:
        limit = settings.default_page_size
    request = ListInvoicesRequestDTO(page=page, limit=limit)
    use_case = ListInvoicesUseCase(repository, max_page_size=settings.max_page_size)
    result = await use_case.execute(identity, request)
    return envelope_response(result)


@router.get("/{invoice_id}")
async def get_invoice(
    invoice_id: str,
    identity: AuthenticatedIdentityDep,
    repository: InvoiceRepositoryDep
):
    """
    Get one invoice with its addresses and line items.
    """
    use_case = GetInvoiceUseCase(repository)
    result = await use_case.execute(identity, GetInvoiceRequestDTO(invoice_id=invoice_id))
    return envelope_response(result)


@router.put("/{invoice_id}")
async def update_invoice(
    invoice_id: str,
    request: UpdateInvoiceRequestDTO,
    identity: AuthenticatedIdentityDep,
    repository: InvoiceRepositoryDep
):
    """
    Replace an invoice's contents. Line items are replaced as a whole.
    """
    request.invoice_id = invoice_id
    use_case = UpdateInvoiceUseCase(repository)
    result = await use_case.execute(identity, request)
    return envelope_response(result)


@router.post("/{invoice_id}/send-email")
async def send_invoice_email(
    invoice_id: str,
    request: SendInvoiceEmailRequestDTO,
    identity: AuthenticatedIdentityDep,
    repository: InvoiceRepositoryDep,
    settings: Annotated[Settings, Depends(get_settings)],
    email_channel: Annotated[EmailDeliveryChannel, Depends(get_email_channel)],
    template_loader: Annotated[EmailTemplateLoader, Depends(get_template_loader)]
):
    """
    Email the invoice to its recipient address.
    """
    request.invoice_id = invoice_id
    use_case = SendInvoiceEmailUseCase(
        invoice_repository=repository,
        email_channel=email_channel,
        template_loader=template_loader,
        app_url=settings.app_url,
        sender=settings.email_from
    )
    result = await use_case.execute(identity, request)
    return envelope_response(result)
