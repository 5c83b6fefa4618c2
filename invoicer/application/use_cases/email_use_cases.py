"""
Invoice email use cases.
Renders the invoice notification and hands it to the delivery channel.
"""

import logging

from invoicer.application.use_cases.base_use_case import (
    BaseUseCase, CurrentIdentity, UseCaseResult, DELIVERY_FAILED, VALIDATION_ERROR
)
from invoicer.application.dto.email_dto import SendInvoiceEmailRequestDTO
from invoicer.domain.models.base import EntityNotFoundError
from invoicer.domain.models.invoice import Invoice
from invoicer.domain.repositories.invoice_repository import InvoiceRepository
from invoicer.domain.services.email_service import EmailDeliveryChannel
from invoicer.infrastructure.email.template_loader import EmailTemplateLoader


logger = logging.getLogger(__name__)

INVOICE_TEMPLATE = "send_invoice.html"


class SendInvoiceEmailUseCase(BaseUseCase[SendInvoiceEmailRequestDTO, None]):
    """
    Email an invoice to its recipient address. No retry: the first error
    reported by the delivery channel is returned to the caller.
    """

    failure_message = "Failed to send email"

    def __init__(
        self,
        invoice_repository: InvoiceRepository,
        email_channel: EmailDeliveryChannel,
        template_loader: EmailTemplateLoader,
        app_url: str,
        sender: str
    ):
        super().__init__()
        self.invoice_repository = invoice_repository
        self.email_channel = email_channel
        self.template_loader = template_loader
        self.app_url = app_url.rstrip("/")
        self.sender = sender

    async def _execute_business_logic(
        self,
        identity: CurrentIdentity,
        request: SendInvoiceEmailRequestDTO
    ) -> UseCaseResult[None]:
        invoice = None
        if request.invoice_id:
            invoice = await self.invoice_repository.find_by_id(request.invoice_id, identity.id)
        if not invoice:
            raise EntityNotFoundError("Invoice", request.invoice_id)

        recipient = invoice.recipient_email
        if not recipient:
            logger.info(f"Invoice {invoice.id} has no recipient email, nothing sent")
            return UseCaseResult.error_result("Client email not found", VALIDATION_ERROR)

        html = await self.template_loader.render_template(INVOICE_TEMPLATE, self._context(invoice))

        delivery = await self.email_channel.send(
            sender=self.sender,
            to=recipient,
            subject=request.subject,
            html=html
        )
        if not delivery.ok:
            logger.warning(f"Delivery of invoice {invoice.id} failed: {delivery.error}")
            return UseCaseResult.error_result(delivery.error or self.failure_message, DELIVERY_FAILED)

        logger.info(f"Invoice {invoice.id} emailed to {recipient} (message {delivery.message_id})")
        return UseCaseResult.success_result(message="Email sent successfully")

    def _context(self, invoice: Invoice) -> dict:
        return {
            "first_name": invoice.to_address.name,
            "invoice_no": invoice.invoice_no,
            "due_date": invoice.due_date,
            "total": invoice.total,
            "currency": invoice.currency,
            "invoice_url": f"{self.app_url}/invoice/paid/{invoice.id}",
        }
