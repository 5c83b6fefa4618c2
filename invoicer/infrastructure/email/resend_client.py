"""
Email delivery through the Resend transactional email API.
"""

import asyncio
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from invoicer.config import settings
from invoicer.domain.services.email_service import EmailDeliveryChannel, DeliveryResult


logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_MESSAGE = "Failed to send email"


class ResendEmailChannel(EmailDeliveryChannel):
    """
    Delivery channel posting JSON to the Resend REST API.

    Without an API key the message is logged instead of sent (development)
    and reported as delivered.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: str = "https://api.resend.com/emails",
        timeout: float = 10.0
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.sent_emails: List[Dict[str, Any]] = []  # For tracking in development

    async def send(self, sender: str, to: str, subject: str, html: str) -> DeliveryResult:
        payload = {
            "from": sender,
            "to": [to],
            "subject": subject,
            "html": html,
        }

        if not self._is_configured():
            logger.warning("Resend API key not configured, email will be logged instead")
            return self._log_email(payload)

        try:
            response = await asyncio.to_thread(self._post, payload)
        except requests.RequestException as e:
            logger.error(f"Failed to reach email API: {str(e)}")
            return DeliveryResult.failed(TRANSPORT_FAILURE_MESSAGE)

        return self._parse_response(response)

    def _post(self, payload: Dict[str, Any]) -> requests.Response:
        return requests.post(
            self.api_url,
            json=payload,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.timeout,
        )

    def _parse_response(self, response: requests.Response) -> DeliveryResult:
        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.ok:
            message_id = body.get("id") if isinstance(body, dict) else None
            logger.info(f"Email accepted by Resend (id={message_id})")
            return DeliveryResult.delivered(message_id)

        message = body.get("message") if isinstance(body, dict) else None
        logger.error(f"Email API rejected message ({response.status_code}): {message}")
        return DeliveryResult.failed(message or "")

    def _log_email(self, payload: Dict[str, Any]) -> DeliveryResult:
        """Log email instead of sending (for development)."""
        html = payload["html"]
        email_log = {
            "timestamp": datetime.now().isoformat(),
            "from": payload["from"],
            "to": payload["to"],
            "subject": payload["subject"],
            "html_preview": html[:200] + "..." if len(html) > 200 else html,
        }
        self.sent_emails.append(email_log)

        logger.info(f"Email logged (Resend not configured): {payload['subject']} to {payload['to']}")
        return DeliveryResult.delivered(None)

    def _is_configured(self) -> bool:
        return bool(self.api_key)


# Singleton instance
_email_channel = None


def get_email_channel() -> EmailDeliveryChannel:
    """Get singleton delivery channel instance."""
    global _email_channel
    if _email_channel is None:
        _email_channel = ResendEmailChannel(
            api_key=settings.resend_api_key,
            api_url=settings.resend_api_url,
            timeout=settings.email_timeout_seconds
        )
    return _email_channel
