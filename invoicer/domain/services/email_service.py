"""
Email delivery interface.
Outbound email is handed to an external transactional email API.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome reported by the delivery API: a message id or an error."""

    message_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def delivered(cls, message_id: Optional[str]) -> "DeliveryResult":
        return cls(message_id=message_id)

    @classmethod
    def failed(cls, error: str) -> "DeliveryResult":
        return cls(error=error)


class EmailDeliveryChannel(ABC):
    """
    Email delivery interface.
    Implementations report API errors through DeliveryResult instead of raising.
    """

    @abstractmethod
    async def send(self,
                   sender: str,
                   to: str,
                   subject: str,
                   html: str) -> DeliveryResult:
        """
        Submit one rendered message for delivery.
        """
        pass
