"""Invoice repository interface.
Defines the contract for invoice data persistence operations.
Every method is scoped to the owning account.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from invoicer.domain.models.invoice import Invoice, InvoiceStatus
from invoicer.domain.models.dashboard import RevenueRecord


class InvoiceRepository(ABC):
    """
    Repository interface for the Invoice aggregate.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Persist a new invoice together with its addresses and line items
        in a single transaction. Returns the stored aggregate.
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Optional[Invoice]:
        """
        Persist an edited invoice: addresses in place, line items replaced.
        Returns None when the invoice no longer exists for its owner.
        """
        pass

    @abstractmethod
    async def find_by_id(self, invoice_id: str, owner_id: str) -> Optional[Invoice]:
        """
        Find an invoice with addresses and items.
        Returns None if not found or owned by another account.
        """
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str, offset: int, limit: int) -> List[Invoice]:
        """
        Page of invoices with addresses and items, newest first.
        """
        pass

    @abstractmethod
    async def count_by_owner(self, owner_id: str) -> int:
        pass

    @abstractmethod
    async def find_revenue_since(self, owner_id: str, since: date) -> List[RevenueRecord]:
        """
        Date, total and status of every invoice dated on or after `since`.
        """
        pass

    @abstractmethod
    async def count_since(
        self,
        owner_id: str,
        since: date,
        status: Optional[InvoiceStatus] = None
    ) -> int:
        """
        Count invoices dated on or after `since`, optionally with one status.
        """
        pass

    @abstractmethod
    async def find_recent(self, owner_id: str, limit: int) -> List[Invoice]:
        """
        Most recently created invoices with addresses (items not loaded).
        """
        pass
