"""
Invoice repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from datetime import date

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from invoicer.domain.models.dashboard import RevenueRecord
from invoicer.domain.models.invoice import Invoice, InvoiceStatus
from invoicer.domain.repositories.invoice_repository import InvoiceRepository as InvoiceRepositoryInterface
from invoicer.infrastructure.db.models import InvoiceModel
from invoicer.infrastructure.mappers.invoice_mapper import InvoiceMapper


class SQLAlchemyInvoiceRepository(InvoiceRepositoryInterface):
    """
    SQLAlchemy implementation of invoice repository.

    Each call opens its own session from the factory, so independent reads
    can be awaited concurrently.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory
        self.mapper = InvoiceMapper()

    def _aggregate_query(self):
        return select(InvoiceModel).options(
            selectinload(InvoiceModel.from_address),
            selectinload(InvoiceModel.to_address),
            selectinload(InvoiceModel.items)
        )

    async def create(self, invoice: Invoice) -> Invoice:
        """Insert the invoice, both addresses and all items in one transaction."""
        async with self.session_factory() as session:
            async with session.begin():
                model = self.mapper.domain_to_model(invoice)
                session.add(model)

            return self.mapper.model_to_domain(model)

    async def update(self, invoice: Invoice) -> Optional[Invoice]:
        """
        Lock the invoice row, update addresses in place and replace the items,
        all in one transaction.
        """
        async with self.session_factory() as session:
            async with session.begin():
                stmt = (
                    self._aggregate_query()
                    .where(InvoiceModel.id == invoice.id, InvoiceModel.user_id == invoice.owner_id)
                    .with_for_update()
                )
                model = (await session.execute(stmt)).scalar_one_or_none()
                if model is None:
                    return None

                self.mapper.update_model(model, invoice)

                model.items.clear()
                await session.flush()
                model.items.extend(self.mapper.items_to_models(invoice.items))

            return self.mapper.model_to_domain(model)

    async def find_by_id(self, invoice_id: str, owner_id: str) -> Optional[Invoice]:
        """Find an invoice by ID, scoped to its owner."""
        async with self.session_factory() as session:
            stmt = self._aggregate_query().where(
                InvoiceModel.id == invoice_id,
                InvoiceModel.user_id == owner_id
            )
            model = (await session.execute(stmt)).scalar_one_or_none()

            if not model:
                return None

            return self.mapper.model_to_domain(model)

    async def list_by_owner(self, owner_id: str, offset: int, limit: int) -> List[Invoice]:
        """List invoices newest first."""
        async with self.session_factory() as session:
            stmt = (
                self._aggregate_query()
                .where(InvoiceModel.user_id == owner_id)
                .order_by(InvoiceModel.created_at.desc(), InvoiceModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
            models = (await session.execute(stmt)).scalars().all()

            return [self.mapper.model_to_domain(model) for model in models]

    async def count_by_owner(self, owner_id: str) -> int:
        async with self.session_factory() as session:
            stmt = select(func.count(InvoiceModel.id)).where(InvoiceModel.user_id == owner_id)
            return (await session.execute(stmt)).scalar_one()

    async def find_revenue_since(self, owner_id: str, since: date) -> List[RevenueRecord]:
        async with self.session_factory() as session:
            stmt = (
                select(InvoiceModel.invoice_date, InvoiceModel.total, InvoiceModel.status)
                .where(InvoiceModel.user_id == owner_id, InvoiceModel.invoice_date >= since)
                .order_by(InvoiceModel.invoice_date, InvoiceModel.created_at)
            )
            rows = (await session.execute(stmt)).all()

            return [
                RevenueRecord(
                    invoice_date=row.invoice_date,
                    total=row.total,
                    status=InvoiceStatus(row.status)
                )
                for row in rows
            ]

    async def count_since(
        self,
        owner_id: str,
        since: date,
        status: Optional[InvoiceStatus] = None
    ) -> int:
        async with self.session_factory() as session:
            stmt = select(func.count(InvoiceModel.id)).where(
                InvoiceModel.user_id == owner_id,
                InvoiceModel.invoice_date >= since
            )
            if status is not None:
                stmt = stmt.where(InvoiceModel.status == status)

            return (await session.execute(stmt)).scalar_one()

    async def find_recent(self, owner_id: str, limit: int) -> List[Invoice]:
        """Most recently created invoices with addresses only."""
        async with self.session_factory() as session:
            stmt = (
                select(InvoiceModel)
                .options(
                    selectinload(InvoiceModel.from_address),
                    selectinload(InvoiceModel.to_address)
                )
                .where(InvoiceModel.user_id == owner_id)
                .order_by(InvoiceModel.created_at.desc(), InvoiceModel.id.desc())
                .limit(limit)
            )
            models = (await session.execute(stmt)).scalars().all()

            return [self.mapper.model_to_domain(model, include_items=False) for model in models]
