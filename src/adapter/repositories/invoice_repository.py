"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from datetime import datetime
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_all(self) -> List[Invoice]:
        statement = select(Invoice).order_by(Invoice.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_party_id(self, party_id: int) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.party_id == party_id)
            .order_by(Invoice.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def exists_by_id(self, invoice_id: int) -> bool:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        count = result.scalar_one()
        return count > 0

    async def save(self, invoice: Invoice) -> Invoice:
        """
        Insert or update an invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Persisted Invoice with generated ID
        """
        if invoice.id is not None:
            invoice.updated_at = datetime.utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete_by_id(self, invoice_id: int) -> None:
        statement = delete(Invoice).where(Invoice.id == invoice_id)
        await self.session.execute(statement)
        await self.session.flush()
