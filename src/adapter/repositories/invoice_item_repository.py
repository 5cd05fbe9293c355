"""SQLAlchemy Invoice Item Repository Implementation

Implements invoice item persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository

    Replacing or deleting items issues explicit DELETE statements, so
    orphans are removed even where the database does not enforce
    ON DELETE CASCADE.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.position, InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def replace_for_invoice(
        self, invoice_id: int, items: List[InvoiceItem]
    ) -> List[InvoiceItem]:
        """
        Delete the current items of an invoice and store the given ones

        Args:
            invoice_id: Invoice ID
            items: New items, already attached to the invoice in display order

        Returns:
            Persisted items with generated IDs
        """
        await self.delete_by_invoice_id(invoice_id)

        for item in items:
            self.session.add(item)

        await self.session.flush()
        for item in items:
            await self.session.refresh(item)
        return items

    async def delete_by_invoice_id(self, invoice_id: int) -> None:
        statement = delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        await self.session.execute(statement)
        await self.session.flush()
