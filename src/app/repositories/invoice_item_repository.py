"""Invoice Item Repository Interface

Defines the contract for invoice item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Items are owned by their invoice: they are only ever replaced or
    deleted as a whole set per invoice.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all items of an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem in insertion order
        """
        pass

    @abstractmethod
    async def replace_for_invoice(
        self, invoice_id: int, items: List[InvoiceItem]
    ) -> List[InvoiceItem]:
        """
        Delete the current items of an invoice and store the given ones

        Args:
            invoice_id: Invoice ID
            items: New items, in insertion order

        Returns:
            Persisted items with generated IDs
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> None:
        """
        Delete all items of an invoice

        Args:
            invoice_id: Invoice ID
        """
        pass
