"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Items are not cascaded implicitly; they are managed through
    InvoiceItemRepository in the same unit of work.
    """

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Invoice]:
        """
        Retrieve all invoices

        Returns:
            List of invoices ordered by ID
        """
        pass

    @abstractmethod
    async def list_by_party_id(self, party_id: int) -> List[Invoice]:
        """
        Retrieve invoices billed against a party

        Args:
            party_id: Party ID

        Returns:
            List of invoices ordered by ID
        """
        pass

    @abstractmethod
    async def exists_by_id(self, invoice_id: int) -> bool:
        """
        Check whether an invoice exists

        Args:
            invoice_id: Invoice ID

        Returns:
            True if invoice exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, invoice: Invoice) -> Invoice:
        """
        Insert or update an invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Persisted Invoice with assigned ID
        """
        pass

    @abstractmethod
    async def delete_by_id(self, invoice_id: int) -> None:
        """
        Delete an invoice

        Args:
            invoice_id: Invoice ID
        """
        pass
