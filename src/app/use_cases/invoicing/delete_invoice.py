"""DeleteInvoice Use Case

Removes an invoice together with its items.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice

    Business Rules:
    1. Invoice must exist
    2. Items are deleted with the invoice
    3. The party balance is left as is; it is not rolled back to the
       balance before this invoice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice_id: int) -> Result[None]:
        """
        Execute invoice deletion

        Args:
            invoice_id: Invoice ID

        Returns:
            Result[None]: Success or INVOICE_NOT_FOUND / DELETE_INVOICE_FAILED
        """
        try:
            if not await self.invoice_repo.exists_by_id(invoice_id):
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            await self.item_repo.delete_by_invoice_id(invoice_id)
            await self.invoice_repo.delete_by_id(invoice_id)
            await self.uow.commit()

            logger.info(f"Deleted invoice {invoice_id}")
            return Return.ok(None)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice deletion failed: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message=f"Failed to delete invoice {invoice_id}",
                    reason=str(e),
                )
            )
