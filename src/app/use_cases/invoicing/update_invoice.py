"""UpdateInvoice Use Case

Replaces an invoice's editable fields and items and recomputes its totals.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.exceptions import InvalidComputationInput
from src.domain.invoice_calculator import InvoiceCalculator
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Update an existing invoice

    Business Rules:
    1. Invoice must exist
    2. invoice_date, received_amount and discount are overwritten;
       amount_in_words only when supplied
    3. Items are fully replaced (no merge)
    4. The invoice keeps its party; previous_balance is read from the
       party's current balance
    5. Party balance becomes the recomputed invoice balance

    Flow:
    1. Retrieve invoice
    2. Lock its party row (SELECT FOR UPDATE)
    3. Apply field updates
    4. Compute derived fields and party balance
    5. Replace items
    6. Persist invoice and party
    7. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        calculator: InvoiceCalculator = None,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.calculator = calculator or InvoiceCalculator()

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice update

        Args:
            command: UpdateInvoiceCommandDTO with invoice_id and new values

        Returns:
            Result[InvoiceResponseDTO]: Success with updated invoice or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Lock party row
            party = await self.party_repo.get_by_id(invoice.party_id, for_update=True)

            # Step 3: Apply field updates
            invoice.invoice_date = command.invoice_date
            invoice.received_amount = command.received_amount
            invoice.discount = command.discount
            if command.amount_in_words is not None:
                invoice.amount_in_words = command.amount_in_words

            # Step 4: Compute totals and party balance
            items = [item.to_entity() for item in command.items or []]
            self.calculator.compute_and_apply(invoice, items, party)

            # Step 5: Replace items
            items = await self.item_repo.replace_for_invoice(invoice.id, items)

            # Step 6: Persist invoice and party
            invoice = await self.invoice_repo.save(invoice)
            party = await self.party_repo.save(party)

            # Step 7: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Updated invoice {invoice.id} for party {party.id} "
                f"(total={invoice.total_amount}, balance={invoice.balance_amount})"
            )

            return Return.ok(InvoiceResponseDTO.from_entity(invoice, party, items))

        except InvalidComputationInput as e:
            await self.uow.rollback()
            logger.warning(f"Invoice {command.invoice_id} update rejected: {e}")
            return Return.err(
                Error(
                    code="INVALID_COMPUTATION_INPUT",
                    message=str(e),
                    reason=f"Missing value for {e.field}",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice update failed: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message=f"Failed to update invoice {command.invoice_id}",
                    reason=str(e),
                )
            )
