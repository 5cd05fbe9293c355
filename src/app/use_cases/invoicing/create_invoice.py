"""CreateInvoice Use Case

Creates an invoice, resolving its party and reconciling the party balance.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.exceptions import InvalidComputationInput
from src.domain.invoice import Invoice
from src.domain.invoice_calculator import InvoiceCalculator
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .party_resolver import PartyResolver

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create invoice against a party

    Business Rules:
    1. Party is matched by case-insensitive name or created
    2. Derived fields are computed only when the invoice has items
    3. previous_balance is the party balance before this invoice
    4. Party balance becomes the invoice balance
    5. Invoice, items and party balance commit together or not at all

    Flow:
    1. Resolve party (locks its row)
    2. Insert invoice to obtain its number
    3. Compute derived fields and party balance
    4. Store items
    5. Persist invoice and party
    6. Commit transaction
    7. Return response
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
        self.party_resolver = PartyResolver(party_repo)

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with party descriptor and items

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            # Step 1: Resolve party
            party = await self.party_resolver.resolve(command.party)

            # Step 2: Insert invoice
            invoice = Invoice(
                party_id=party.id,
                invoice_date=command.invoice_date,
                received_amount=command.received_amount,
                discount=command.discount,
                amount_in_words=command.amount_in_words,
            )
            invoice = await self.invoice_repo.save(invoice)

            # Step 3: Compute totals and party balance
            items = [item.to_entity() for item in command.items or []]
            self.calculator.compute_and_apply(invoice, items, party)

            # Step 4: Store items
            items = await self.item_repo.replace_for_invoice(invoice.id, items)

            # Step 5: Persist invoice and party
            invoice = await self.invoice_repo.save(invoice)
            party = await self.party_repo.save(party)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Created invoice {invoice.id} for party {party.id} "
                f"(total={invoice.total_amount}, balance={invoice.balance_amount})"
            )

            # Step 7: Build response
            return Return.ok(InvoiceResponseDTO.from_entity(invoice, party, items))

        except InvalidComputationInput as e:
            await self.uow.rollback()
            logger.warning(f"Invoice creation rejected: {e}")
            return Return.err(
                Error(
                    code="INVALID_COMPUTATION_INPUT",
                    message=str(e),
                    reason=f"Missing value for {e.field}",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice creation failed: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
