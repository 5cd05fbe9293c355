"""Get Invoice Use Case

Retrieves a single invoice with its party and items.
"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice import Invoice
from .dtos import InvoiceResponseDTO


async def load_invoice_response(
    invoice: Invoice,
    party_repo: PartyRepository,
    item_repo: InvoiceItemRepository,
) -> InvoiceResponseDTO:
    """Assemble the response for an invoice from its party and items"""
    party = await party_repo.get_by_id(invoice.party_id)
    items = await item_repo.get_by_invoice_id(invoice.id)
    return InvoiceResponseDTO.from_entity(invoice, party, items)


class GetInvoice:
    """
    Get Invoice Use Case

    Read-only. A missing invoice is an absent value (ok with None),
    not an error.
    """

    def __init__(
        self,
        party_repo: PartyRepository,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.party_repo = party_repo
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice_id: int) -> Result[Optional[InvoiceResponseDTO]]:
        invoice = await self.invoice_repo.get_by_id(invoice_id)

        if not invoice:
            return Return.ok(None)

        return Return.ok(
            await load_invoice_response(invoice, self.party_repo, self.item_repo)
        )
