"""List Invoices Use Cases

Retrieves all invoices, or the invoices billed against one party.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import InvoiceResponseDTO
from .get_invoice import load_invoice_response


class ListInvoices:
    """List every invoice, oldest first"""

    def __init__(
        self,
        party_repo: PartyRepository,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.party_repo = party_repo
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self) -> Result[List[InvoiceResponseDTO]]:
        invoices = await self.invoice_repo.find_all()
        return Return.ok(
            [
                await load_invoice_response(invoice, self.party_repo, self.item_repo)
                for invoice in invoices
            ]
        )


class ListPartyInvoices:
    """
    List the invoices of one party

    Errors:
        PARTY_NOT_FOUND: No party with the given ID
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

    async def execute(self, party_id: int) -> Result[List[InvoiceResponseDTO]]:
        party = await self.party_repo.get_by_id(party_id)

        if not party:
            return Return.err(
                Error(
                    code="PARTY_NOT_FOUND",
                    message=f"Party with ID {party_id} not found",
                )
            )

        invoices = await self.invoice_repo.list_by_party_id(party_id)
        responses = []
        for invoice in invoices:
            items = await self.item_repo.get_by_invoice_id(invoice.id)
            responses.append(InvoiceResponseDTO.from_entity(invoice, party, items))

        return Return.ok(responses)
