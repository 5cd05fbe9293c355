"""Invoice Calculator

Derives invoice totals and reconciles the party balance.
"""

from decimal import Decimal
from typing import List, Optional
from src.domain.exceptions import InvalidComputationInput
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.party import Party


class InvoiceCalculator:
    """
    Computes sub total, total and balance of an invoice

    Business Rules:
    1. Nothing is computed when the invoice has no items
    2. sub_total is the plain sum of item amounts (discount not applied)
    3. Discount is deducted only when present and > 0
    4. previous_balance is the party balance before this invoice
    5. total_amount = discounted sub total + previous_balance
    6. balance_amount = total_amount - received_amount
    7. The party balance becomes the invoice balance

    Missing item amounts or received amount raise InvalidComputationInput;
    they are never treated as zero.
    """

    def compute_and_apply(
        self,
        invoice: Invoice,
        items: Optional[List[InvoiceItem]],
        party: Party,
    ) -> Invoice:
        """
        Compute derived fields on the invoice and update the party balance

        Both invoice and party are mutated in place and must be persisted
        by the caller in the same unit of work.

        Args:
            invoice: Invoice to compute
            items: Items of the invoice, in display order
            party: Party the invoice is billed against

        Returns:
            The same invoice instance

        Raises:
            InvalidComputationInput: item amount or received amount is missing
        """
        if not items:
            return invoice

        self._validate(invoice, items)

        for position, item in enumerate(items):
            item.invoice_id = invoice.id
            item.position = position

        sub_total = sum((item.amount for item in items), Decimal("0"))
        invoice.sub_total = sub_total

        if invoice.discount is not None and invoice.discount > 0:
            sub_total -= invoice.discount

        invoice.previous_balance = party.balance_amount
        invoice.total_amount = sub_total + invoice.previous_balance
        invoice.balance_amount = invoice.total_amount - invoice.received_amount

        party.balance_amount = invoice.balance_amount

        return invoice

    def _validate(self, invoice: Invoice, items: List[InvoiceItem]) -> None:
        for position, item in enumerate(items):
            if item.amount is None:
                raise InvalidComputationInput(
                    "amount",
                    f"Item '{item.item_name}' at position {position} has no amount",
                )

        if invoice.received_amount is None:
            raise InvalidComputationInput(
                "received_amount",
                "Received amount is required to compute the invoice balance",
            )
