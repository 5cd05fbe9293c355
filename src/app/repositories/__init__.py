from .party_repository import PartyRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository

__all__ = [
    "PartyRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
]
