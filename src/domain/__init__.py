from .base import BaseModel
from .party import Party, normalize_party_name
from .invoice import Invoice
from .invoice_item import InvoiceItem
from .invoice_calculator import InvoiceCalculator
from .exceptions import InvalidComputationInput

__all__ = [
    "BaseModel",
    "Party",
    "normalize_party_name",
    "Invoice",
    "InvoiceItem",
    "InvoiceCalculator",
    "InvalidComputationInput",
]
