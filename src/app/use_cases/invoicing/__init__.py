"""Invoicing use cases"""
from .party_resolver import PartyResolver
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices, ListPartyInvoices
from .list_parties import ListParties
from .dtos import (
    PartyDescriptorDTO,
    InvoiceItemDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    PartyResponseDTO,
    InvoiceItemResponseDTO,
    InvoiceResponseDTO,
)

__all__ = [
    "PartyResolver",
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "GetInvoice",
    "ListInvoices",
    "ListPartyInvoices",
    "ListParties",
    "PartyDescriptorDTO",
    "InvoiceItemDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "PartyResponseDTO",
    "InvoiceItemResponseDTO",
    "InvoiceResponseDTO",
]
