"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.party import Party


class PartyDescriptorDTO(BaseModel):
    """
    Party as supplied with an invoice

    Resolved against stored parties by case-insensitive name.
    """

    name: str = Field(
        ...,
        description="Party name (matched case-insensitively)"
    )

    address: Optional[str] = Field(
        default=None,
        description="Address, used only when a new party is created"
    )

    contact: Optional[str] = Field(
        default=None,
        description="Contact, used only when a new party is created"
    )


class InvoiceItemDTO(BaseModel):
    """Command DTO for one invoice item"""

    item_name: str = Field(..., description="Item description")
    hsn_sac: Optional[str] = Field(default=None, description="HSN/SAC code")
    quantity: Optional[Decimal] = Field(default=None, description="Quantity")
    unit: Optional[str] = Field(default=None, description="Unit of measure")
    unit_price: Optional[Decimal] = Field(default=None, description="Price per unit")
    amount: Optional[Decimal] = Field(default=None, description="Line amount")

    def to_entity(self) -> InvoiceItem:
        return InvoiceItem(
            item_name=self.item_name,
            hsn_sac=self.hsn_sac,
            quantity=self.quantity,
            unit=self.unit,
            unit_price=self.unit_price,
            amount=self.amount,
        )


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    party: PartyDescriptorDTO = Field(
        ...,
        description="Party the invoice is billed against"
    )

    invoice_date: Optional[date] = Field(
        default=None,
        description="Invoice date"
    )

    received_amount: Optional[Decimal] = Field(
        default=None,
        description="Payment received with the invoice"
    )

    discount: Optional[Decimal] = Field(
        default=None,
        description="Discount deducted from the sub total"
    )

    amount_in_words: Optional[str] = Field(
        default=None,
        description="Total amount spelled out"
    )

    items: Optional[List[InvoiceItemDTO]] = Field(
        default=None,
        description="Invoice items in display order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "party": {"name": "Acme Corp", "address": "12 Market Street", "contact": "+1 555 0100"},
                "invoice_date": "2024-02-01",
                "received_amount": "50.00",
                "discount": "20.00",
                "amount_in_words": "Two hundred forty only",
                "items": [
                    {"item_name": "Steel rod", "hsn_sac": "7214", "quantity": "10", "unit": "pcs",
                     "unit_price": "20.00", "amount": "200.00"}
                ]
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for updating an invoice

    Items fully replace the invoice's current items. The party is not
    re-resolved.
    """

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_date: Optional[date] = Field(default=None, description="Invoice date")
    received_amount: Optional[Decimal] = Field(default=None, description="Payment received")
    discount: Optional[Decimal] = Field(default=None, description="Discount")
    amount_in_words: Optional[str] = Field(default=None, description="Total amount spelled out, kept when omitted")
    items: Optional[List[InvoiceItemDTO]] = Field(default=None, description="Replacement items")


class PartyResponseDTO(BaseModel):
    """Response DTO for a party"""

    party_id: int = Field(..., description="Party ID")
    name: str = Field(..., description="Party name")
    address: Optional[str] = Field(default=None, description="Address")
    contact: Optional[str] = Field(default=None, description="Contact")
    balance_amount: Decimal = Field(..., description="Running balance")

    @classmethod
    def from_entity(cls, party: Party) -> "PartyResponseDTO":
        return cls(
            party_id=party.id,
            name=party.name,
            address=party.address,
            contact=party.contact,
            balance_amount=party.balance_amount,
        )


class InvoiceItemResponseDTO(BaseModel):
    """Response DTO for an invoice item"""

    item_id: int
    item_name: str
    hsn_sac: Optional[str] = None
    quantity: Optional[Decimal] = None
    unit: Optional[str] = None
    unit_price: Optional[Decimal] = None
    amount: Optional[Decimal] = None

    @classmethod
    def from_entity(cls, item: InvoiceItem) -> "InvoiceItemResponseDTO":
        return cls(
            item_id=item.id,
            item_name=item.item_name,
            hsn_sac=item.hsn_sac,
            quantity=item.quantity,
            unit=item.unit,
            unit_price=item.unit_price,
            amount=item.amount,
        )


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by CreateInvoice, UpdateInvoice, GetInvoice and ListInvoices.
    """

    invoice_id: int = Field(..., description="Invoice number")
    invoice_date: Optional[date] = Field(default=None, description="Invoice date")
    sub_total: Optional[Decimal] = Field(default=None, description="Sum of item amounts")
    discount: Optional[Decimal] = Field(default=None, description="Discount")
    previous_balance: Optional[Decimal] = Field(default=None, description="Party balance before invoice")
    total_amount: Optional[Decimal] = Field(default=None, description="Amount due including previous balance")
    received_amount: Optional[Decimal] = Field(default=None, description="Payment received")
    balance_amount: Optional[Decimal] = Field(default=None, description="Amount still owed")
    amount_in_words: Optional[str] = Field(default=None, description="Total amount spelled out")
    party: PartyResponseDTO = Field(..., description="Party the invoice is billed against")
    items: List[InvoiceItemResponseDTO] = Field(default_factory=list, description="Invoice items")
    created_at: datetime = Field(..., description="Invoice creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(
        cls, invoice: Invoice, party: Party, items: List[InvoiceItem]
    ) -> "InvoiceResponseDTO":
        return cls(
            invoice_id=invoice.id,
            invoice_date=invoice.invoice_date,
            sub_total=invoice.sub_total,
            discount=invoice.discount,
            previous_balance=invoice.previous_balance,
            total_amount=invoice.total_amount,
            received_amount=invoice.received_amount,
            balance_amount=invoice.balance_amount,
            amount_in_words=invoice.amount_in_words,
            party=PartyResponseDTO.from_entity(party),
            items=[InvoiceItemResponseDTO.from_entity(item) for item in items],
            created_at=invoice.created_at,
            updated_at=invoice.updated_at,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 2,
                "invoice_date": "2024-02-01",
                "sub_total": "200.000000",
                "discount": "20.000000",
                "previous_balance": "60.000000",
                "total_amount": "240.000000",
                "received_amount": "50.000000",
                "balance_amount": "190.000000",
                "amount_in_words": "Two hundred forty only",
                "party": {
                    "party_id": 1,
                    "name": "Acme Corp",
                    "address": "12 Market Street",
                    "contact": "+1 555 0100",
                    "balance_amount": "190.000000"
                },
                "items": [],
                "created_at": "2024-02-01T00:00:00Z",
                "updated_at": "2024-02-01T00:00:00Z"
            }
        }
