"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class PartyRequestSchema(BaseModel):
    """Party embedded in an invoice request"""

    name: str = Field(
        ...,
        min_length=1,
        description="Party name (required, non-empty, matched case-insensitively)"
    )

    address: Optional[str] = Field(default=None, description="Address")

    contact: Optional[str] = Field(default=None, description="Phone number or e-mail")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Reject names made only of whitespace"""
        if not v.strip():
            raise ValueError("Party name must not be blank")
        return v


class InvoiceItemRequestSchema(BaseModel):
    """
    Invoice item in a request

    amount is optional here; the calculation rejects a missing amount.
    """

    item_name: str = Field(..., min_length=1, description="Item description")
    hsn_sac: Optional[str] = Field(default=None, max_length=20, description="HSN/SAC code")
    quantity: Optional[Decimal] = Field(default=None, description="Quantity")
    unit: Optional[str] = Field(default=None, description="Unit of measure")
    unit_price: Optional[Decimal] = Field(default=None, description="Price per unit")
    amount: Optional[Decimal] = Field(default=None, description="Line amount")


class UpdateInvoiceRequestSchema(BaseModel):
    """
    Request schema for updating an invoice

    Used for PUT /invoices/{invoice_id}. Items replace the current items.
    """

    invoice_date: Optional[date] = Field(default=None, description="Invoice date")

    received_amount: Optional[Decimal] = Field(
        default=None,
        description="Payment received (required for the balance computation when items are given)"
    )

    discount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Discount (must be >= 0 when present)"
    )

    amount_in_words: Optional[str] = Field(default=None, description="Total amount spelled out")

    items: Optional[List[InvoiceItemRequestSchema]] = Field(
        default=None,
        description="Invoice items in display order"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_date": "2024-02-01",
                "received_amount": "50.00",
                "discount": "20.00",
                "items": [
                    {"item_name": "Steel rod", "hsn_sac": "7214", "quantity": "10", "unit": "pcs",
                     "unit_price": "20.00", "amount": "200.00"}
                ]
            }
        }


class InvoiceRequestSchema(UpdateInvoiceRequestSchema):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    party: PartyRequestSchema = Field(
        ...,
        description="Party the invoice is billed against"
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
