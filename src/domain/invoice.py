"""Invoice Domain Entity

Billing document against a party, with derived totals and balances.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, Date
from src.domain.base import BaseModel, IdType


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document composed of invoice items

    Domain Rules:
    - Belongs to exactly one party
    - sub_total is the sum of item amounts before discount
    - total_amount = (sub_total - discount, if discount > 0) + previous_balance
    - balance_amount = total_amount - received_amount
    - previous_balance is the party balance before this invoice is applied
    - Derived fields stay unset while the invoice has no items
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_party_id', 'party_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Invoice number (auto-increment)"
    )

    party_id: int = Field(
        sa_column=Column(IdType, ForeignKey("parties.id"), nullable=False),
        description="Foreign key to Party"
    )

    invoice_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
        description="Invoice date"
    )

    sub_total: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Sum of item amounts before discount"
    )

    discount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Discount deducted from the sub total when > 0"
    )

    previous_balance: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Party balance before this invoice was applied"
    )

    total_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Discounted sub total plus previous balance"
    )

    received_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Payment received with this invoice"
    )

    balance_amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Amount still owed after payment"
    )

    amount_in_words: Optional[str] = Field(
        default=None,
        description="Total amount spelled out (free text)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "party_id": 1,
                "invoice_date": "2024-02-01",
                "sub_total": "200.000000",
                "discount": "20.000000",
                "previous_balance": "60.000000",
                "total_amount": "240.000000",
                "received_amount": "50.000000",
                "balance_amount": "190.000000",
                "amount_in_words": "Two hundred forty only",
                "created_at": "2024-02-01T00:00:00Z",
                "updated_at": "2024-02-01T00:00:00Z"
            }
        }
