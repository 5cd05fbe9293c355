"""Invoice Item Domain Entity

One priced line entry on an invoice.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, IdType


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Line entry owned by exactly one invoice

    Domain Rules:
    - Items are replaced as a whole when the invoice is updated
    - Items are deleted together with their invoice
    - position keeps insertion order
    - amount is taken as given (not recomputed from quantity * unit_price)
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice item identifier (auto-increment)"
    )

    invoice_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Zero-based position of the item on the invoice"
    )

    item_name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item description"
    )

    hsn_sac: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="HSN/SAC classification code"
    )

    quantity: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Quantity"
    )

    unit: Optional[str] = Field(
        default=None,
        description="Unit of measure (e.g., 'pcs', 'kg')"
    )

    unit_price: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Price per unit"
    )

    amount: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Line amount"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_id": 1,
                "position": 0,
                "item_name": "Steel rod",
                "hsn_sac": "7214",
                "quantity": "10.000000",
                "unit": "pcs",
                "unit_price": "10.000000",
                "amount": "100.000000"
            }
        }
