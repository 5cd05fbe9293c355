"""Party Domain Entity

A billing counterparty (customer) with a running balance.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String
from src.domain.base import BaseModel, IdType


def normalize_party_name(name: str) -> str:
    """Key used to match party names case-insensitively"""
    return name.lower()


class Party(BaseModel, table=True):
    """
    Party - Customer that invoices are billed against

    Domain Rules:
    - name is matched case-insensitively (name_key is the lower-cased name)
    - balance_amount starts at 0 and is replaced by the trailing balance
      of every invoice created or updated against the party
    - Parties are never deleted by invoice operations
    """

    __tablename__ = "parties"
    __table_args__ = (
        Index('ix_parties_name_key', 'name_key', unique=True),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique party identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Party name as first supplied"
    )

    name_key: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Lower-cased name used for lookups"
    )

    address: Optional[str] = Field(
        default=None,
        description="Postal address"
    )

    contact: Optional[str] = Field(
        default=None,
        description="Phone number or e-mail"
    )

    balance_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Running balance owed by the party"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Party creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last balance update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Acme Corp",
                "name_key": "acme corp",
                "address": "12 Market Street",
                "contact": "+1 555 0100",
                "balance_amount": "60.000000",
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
