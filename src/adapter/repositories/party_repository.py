"""SQLAlchemy implementation of PartyRepository

Provides persistence for Party entities with pessimistic locking support
so that concurrent invoices against one party do not overwrite each
other's balance.
"""

from typing import Optional, List
from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.party_repository import PartyRepository
from src.domain.party import Party, normalize_party_name


class SqlAlchemyPartyRepository(PartyRepository):
    """
    SQLAlchemy implementation of PartyRepository

    Features:
    - Case-insensitive lookup through the indexed name_key column
    - Pessimistic locking via SELECT FOR UPDATE
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_all(self) -> List[Party]:
        statement = select(Party).order_by(Party.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_id(self, party_id: int, for_update: bool = False) -> Optional[Party]:
        """
        Retrieve party by ID with optional row-level locking

        Args:
            party_id: Party ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Party if found, None otherwise
        """
        stmt = select(Party).where(Party.id == party_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str, for_update: bool = False) -> Optional[Party]:
        """
        Retrieve party by case-insensitive name with optional row-level locking

        Args:
            name: Party name in any letter case
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Party if found, None otherwise
        """
        stmt = select(Party).where(Party.name_key == normalize_party_name(name))

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, party: Party) -> Party:
        """
        Insert or update a party

        Args:
            party: Party entity to persist

        Returns:
            Persisted Party with generated ID
        """
        party.name_key = normalize_party_name(party.name)
        if party.id is not None:
            party.updated_at = datetime.utcnow()
        self.session.add(party)
        await self.session.flush()
        await self.session.refresh(party)
        return party
