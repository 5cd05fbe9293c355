"""Party Repository Interface

Defines the contract for party persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.party import Party


class PartyRepository(ABC):
    """
    Repository interface for Party persistence

    Lookups accept for_update to lock the party row (SELECT FOR UPDATE)
    while its balance is being recomputed.
    """

    @abstractmethod
    async def find_all(self) -> List[Party]:
        """
        Retrieve all parties

        Returns:
            List of parties ordered by ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, party_id: int, for_update: bool = False) -> Optional[Party]:
        """
        Retrieve party by ID

        Args:
            party_id: Party ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Party if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_name(self, name: str, for_update: bool = False) -> Optional[Party]:
        """
        Retrieve party by name, ignoring case

        Args:
            name: Party name in any letter case
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Party if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, party: Party) -> Party:
        """
        Insert or update a party

        Args:
            party: Party entity to persist

        Returns:
            Persisted Party with assigned ID
        """
        pass
