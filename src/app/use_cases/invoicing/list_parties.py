"""List Parties Use Case

Retrieves all parties with their running balance.
"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.party_repository import PartyRepository
from .dtos import PartyResponseDTO


class ListParties:
    """Read-only listing of parties, ordered by ID"""

    def __init__(self, party_repo: PartyRepository):
        self.party_repo = party_repo

    async def execute(self) -> Result[List[PartyResponseDTO]]:
        parties = await self.party_repo.find_all()
        return Return.ok([PartyResponseDTO.from_entity(party) for party in parties])
