"""Party Resolver

Finds the party an invoice is billed against, creating it on first use.
"""

import logging
from decimal import Decimal
from src.app.repositories.party_repository import PartyRepository
from src.domain.party import Party, normalize_party_name
from .dtos import PartyDescriptorDTO

logger = logging.getLogger(__name__)


class PartyResolver:
    """
    Resolve a party descriptor to a stored party

    Business Rules:
    1. Names match case-insensitively ("Acme Corp" == "ACME CORP")
    2. An existing party wins; address/contact in the descriptor are ignored
    3. Unknown names create a new party with balance 0

    The matched row is locked (SELECT FOR UPDATE) so the balance snapshot
    taken afterwards is serialized per party.
    """

    def __init__(self, party_repo: PartyRepository):
        self.party_repo = party_repo

    async def resolve(self, descriptor: PartyDescriptorDTO) -> Party:
        existing = await self.party_repo.get_by_name(descriptor.name, for_update=True)
        if existing:
            return existing

        party = Party(
            name=descriptor.name,
            name_key=normalize_party_name(descriptor.name),
            address=descriptor.address,
            contact=descriptor.contact,
            balance_amount=Decimal("0"),
        )
        created = await self.party_repo.save(party)
        logger.info(f"Created party {created.id} ({created.name})")
        return created
