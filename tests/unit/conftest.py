import pytest
from itertools import count
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def id_sequence():
    """Fake auto-increment sequence for entities saved through mocks"""
    return count(1)


@pytest.fixture
def mock_party_repo(id_sequence):
    """Mock party repository that assigns IDs on save"""
    repo = MagicMock()

    async def save(party):
        if party.id is None:
            party.id = next(id_sequence)
        return party

    repo.find_all = AsyncMock(return_value=[])
    repo.get_by_id = AsyncMock(return_value=None)
    repo.get_by_name = AsyncMock(return_value=None)
    repo.save = AsyncMock(side_effect=save)
    return repo


@pytest.fixture
def mock_invoice_repo(id_sequence):
    """Mock invoice repository that assigns IDs on save"""
    repo = MagicMock()

    async def save(invoice):
        if invoice.id is None:
            invoice.id = next(id_sequence)
        return invoice

    repo.get_by_id = AsyncMock(return_value=None)
    repo.find_all = AsyncMock(return_value=[])
    repo.list_by_party_id = AsyncMock(return_value=[])
    repo.exists_by_id = AsyncMock(return_value=False)
    repo.save = AsyncMock(side_effect=save)
    repo.delete_by_id = AsyncMock()
    return repo


@pytest.fixture
def mock_item_repo(id_sequence):
    """Mock invoice item repository that assigns IDs on replace"""
    repo = MagicMock()

    async def replace_for_invoice(invoice_id, items):
        for item in items:
            item.id = next(id_sequence)
        return items

    repo.get_by_invoice_id = AsyncMock(return_value=[])
    repo.replace_for_invoice = AsyncMock(side_effect=replace_for_invoice)
    repo.delete_by_invoice_id = AsyncMock()
    return repo
