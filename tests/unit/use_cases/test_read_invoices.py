"""Unit tests for GetInvoice, ListInvoices, ListPartyInvoices and ListParties"""

import pytest
from decimal import Decimal

from src.app.use_cases.invoicing import GetInvoice, ListInvoices, ListPartyInvoices, ListParties
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem
from src.domain.party import Party


@pytest.fixture
def party():
    return Party(id=1, name="Acme", name_key="acme", balance_amount=Decimal("60"))


@pytest.fixture
def invoice():
    return Invoice(id=2, party_id=1, sub_total=Decimal("100"), balance_amount=Decimal("60"))


@pytest.fixture
def items():
    return [InvoiceItem(id=3, invoice_id=2, item_name="rod", amount=Decimal("100"))]


@pytest.mark.asyncio
class TestGetInvoice:

    async def test_returns_invoice_with_party_and_items(
        self, mock_party_repo, mock_invoice_repo, mock_item_repo, party, invoice, items
    ):
        mock_invoice_repo.get_by_id.return_value = invoice
        mock_party_repo.get_by_id.return_value = party
        mock_item_repo.get_by_invoice_id.return_value = items

        result = await GetInvoice(mock_party_repo, mock_invoice_repo, mock_item_repo).execute(2)

        assert result.is_ok()
        assert result.value.invoice_id == 2
        assert result.value.party.name == "Acme"
        assert result.value.items[0].item_name == "rod"

    async def test_missing_invoice_is_absent_not_error(
        self, mock_party_repo, mock_invoice_repo, mock_item_repo
    ):
        mock_invoice_repo.get_by_id.return_value = None

        result = await GetInvoice(mock_party_repo, mock_invoice_repo, mock_item_repo).execute(2)

        assert result.is_ok()
        assert result.value is None


@pytest.mark.asyncio
class TestListInvoices:

    async def test_lists_all_invoices(
        self, mock_party_repo, mock_invoice_repo, mock_item_repo, party, invoice, items
    ):
        mock_invoice_repo.find_all.return_value = [invoice]
        mock_party_repo.get_by_id.return_value = party
        mock_item_repo.get_by_invoice_id.return_value = items

        result = await ListInvoices(mock_party_repo, mock_invoice_repo, mock_item_repo).execute()

        assert result.is_ok()
        assert [r.invoice_id for r in result.value] == [2]

    async def test_empty_store(self, mock_party_repo, mock_invoice_repo, mock_item_repo):
        result = await ListInvoices(mock_party_repo, mock_invoice_repo, mock_item_repo).execute()

        assert result.is_ok()
        assert result.value == []


@pytest.mark.asyncio
class TestListPartyInvoices:

    async def test_lists_invoices_of_party(
        self, mock_party_repo, mock_invoice_repo, mock_item_repo, party, invoice, items
    ):
        mock_party_repo.get_by_id.return_value = party
        mock_invoice_repo.list_by_party_id.return_value = [invoice]
        mock_item_repo.get_by_invoice_id.return_value = items

        result = await ListPartyInvoices(
            mock_party_repo, mock_invoice_repo, mock_item_repo
        ).execute(1)

        assert result.is_ok()
        assert len(result.value) == 1
        mock_invoice_repo.list_by_party_id.assert_called_once_with(1)

    async def test_unknown_party(self, mock_party_repo, mock_invoice_repo, mock_item_repo):
        mock_party_repo.get_by_id.return_value = None

        result = await ListPartyInvoices(
            mock_party_repo, mock_invoice_repo, mock_item_repo
        ).execute(1)

        assert result.is_err()
        assert result.error.code == "PARTY_NOT_FOUND"


@pytest.mark.asyncio
class TestListParties:

    async def test_lists_parties_with_balance(self, mock_party_repo, party):
        mock_party_repo.find_all.return_value = [party]

        result = await ListParties(mock_party_repo).execute()

        assert result.is_ok()
        assert result.value[0].name == "Acme"
        assert result.value[0].balance_amount == Decimal("60")
