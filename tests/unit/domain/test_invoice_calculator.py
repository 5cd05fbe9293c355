"""Unit tests for InvoiceCalculator"""

import pytest
from decimal import Decimal

from src.domain.exceptions import InvalidComputationInput
from src.domain.invoice import Invoice
from src.domain.invoice_calculator import InvoiceCalculator
from src.domain.invoice_item import InvoiceItem
from src.domain.party import Party


def make_party(balance="0"):
    return Party(id=1, name="Acme", name_key="acme", balance_amount=Decimal(balance))


def make_invoice(received="0", discount=None):
    return Invoice(
        id=10,
        party_id=1,
        received_amount=Decimal(received) if received is not None else None,
        discount=Decimal(discount) if discount is not None else None,
    )


def make_items(*amounts):
    return [
        InvoiceItem(item_name=f"item {i}", amount=Decimal(a) if a is not None else None)
        for i, a in enumerate(amounts)
    ]


@pytest.fixture
def calculator():
    return InvoiceCalculator()


class TestSubTotal:
    """sub_total is the plain sum of item amounts"""

    @pytest.mark.parametrize(
        "amounts, expected",
        [
            (("100",), Decimal("100")),
            (("10", "20", "30.5"), Decimal("60.5")),
            (("0", "0"), Decimal("0")),
        ],
    )
    def test_sub_total_is_sum_of_amounts(self, calculator, amounts, expected):
        invoice = make_invoice()
        calculator.compute_and_apply(invoice, make_items(*amounts), make_party())
        assert invoice.sub_total == expected

    def test_sub_total_ignores_discount(self, calculator):
        invoice = make_invoice(discount="25")
        calculator.compute_and_apply(invoice, make_items("100", "50"), make_party())
        assert invoice.sub_total == Decimal("150")
        assert invoice.total_amount == Decimal("125")


class TestTotalAndBalance:
    """Totals, discount handling and party reconciliation"""

    def test_new_party_scenario(self, calculator):
        """Acme, one item of 100, no discount, 40 received"""
        party = make_party("0")
        invoice = make_invoice(received="40", discount="0")

        calculator.compute_and_apply(invoice, make_items("100"), party)

        assert invoice.sub_total == Decimal("100")
        assert invoice.previous_balance == Decimal("0")
        assert invoice.total_amount == Decimal("100")
        assert invoice.balance_amount == Decimal("60")
        assert party.balance_amount == Decimal("60")

    def test_existing_balance_with_discount_scenario(self, calculator):
        """Party owes 60, items total 200, discount 20, 50 received"""
        party = make_party("60")
        invoice = make_invoice(received="50", discount="20")

        calculator.compute_and_apply(invoice, make_items("120", "80"), party)

        assert invoice.sub_total == Decimal("200")
        assert invoice.previous_balance == Decimal("60")
        assert invoice.total_amount == Decimal("240")
        assert invoice.balance_amount == Decimal("190")
        assert party.balance_amount == Decimal("190")

    @pytest.mark.parametrize("discount", [None, "0", "-5"])
    def test_non_positive_discount_not_applied(self, calculator, discount):
        invoice = make_invoice(received="0", discount=discount)
        calculator.compute_and_apply(invoice, make_items("100"), make_party("10"))
        assert invoice.total_amount == Decimal("110")

    def test_previous_balance_is_snapshot_before_update(self, calculator):
        party = make_party("75")
        invoice = make_invoice(received="100")

        calculator.compute_and_apply(invoice, make_items("30"), party)

        assert invoice.previous_balance == Decimal("75")
        assert party.balance_amount == Decimal("5")

    def test_overpayment_gives_negative_balance(self, calculator):
        party = make_party("0")
        invoice = make_invoice(received="150")

        calculator.compute_and_apply(invoice, make_items("100"), party)

        assert invoice.balance_amount == Decimal("-50")
        assert party.balance_amount == invoice.balance_amount

    def test_items_attached_to_invoice_in_order(self, calculator):
        items = make_items("1", "2", "3")
        invoice = make_invoice()

        calculator.compute_and_apply(invoice, items, make_party())

        assert [item.invoice_id for item in items] == [10, 10, 10]
        assert [item.position for item in items] == [0, 1, 2]


class TestEmptyItems:
    """No items: nothing is computed or changed"""

    @pytest.mark.parametrize("items", [None, []])
    def test_empty_items_leave_fields_untouched(self, calculator, items):
        party = make_party("60")
        invoice = make_invoice(received="40")

        result = calculator.compute_and_apply(invoice, items, party)

        assert result is invoice
        assert invoice.sub_total is None
        assert invoice.total_amount is None
        assert invoice.balance_amount is None
        assert invoice.previous_balance is None
        assert party.balance_amount == Decimal("60")


class TestInvalidInput:
    """Missing numbers fail instead of being treated as zero"""

    def test_missing_received_amount_raises(self, calculator):
        party = make_party("60")
        invoice = make_invoice(received=None)

        with pytest.raises(InvalidComputationInput) as exc_info:
            calculator.compute_and_apply(invoice, make_items("100"), party)

        assert exc_info.value.field == "received_amount"
        assert invoice.sub_total is None
        assert party.balance_amount == Decimal("60")

    def test_missing_item_amount_raises(self, calculator):
        party = make_party("60")
        invoice = make_invoice(received="10")

        with pytest.raises(InvalidComputationInput) as exc_info:
            calculator.compute_and_apply(invoice, make_items("100", None), party)

        assert exc_info.value.field == "amount"
        assert invoice.sub_total is None
        assert party.balance_amount == Decimal("60")

    def test_missing_received_amount_ignored_without_items(self, calculator):
        invoice = make_invoice(received=None)
        calculator.compute_and_apply(invoice, [], make_party())
        assert invoice.balance_amount is None
