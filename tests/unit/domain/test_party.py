"""Unit tests for Party domain entity"""

from decimal import Decimal
from src.domain.party import Party, normalize_party_name


class TestPartyCreation:
    """Test Party entity creation"""

    def test_create_party_with_valid_data(self):
        party = Party(
            name="Acme Corp",
            name_key="acme corp",
            address="12 Market Street",
            contact="+1 555 0100",
            balance_amount=Decimal("60.000000"),
        )

        assert party.name == "Acme Corp"
        assert party.address == "12 Market Street"
        assert party.contact == "+1 555 0100"
        assert party.balance_amount == Decimal("60.000000")

    def test_balance_defaults_to_zero(self):
        party = Party(name="Acme", name_key="acme")
        assert party.balance_amount == Decimal("0")

    def test_optional_fields_default_to_none(self):
        party = Party(name="Acme", name_key="acme")
        assert party.address is None
        assert party.contact is None


class TestNormalizePartyName:
    """Names are compared case-insensitively"""

    def test_case_variants_share_a_key(self):
        assert normalize_party_name("Acme Corp") == normalize_party_name("ACME CORP")
        assert normalize_party_name("acme corp") == "acme corp"

    def test_different_names_have_different_keys(self):
        assert normalize_party_name("Acme") != normalize_party_name("Acme Corp")
