"""Tests for the Client entity."""
from datetime import timedelta
from decimal import Decimal

import pytest

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.models.client import Client
from salon_crm.domain.value_objects import CreditTerms
from salon_crm.utils.datetime_utils import now
from tests.factories import make_client, make_contact


def secondary(index):
    return make_contact(
        name=f"Contact {index}",
        email=f"contact{index}@acme.example",
        phone=f"+1555000000{index}",
    )


class TestClientContacts:
    """Test contact rules."""

    def test_primary_contact_must_be_marked_primary(self):
        with pytest.raises(ValidationError):
            make_client(primary_contact=make_contact(primary=False))

    def test_at_most_five_secondary_contacts(self):
        make_client(secondary_contacts=[secondary(i) for i in range(5)])
        with pytest.raises(BusinessRuleViolationError):
            make_client(secondary_contacts=[secondary(i) for i in range(6)])

    def test_primary_email_cannot_repeat_in_secondaries(self):
        duplicate = make_contact(name="Other Person", phone="+15551112222")
        with pytest.raises(BusinessRuleViolationError):
            make_client(secondary_contacts=[duplicate])

    def test_add_secondary_contact(self):
        client = make_client()
        client.add_secondary_contact(secondary(1))
        assert len(client.all_contacts) == 2
        assert client.get_contact_by_email("CONTACT1@acme.example") is not None

    def test_add_secondary_contact_with_used_email_is_rejected(self):
        client = make_client(secondary_contacts=[secondary(1)])
        with pytest.raises(BusinessRuleViolationError):
            client.add_secondary_contact(secondary(1))

    def test_add_primary_as_secondary_is_rejected(self):
        client = make_client()
        with pytest.raises(BusinessRuleViolationError):
            client.add_secondary_contact(secondary(1).make_primary())

    def test_remove_secondary_contact(self):
        client = make_client(secondary_contacts=[secondary(1), secondary(2)])
        client.remove_secondary_contact("contact1@acme.example")
        assert [c.email.value for c in client.secondary_contacts] == ["contact2@acme.example"]

    def test_remove_unknown_secondary_contact(self):
        with pytest.raises(ValidationError):
            make_client().remove_secondary_contact("nobody@acme.example")


class TestClientContract:
    """Test contract dates."""

    def test_start_must_be_before_end(self):
        start = now() + timedelta(days=10)
        with pytest.raises(ValidationError):
            make_client(contract_start_date=start, contract_end_date=start)

    def test_new_contract_cannot_end_in_the_past(self):
        with pytest.raises(ValidationError):
            make_client(
                contract_start_date=now() - timedelta(days=60),
                contract_end_date=now() - timedelta(days=1),
            )

    def test_stored_client_with_expired_contract_loads(self):
        client = make_client()
        stored = Client(
            id=client.id,
            company_name=client.company_name,
            business_type=client.business_type,
            primary_contact=client.primary_contact,
            billing_address=client.billing_address,
            credit_terms=client.credit_terms,
            contract_start_date=now() - timedelta(days=400),
            contract_end_date=now() - timedelta(days=35),
        )
        assert not stored.has_active_contract()
        assert not stored.is_contract_expiring()

    def test_active_and_expiring_contract(self):
        client = make_client(contract_end_date=now() + timedelta(days=10))
        assert client.has_active_contract()
        assert client.is_contract_expiring()
        assert not client.is_contract_expiring(days_ahead=5)

    def test_no_contract(self):
        client = make_client(contract_start_date=None, contract_end_date=None)
        assert not client.has_active_contract()
        assert client.days_until_contract_expiry() is None

    def test_extend_contract(self):
        client = make_client()
        new_end = now() + timedelta(days=700)
        client.extend_contract(new_end)
        assert client.contract_end_date == new_end

    def test_extend_contract_into_the_past_is_rejected(self):
        with pytest.raises(ValidationError):
            make_client().extend_contract(now() - timedelta(days=1))


class TestClientAccount:
    """Test charges and payments."""

    def test_charge_and_payment(self):
        client = make_client()
        client.add_charge("250.00")
        assert client.current_balance == Decimal("250.00")
        assert client.available_credit == Decimal("750.00")
        client.process_payment(100)
        assert client.current_balance == Decimal("150.00")

    def test_charge_over_limit_is_rejected(self):
        client = make_client()
        with pytest.raises(BusinessRuleViolationError):
            client.add_charge("1000.01")

    def test_inactive_client_cannot_be_charged(self):
        client = make_client()
        client.deactivate()
        assert not client.can_process_charge(10)
        with pytest.raises(BusinessRuleViolationError):
            client.add_charge(10)

    def test_zero_charge_is_invalid(self):
        with pytest.raises(ValidationError):
            make_client().add_charge(0)

    def test_prepaid_client_balance_stays_zero(self):
        client = make_client(credit_terms=CreditTerms.prepaid())
        client.add_charge(5000)
        assert client.current_balance == Decimal("0.00")

    def test_to_dict(self):
        data = make_client().to_dict()
        assert data["business_type_display_name"] == "Corporate Client"
        assert data["primary_contact"]["is_primary"] is True
        assert data["credit_terms"]["terms_description"] == "Net 30 Days"
        assert data["has_active_contract"] is True
