"""Tests for the Customer entity."""
from datetime import timedelta

import pytest

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.value_objects import Email, LoyaltyTier, Phone
from salon_crm.utils.datetime_utils import now
from tests.factories import make_customer


class TestCustomerCreation:
    """Test customer construction."""

    def test_new_customer_defaults(self):
        customer = make_customer()
        assert customer.loyalty_points.value == 0
        assert customer.loyalty_tier is LoyaltyTier.BRONZE
        assert customer.total_visits == 0
        assert customer.last_visit is None
        assert customer.days_since_last_visit() is None
        assert customer.is_active
        assert not customer.is_vip()

    def test_name_is_trimmed(self):
        assert make_customer(name="  Jane Doe  ").name == "Jane Doe"

    @pytest.mark.parametrize("name", ["", "J", "x" * 101])
    def test_invalid_name_is_rejected(self, name):
        with pytest.raises(ValidationError) as exc_info:
            make_customer(name=name)
        assert exc_info.value.field == "name"

    def test_blank_optional_text_becomes_none(self):
        assert make_customer(preferences="   ").preferences is None

    def test_customers_are_equal_by_id(self):
        customer = make_customer()
        other = make_customer(name="Someone Else")
        assert customer != other
        assert customer == customer


class TestLoyalty:
    """Test loyalty point operations."""

    def test_adding_points_moves_tier(self):
        customer = make_customer()
        customer.add_loyalty_points(600)
        assert customer.loyalty_tier is LoyaltyTier.SILVER
        assert customer.discount_percentage == 5

    def test_redeeming_too_many_points_leaves_balance_untouched(self):
        customer = make_customer()
        customer.add_loyalty_points(100)
        with pytest.raises(BusinessRuleViolationError):
            customer.redeem_loyalty_points(150)
        assert customer.loyalty_points.value == 100

    def test_redeem_updates_timestamp(self):
        customer = make_customer()
        customer.add_loyalty_points(100)
        before = customer.updated_at
        customer.redeem_loyalty_points(40)
        assert customer.loyalty_points.value == 60
        assert customer.updated_at >= before

    @pytest.mark.parametrize("starting, points", [(0, 1), (0, 500), (250, 750), (1999, 1), (4000, 995999)])
    def test_redeeming_what_was_added_restores_the_balance(self, starting, points):
        customer = make_customer()
        customer.add_loyalty_points(starting)
        tier = customer.loyalty_tier
        customer.add_loyalty_points(points)
        customer.redeem_loyalty_points(points)
        assert customer.loyalty_points.value == starting
        assert customer.loyalty_tier is tier

    def test_points_make_a_customer_vip(self):
        customer = make_customer()
        customer.add_loyalty_points(1000)
        assert customer.is_vip()


class TestVisits:
    """Test visit tracking."""

    def test_record_visit(self):
        customer = make_customer()
        customer.record_visit()
        assert customer.total_visits == 1
        assert customer.last_visit is not None
        assert customer.updated_at == customer.last_visit

    def test_ten_visits_make_a_customer_vip(self):
        customer = make_customer()
        for _ in range(10):
            customer.record_visit()
        assert customer.is_vip()


class TestCustomerUpdates:
    """Test profile changes."""

    def test_update_contact_details(self):
        customer = make_customer()
        customer.update_email(Email("new@example.com"))
        customer.update_phone(Phone("+15550000000"))
        assert customer.email.value == "new@example.com"
        assert customer.phone.clean_value == "15550000000"

    def test_metadata_is_merged(self):
        customer = make_customer(metadata={"source": "walk-in"})
        customer.update_metadata({"referral": "friend"})
        assert customer.metadata == {"source": "walk-in", "referral": "friend"}

    def test_deactivate_and_reactivate(self):
        customer = make_customer()
        customer.deactivate()
        assert not customer.is_active
        customer.reactivate()
        assert customer.is_active

    def test_to_dict_exposes_derived_values(self):
        customer = make_customer()
        customer.add_loyalty_points(1500)
        data = customer.to_dict()
        assert data["loyalty_tier"] == "GOLD"
        assert data["discount_percentage"] == 10
        assert data["is_vip"] is True
        assert data["email"] == "jane@example.com"

    def test_to_dict_is_stable_without_mutation(self):
        customer = make_customer(preferences="Mornings", metadata={"source": "walk-in"})
        customer.add_loyalty_points(720)
        customer.last_visit = now() - timedelta(days=3, hours=2)
        assert customer.to_dict() == customer.to_dict()
