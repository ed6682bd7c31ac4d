"""Tests for the immutable value objects."""
import re
from decimal import Decimal

import pytest

from salon_crm.domain.errors import BusinessRuleViolationError, ValidationError
from salon_crm.domain.value_objects import (
    SKU,
    ContactPerson,
    CreditTerms,
    Email,
    LoyaltyPoints,
    LoyaltyTier,
    MenuCategory,
    PaymentTerms,
    Phone,
    Price,
    ProductCategory,
    ServiceDuration,
)
from salon_crm.infrastructure.db.mongo_base_repository import from_money_field

SKU_FORMAT = re.compile(r"^[A-Z]{2}-\d{3,6}$")


class TestEmail:
    """Test email normalization and validation."""

    def test_email_is_trimmed_and_lower_cased(self):
        assert Email("  Jane.Doe@Example.COM ").value == "jane.doe@example.com"

    def test_emails_compare_by_normalized_value(self):
        assert Email("JANE@example.com") == Email("jane@example.com")

    @pytest.mark.parametrize("raw", ["", "jane", "jane@", "jane@example", "jane..doe@example.com", ".jane@example.com"])
    def test_invalid_email_is_rejected(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Email(raw)
        assert exc_info.value.field == "email"

    def test_domain_and_local_part(self):
        email = Email("jane@salon.example")
        assert email.local_part == "jane"
        assert email.domain == "salon.example"


class TestPhone:
    """Test phone number validation."""

    def test_formatting_is_kept_but_digits_are_exposed(self):
        phone = Phone(" +1 (555) 123-4567 ")
        assert phone.value == "+1 (555) 123-4567"
        assert phone.clean_value == "15551234567"

    def test_ten_digit_display_value(self):
        assert Phone("555-123-4567").display_value == "(555) 123-4567"

    @pytest.mark.parametrize("raw", ["", "123", "0123456789", "+1 555 CALL NOW", "1234567890123456"])
    def test_invalid_phone_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            Phone(raw)


class TestPrice:
    """Test money validation and arithmetic."""

    def test_price_is_quantized_to_cents(self):
        assert Price(45).value == Decimal("45.00")

    @pytest.mark.parametrize("raw", [0, -1, "10.005", "1000000.00", "abc"])
    def test_invalid_price_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            Price(raw)

    def test_maximum_price_is_accepted(self):
        assert Price("999999.99").value == Decimal("999999.99")

    def test_discount_rounds_half_up(self):
        assert Price("100.00").apply_discount(15).value == Decimal("85.00")
        assert Price("19.99").apply_discount(10).value == Decimal("17.99")
        assert Price("0.05").apply_discount(50).value == Decimal("0.03")

    def test_discount_outside_percentage_range_is_rejected(self):
        with pytest.raises(ValidationError):
            Price("10.00").apply_discount(101)

    @pytest.mark.parametrize(
        "raw", ["0.01", "0.1", "1", "18.50", "45.99", "1234.56", "99999.9", "999999.99"]
    )
    def test_valid_amounts_survive_create_and_storage(self, raw):
        price = Price.create(Decimal(raw))
        assert price.value == Decimal(raw)
        assert Price.create(price.value) == price
        assert from_money_field(float(price)) == price.value

    def test_currency_display(self):
        assert Price("1234.5").to_currency() == "$1234.50"


class TestSKU:
    """Test SKU format and generation."""

    def test_generate_pads_sequence(self):
        assert SKU.generate("hs", 7).value == "HS-007"
        assert SKU.generate("HP", 123456).value == "HP-123456"

    def test_sku_is_upper_cased(self):
        sku = SKU("hs-1234")
        assert sku.value == "HS-1234"
        assert sku.category_prefix == "HS"
        assert sku.sequence_number == 1234

    @pytest.mark.parametrize("raw", ["H-001", "HS001", "HS-01", "HS-1234567", "H1-001"])
    def test_malformed_sku_is_rejected(self, raw):
        with pytest.raises(ValidationError):
            SKU(raw)

    @pytest.mark.parametrize("prefix, sequence", [("H", 1), ("HSS", 1), ("HS", 0), ("HS", 1000000)])
    def test_generate_rejects_bad_parts(self, prefix, sequence):
        with pytest.raises(ValidationError):
            SKU.generate(prefix, sequence)

    @pytest.mark.parametrize("category", list(ProductCategory))
    def test_generated_skus_are_accepted_by_create(self, category):
        sequences = set(range(1, 1000000, 997)) | {1, 9, 10, 99, 100, 999, 1000, 99999, 100000, 999998, 999999}
        for sequence in sequences:
            sku = SKU.generate(category.sku_prefix, sequence)
            assert SKU_FORMAT.match(sku.value)
            assert SKU.create(sku.value) == sku
            assert sku.sequence_number == sequence

    def test_next_sku(self):
        assert SKU("NS-009").next_sku() == SKU("NS-010")


class TestServiceDuration:
    """Test 15-minute slot durations."""

    @pytest.mark.parametrize("minutes, display", [(45, "45 min"), (120, "2 hr"), (90, "1 hr 30 min")])
    def test_display_time(self, minutes, display):
        assert ServiceDuration(minutes).display_time == display

    @pytest.mark.parametrize("minutes", [0, 10, 20, 495])
    def test_invalid_duration_is_rejected(self, minutes):
        with pytest.raises(ValidationError):
            ServiceDuration(minutes)

    def test_classification(self):
        assert ServiceDuration.quick().is_quick_service()
        assert ServiceDuration.standard().is_standard_service()
        assert ServiceDuration.extended().is_extended_service()
        assert ServiceDuration(75).time_slots == 5


class TestLoyaltyPoints:
    """Test point balance and tier derivation."""

    @pytest.mark.parametrize(
        "points, tier, discount",
        [
            (0, LoyaltyTier.BRONZE, 0),
            (499, LoyaltyTier.BRONZE, 0),
            (500, LoyaltyTier.SILVER, 5),
            (999, LoyaltyTier.SILVER, 5),
            (1000, LoyaltyTier.GOLD, 10),
            (2000, LoyaltyTier.PLATINUM, 15),
        ],
    )
    def test_tier_boundaries(self, points, tier, discount):
        balance = LoyaltyPoints(points)
        assert balance.tier is tier
        assert balance.discount_percentage == discount

    def test_subtract_more_than_balance_is_a_business_rule_violation(self):
        with pytest.raises(BusinessRuleViolationError):
            LoyaltyPoints(100).subtract(101)

    def test_add_negative_is_a_business_rule_violation(self):
        with pytest.raises(BusinessRuleViolationError):
            LoyaltyPoints(100).add(-5)

    @pytest.mark.parametrize("points", [-1, 1000000])
    def test_out_of_range_balance_is_rejected(self, points):
        with pytest.raises(ValidationError):
            LoyaltyPoints(points)

    def test_points_from_amount_are_floored(self):
        assert LoyaltyPoints.from_amount(Decimal("45.99")).value == 45

    def test_tier_parse(self):
        assert LoyaltyTier.parse("gold") is LoyaltyTier.GOLD
        with pytest.raises(ValidationError):
            LoyaltyTier.parse("DIAMOND")


class TestCreditTerms:
    """Test credit limit and balance rules."""

    def test_charge_increases_balance(self):
        terms = CreditTerms.net30(1000).add_charge("400.00")
        assert terms.current_balance == Decimal("400.00")
        assert terms.available_credit == Decimal("600.00")

    def test_charge_over_limit_is_rejected(self):
        terms = CreditTerms.net30(1000).add_charge(900)
        with pytest.raises(BusinessRuleViolationError):
            terms.add_charge("100.01")

    def test_prepaid_terms_never_carry_a_balance(self):
        terms = CreditTerms.prepaid().add_charge(250)
        assert terms.current_balance == Decimal("0.00")
        assert terms.can_process_charge(1000000)

    def test_suspended_terms_reject_charges(self):
        with pytest.raises(BusinessRuleViolationError):
            CreditTerms.net30(1000).suspend().add_charge(10)

    def test_payment_over_balance_is_rejected(self):
        terms = CreditTerms.net30(1000).add_charge(100)
        with pytest.raises(BusinessRuleViolationError):
            terms.process_payment("100.01")

    def test_payment_reduces_balance(self):
        terms = CreditTerms.net30(1000).add_charge(100).process_payment(40)
        assert terms.current_balance == Decimal("60.00")

    def test_custom_terms_require_days(self):
        with pytest.raises(ValidationError):
            CreditTerms(payment_terms=PaymentTerms.CUSTOM)
        assert CreditTerms(payment_terms="custom", custom_terms_days=21).terms_description == "Net 21 Days"

    @pytest.mark.parametrize("days", [True, False, 21.0, "21"])
    def test_custom_terms_days_must_be_an_integer(self, days):
        with pytest.raises(ValidationError):
            CreditTerms(payment_terms=PaymentTerms.CUSTOM, custom_terms_days=days)

    def test_balance_above_limit_is_rejected(self):
        with pytest.raises(ValidationError):
            CreditTerms(payment_terms="NET_30", credit_limit=100, current_balance=200)

    def test_descriptions(self):
        assert CreditTerms.net30(0).terms_description == "Net 30 Days"
        assert CreditTerms.immediate().terms_description == "Payment Due Immediately"
        assert CreditTerms.prepaid().payment_due_days == 0


class TestContactPerson:
    """Test contact validation."""

    def test_contact_normalizes_values(self):
        contact = ContactPerson.create("  Ann Lee ", " Buyer ", "ANN@Spa.Example", "+44 20 7946 0958")
        assert contact.name == "Ann Lee"
        assert contact.position == "Buyer"
        assert contact.email == Email("ann@spa.example")
        assert not contact.is_primary

    def test_short_name_is_rejected(self):
        with pytest.raises(ValidationError):
            ContactPerson.create("A", "Buyer", "a@spa.example", "+442079460958")

    def test_make_primary_returns_new_instance(self):
        contact = ContactPerson.create("Ann Lee", "Buyer", "ann@spa.example", "+442079460958")
        primary = contact.make_primary()
        assert primary.is_primary
        assert not contact.is_primary


class TestChoices:
    """Test the fixed-choice enums."""

    def test_parse_is_case_insensitive(self):
        assert ProductCategory.parse(" hair_services ") is ProductCategory.HAIR_SERVICES

    def test_unknown_choice_names_its_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductCategory.parse("PET_GROOMING")
        assert exc_info.value.field == "productCategory"

    def test_product_category_prefixes(self):
        assert ProductCategory.HAIR_SERVICES.sku_prefix == "HS"
        assert ProductCategory.PACKAGES.sku_prefix == "PK"
        assert ProductCategory.SKINCARE_PRODUCTS.display_name == "Skincare Products"

    def test_menu_category_rules(self):
        assert MenuCategory.BRIDAL_PACKAGES.is_package()
        assert MenuCategory.BRIDAL_PACKAGES.requires_advance_booking()
        assert not MenuCategory.HAIR_SERVICES.is_package()
        assert MenuCategory.SEASONAL_OFFERS.is_seasonal_offering()
        assert MenuCategory.ADD_ON_SERVICES.display_name == "Add-On Services"
