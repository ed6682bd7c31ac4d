"""Tests for the MongoDB repositories, run against mongomock."""
from datetime import timedelta
from decimal import Decimal

import pytest

from salon_crm.domain.errors import ConflictError, NotFoundError, ValidationError
from salon_crm.domain.repositories.client_repository import ClientFilters
from salon_crm.domain.repositories.customer_repository import CustomerSearchOptions
from salon_crm.domain.repositories.menu_item_repository import MenuItemFilters
from salon_crm.domain.repositories.pagination import PageRequest
from salon_crm.domain.repositories.product_repository import ProductSearchOptions
from salon_crm.domain.value_objects import (
    SKU,
    BusinessType,
    CreditTerms,
    Email,
    LoyaltyTier,
    MenuCategory,
    Phone,
    ProductCategory,
    ProductType,
)
from salon_crm.utils.datetime_utils import now
from tests.factories import (
    make_client,
    make_contact,
    make_customer,
    make_menu_item,
    make_physical_product,
    make_product,
)


def seed_customers(repository):
    people = [
        ("Alice Brown", "alice@example.com", "+15550000001", 0),
        ("Bob Stone", "bob@example.com", "+15550000002", 650),
        ("Carla Diaz", "carla@example.com", "+15550000003", 1200),
    ]
    customers = []
    for name, email, phone, points in people:
        customer = make_customer(name=name, email=email, phone=phone)
        customer.add_loyalty_points(points)
        customers.append(repository.create(customer))
    return customers


class TestMongoCustomerRepository:
    """Test customer persistence."""

    def test_create_and_find_by_id(self, customer_repository):
        customer = make_customer(metadata={"source": "instagram"})
        customer.add_loyalty_points(750)
        customer.record_visit()
        customer_repository.create(customer)

        found = customer_repository.find_by_id(customer.id)
        assert found == customer
        assert found.email == customer.email
        assert found.loyalty_points.value == 750
        assert found.loyalty_tier is LoyaltyTier.SILVER
        assert found.total_visits == 1
        assert found.last_visit is not None and found.last_visit.tzinfo is not None
        assert found.metadata == {"source": "instagram"}

    def test_find_missing_returns_none(self, customer_repository):
        assert customer_repository.find_by_id("missing") is None
        assert not customer_repository.exists("missing")

    def test_duplicate_email_is_a_conflict(self, customer_repository):
        customer_repository.create(make_customer())
        with pytest.raises(ConflictError):
            customer_repository.create(make_customer(phone="+15559990000"))

    def test_duplicate_phone_digits_are_a_conflict(self, customer_repository):
        customer_repository.create(make_customer(phone="+1 555 123 4567"))
        with pytest.raises(ConflictError):
            customer_repository.create(make_customer(email="other@example.com", phone="15551234567"))

    def test_find_by_email_and_phone(self, customer_repository):
        customer = customer_repository.create(make_customer())
        assert customer_repository.find_by_email(Email("JANE@example.com")) == customer
        assert customer_repository.find_by_phone(Phone("1 (555) 123-4567")) == customer

    def test_update_and_delete(self, customer_repository):
        customer = customer_repository.create(make_customer())
        customer.update_name("Jane Smith")
        updated = customer_repository.update(customer)
        assert updated.name == "Jane Smith"

        customer_repository.delete(customer.id)
        assert customer_repository.find_by_id(customer.id) is None

    def test_update_missing_customer(self, customer_repository):
        with pytest.raises(NotFoundError):
            customer_repository.update(make_customer())

    def test_delete_missing_customer(self, customer_repository):
        with pytest.raises(NotFoundError):
            customer_repository.delete("missing")

    def test_search_text_is_case_insensitive(self, customer_repository):
        seed_customers(customer_repository)
        page = customer_repository.search(CustomerSearchOptions(search="BOB"), PageRequest())
        assert [c.name for c in page.items] == ["Bob Stone"]
        assert page.total == 1

    def test_search_by_tier_and_points(self, customer_repository):
        seed_customers(customer_repository)
        by_tier = customer_repository.search(
            CustomerSearchOptions(loyalty_tier=LoyaltyTier.GOLD), PageRequest()
        )
        assert [c.name for c in by_tier.items] == ["Carla Diaz"]
        by_points = customer_repository.search(
            CustomerSearchOptions(min_points=500, max_points=1000), PageRequest()
        )
        assert [c.name for c in by_points.items] == ["Bob Stone"]

    def test_pagination_and_sorting(self, customer_repository):
        seed_customers(customer_repository)
        first = customer_repository.find_all(PageRequest(page=1, limit=2, sort_by="name", sort_order="asc"))
        second = customer_repository.find_all(PageRequest(page=2, limit=2, sort_by="name", sort_order="asc"))
        assert [c.name for c in first.items] == ["Alice Brown", "Bob Stone"]
        assert [c.name for c in second.items] == ["Carla Diaz"]
        assert first.total == 3
        assert first.pages == 2
        assert first.has_next and not second.has_next

    def test_pages_with_tied_sort_keys_cover_every_customer_once(self, customer_repository):
        created = {
            customer_repository.create(
                make_customer(name="Same Name", email=f"same{index}@example.com", phone=f"+1555100{index:04d}")
            ).id
            for index in range(23)
        }
        seen = []
        for page_number in range(1, 4):
            page = customer_repository.find_all(
                PageRequest(page=page_number, limit=10, sort_by="name", sort_order="asc")
            )
            assert page.pages == 3
            seen.extend(c.id for c in page.items)
        assert len(seen) == 23
        assert set(seen) == created

    def test_camel_case_sort_field(self, customer_repository):
        seed_customers(customer_repository)
        page = customer_repository.find_all(PageRequest(sort_by="loyaltyPoints", sort_order="desc"))
        assert [c.name for c in page.items][0] == "Carla Diaz"

    def test_unknown_sort_field_is_rejected(self, customer_repository):
        with pytest.raises(ValidationError):
            customer_repository.find_all(PageRequest(sort_by="password"))

    def test_find_by_whatsapp_id(self, customer_repository):
        created = customer_repository.create(make_customer(whatsapp_id="wa-15551234567"))
        assert customer_repository.find_by_whatsapp_id(" wa-15551234567 ").id == created.id
        assert customer_repository.find_by_whatsapp_id("wa-unknown") is None

    def test_find_by_loyalty_tier(self, customer_repository):
        seed_customers(customer_repository)
        silver = customer_repository.find_by_loyalty_tier(LoyaltyTier.SILVER, PageRequest())
        assert [c.name for c in silver.items] == ["Bob Stone"]
        platinum = customer_repository.find_by_loyalty_tier(LoyaltyTier.PLATINUM, PageRequest())
        assert platinum.items == []
        assert platinum.total == 0

    def test_vip_customers(self, customer_repository):
        seed_customers(customer_repository)
        page = customer_repository.find_vip_customers(PageRequest())
        assert [c.name for c in page.items] == ["Carla Diaz"]

    def test_statistics(self, customer_repository):
        customers = seed_customers(customer_repository)
        customers[0].deactivate()
        customer_repository.update(customers[0])

        assert customer_repository.count_active() == 2
        counts = customer_repository.count_by_tier()
        assert counts == {"BRONZE": 1, "SILVER": 1, "GOLD": 1, "PLATINUM": 0}
        assert customer_repository.average_loyalty_points() == pytest.approx(616.67)

    def test_average_of_empty_collection(self, customer_repository):
        assert customer_repository.average_loyalty_points() == 0.0


class TestMongoProductRepository:
    """Test product persistence."""

    def test_roundtrip_keeps_money_exact(self, product_repository):
        product = product_repository.create(make_physical_product(price="19.99"))
        found = product_repository.find_by_id(product.id)
        assert found.price.value == Decimal("19.99")
        assert found.sku == SKU("HP-001")
        assert found.stock_level == 20

    def test_next_sequence_per_prefix(self, product_repository):
        assert product_repository.get_next_sequence_for_category("HS") == 1
        product_repository.create(make_product())
        product_repository.create(make_product(name="Beard Trim", sku=SKU.generate("HS", 2)))
        product_repository.create(make_physical_product())
        assert product_repository.get_next_sequence_for_category("HS") == 3
        assert product_repository.get_next_sequence_for_category("hp") == 2
        assert product_repository.get_next_sequence_for_category("NS") == 1

    def test_duplicate_sku_is_a_conflict(self, product_repository):
        product_repository.create(make_product())
        with pytest.raises(ConflictError):
            product_repository.create(make_product(name="Beard Trim"))

    def test_duplicate_name_in_category_is_a_conflict(self, product_repository):
        product_repository.create(make_product())
        with pytest.raises(ConflictError):
            product_repository.create(make_product(name="SIGNATURE HAIRCUT", sku=SKU.generate("HS", 2)))

    def test_find_by_name_in_category(self, product_repository):
        product = product_repository.create(make_product())
        assert product_repository.find_by_name_in_category(
            "signature haircut", ProductCategory.HAIR_SERVICES
        ) == product
        assert product_repository.find_by_name_in_category(
            "signature haircut", ProductCategory.NAIL_SERVICES
        ) is None

    def test_stock_finders(self, product_repository):
        product_repository.create(make_physical_product(name="Low Shampoo", stock_level=2))
        product_repository.create(
            make_physical_product(name="Empty Shampoo", stock_level=0, sku=SKU.generate("HP", 2))
        )
        inactive = make_physical_product(name="Old Shampoo", stock_level=0, sku=SKU.generate("HP", 3))
        inactive.deactivate()
        product_repository.create(inactive)
        product_repository.create(make_product())

        assert [p.name for p in product_repository.find_low_stock_products()] == ["Low Shampoo"]
        assert [p.name for p in product_repository.find_out_of_stock_products()] == ["Empty Shampoo"]

    def test_find_by_type(self, product_repository):
        product_repository.create(make_product())
        product_repository.create(make_physical_product())
        physical = product_repository.find_by_type(ProductType.PHYSICAL_PRODUCT, PageRequest())
        assert [p.name for p in physical.items] == ["Argan Shampoo"]
        packages = product_repository.find_by_type(ProductType.PACKAGE, PageRequest())
        assert packages.items == []

    def test_search_products(self, product_repository):
        product_repository.create(make_product())
        product_repository.create(make_physical_product(price="12.00"))
        in_stock = product_repository.search_products(
            ProductSearchOptions(in_stock=True, max_price=Decimal("20")), PageRequest()
        )
        assert [p.name for p in in_stock.items] == ["Argan Shampoo"]
        by_sku = product_repository.search_products(ProductSearchOptions(search="hs-00"), PageRequest())
        assert [p.name for p in by_sku.items] == ["Signature Haircut"]


class TestMongoClientRepository:
    """Test client persistence."""

    def test_roundtrip_keeps_contacts_and_terms(self, client_repository):
        client = make_client(
            secondary_contacts=[make_contact(name="Ann Lee", email="ann@acme.example", phone="+15552223333")],
            registration_number="REG-42",
        )
        client.add_charge("120.50")
        client_repository.create(client)

        found = client_repository.find_by_id(client.id)
        assert found.primary_contact.is_primary
        assert found.secondary_contacts[0].email == Email("ann@acme.example")
        assert found.credit_terms.current_balance == Decimal("120.50")
        assert found.credit_terms.credit_limit == Decimal("1000.00")
        assert found.registration_number == "REG-42"
        assert found.has_active_contract()

    def test_lookup_by_any_contact_email(self, client_repository):
        client = client_repository.create(
            make_client(secondary_contacts=[make_contact(name="Ann Lee", email="ann@acme.example", phone="+15552223333")])
        )
        assert client_repository.find_by_contact_email("ANN@acme.example") == client
        assert client_repository.find_by_contact_email("john@acme.example") == client
        assert client_repository.find_by_contact_email("nobody@acme.example") is None

    def test_company_name_is_unique_case_insensitively(self, client_repository):
        client_repository.create(make_client())
        with pytest.raises(ConflictError):
            client_repository.create(
                make_client(
                    company_name="ACME corporation",
                    primary_contact=make_contact(email="other@acme.example", primary=True),
                )
            )

    def test_filters(self, client_repository):
        client_repository.create(make_client(contract_end_date=now() + timedelta(days=10)))
        client_repository.create(
            make_client(
                company_name="Grand Hotel Spa",
                business_type="HOTEL_SPA",
                primary_contact=make_contact(email="spa@grand.example", primary=True),
            )
        )
        hotels = client_repository.find_by_filters(
            ClientFilters(business_type=BusinessType.HOTEL_SPA), PageRequest()
        )
        assert [c.company_name for c in hotels.items] == ["Grand Hotel Spa"]

        expiring = client_repository.find_by_filters(
            ClientFilters(contract_expiring_within_days=30), PageRequest()
        )
        assert [c.company_name for c in expiring.items] == ["Acme Corporation"]

        active = client_repository.find_by_filters(ClientFilters(has_active_contract=True), PageRequest())
        assert active.total == 2

        searched = client_repository.find_by_filters(ClientFilters(search="grand"), PageRequest())
        assert [c.company_name for c in searched.items] == ["Grand Hotel Spa"]

    def test_filter_clients_without_active_contract(self, client_repository):
        client_repository.create(make_client())
        client_repository.create(
            make_client(
                company_name="Grand Hotel Spa",
                primary_contact=make_contact(email="spa@grand.example", primary=True),
                contract_start_date=None,
                contract_end_date=None,
            )
        )
        client_repository.create(
            make_client(
                company_name="Future Events Ltd",
                primary_contact=make_contact(email="ops@future.example", primary=True),
                contract_start_date=now() + timedelta(days=10),
                contract_end_date=now() + timedelta(days=100),
            )
        )
        inactive = client_repository.find_by_filters(
            ClientFilters(has_active_contract=False), PageRequest(sort_by="company_name", sort_order="asc")
        )
        assert [c.company_name for c in inactive.items] == ["Future Events Ltd", "Grand Hotel Spa"]

    def test_expiring_contracts_skip_inactive_clients(self, client_repository):
        client = make_client(contract_end_date=now() + timedelta(days=5))
        client.deactivate()
        client_repository.create(client)
        assert client_repository.find_expiring_contracts(30) == []

    def test_total_credit_outstanding(self, client_repository):
        assert client_repository.get_total_credit_outstanding() == Decimal("0.00")
        first = make_client()
        first.add_charge("100.10")
        second = make_client(
            company_name="Beta Salons",
            primary_contact=make_contact(email="beta@beta.example", primary=True),
            credit_terms=CreditTerms.net30(500),
        )
        second.add_charge("0.20")
        client_repository.create(first)
        client_repository.create(second)
        assert client_repository.get_total_credit_outstanding() == Decimal("100.30")


class TestMongoMenuItemRepository:
    """Test menu item persistence and ordering."""

    def test_roundtrip(self, menu_item_repository):
        item = make_menu_item(tags=["nails"], max_bookings_per_day=8)
        menu_item_repository.create(item)
        found = menu_item_repository.find_by_id(item.id)
        assert found.duration.minutes == 45
        assert found.price.value == Decimal("30.00")
        assert found.tags == ["nails"]
        assert found.max_bookings_per_day == 8

    def test_name_is_unique_case_insensitively(self, menu_item_repository):
        menu_item_repository.create(make_menu_item())
        with pytest.raises(ConflictError):
            menu_item_repository.create(make_menu_item(name="CLASSIC MANICURE", display_order=1))

    def test_display_order_is_unique_per_category(self, menu_item_repository):
        menu_item_repository.create(make_menu_item())
        with pytest.raises(ConflictError):
            menu_item_repository.create(make_menu_item(name="Gel Manicure"))
        menu_item_repository.create(make_menu_item(name="Scalp Massage", category="MASSAGE_THERAPY"))

    def test_next_display_order(self, menu_item_repository):
        assert menu_item_repository.get_next_display_order(MenuCategory.NAIL_SERVICES) == 0
        menu_item_repository.create(make_menu_item(display_order=4))
        assert menu_item_repository.get_next_display_order(MenuCategory.NAIL_SERVICES) == 5

    def test_category_items_come_in_display_order(self, menu_item_repository):
        menu_item_repository.create(make_menu_item(name="Gel Manicure", display_order=2))
        menu_item_repository.create(make_menu_item(name="Classic Manicure", display_order=1))
        items = menu_item_repository.find_by_category(MenuCategory.NAIL_SERVICES)
        assert [i.name for i in items] == ["Classic Manicure", "Gel Manicure"]

    def test_swap_display_orders(self, menu_item_repository):
        first = menu_item_repository.create(make_menu_item(name="Classic Manicure", display_order=0))
        second = menu_item_repository.create(make_menu_item(name="Gel Manicure", display_order=1))

        menu_item_repository.reorder_menu_items([(first.id, 1), (second.id, 0)])

        items = menu_item_repository.find_by_category(MenuCategory.NAIL_SERVICES)
        assert [i.name for i in items] == ["Gel Manicure", "Classic Manicure"]

    def test_reorder_onto_an_unmoved_item_is_a_conflict(self, menu_item_repository):
        first = menu_item_repository.create(make_menu_item(name="Classic Manicure", display_order=0))
        menu_item_repository.create(make_menu_item(name="Gel Manicure", display_order=1))
        with pytest.raises(ConflictError):
            menu_item_repository.reorder_menu_items([(first.id, 1)])
        assert menu_item_repository.find_by_id(first.id).display_order == 0

    def test_invalid_reorder_leaves_stored_orders_untouched(self, menu_item_repository):
        first = menu_item_repository.create(make_menu_item(name="Classic Manicure", display_order=0))
        second = menu_item_repository.create(make_menu_item(name="Gel Manicure", display_order=1))
        with pytest.raises(ValidationError):
            menu_item_repository.reorder_menu_items([(first.id, 3), (second.id, -2)])
        assert menu_item_repository.find_by_id(first.id).display_order == 0
        assert menu_item_repository.find_by_id(second.id).display_order == 1

    def test_failed_write_during_reorder_restores_orders(self, menu_item_repository, monkeypatch):
        first = menu_item_repository.create(make_menu_item(name="Classic Manicure", display_order=0))
        second = menu_item_repository.create(make_menu_item(name="Gel Manicure", display_order=1))
        replace = menu_item_repository._replace
        calls = []

        def replace_then_fail(entity_id, entity):
            calls.append(entity_id)
            if len(calls) == 2:
                raise ConflictError("Display order taken by a concurrent write")
            return replace(entity_id, entity)

        monkeypatch.setattr(menu_item_repository, "_replace", replace_then_fail)
        with pytest.raises(ConflictError):
            menu_item_repository.reorder_menu_items([(first.id, 1), (second.id, 0)])

        items = menu_item_repository.find_by_category(MenuCategory.NAIL_SERVICES)
        assert [(i.name, i.display_order) for i in items] == [("Classic Manicure", 0), ("Gel Manicure", 1)]

    def test_reorder_unknown_item(self, menu_item_repository):
        with pytest.raises(NotFoundError):
            menu_item_repository.reorder_menu_items([("missing", 0)])

    def test_filters(self, menu_item_repository):
        menu_item_repository.create(make_menu_item(tags=["nails", "quick"]))
        menu_item_repository.create(
            make_menu_item(
                name="Deep Tissue Massage",
                description="Sixty minutes of deep tissue work",
                category="MASSAGE_THERAPY",
                duration=60,
                price="80.00",
                tags=["massage"],
                available_online=False,
            )
        )
        by_tags = menu_item_repository.find_by_filters(MenuItemFilters(tags=["Nails", "QUICK"]), PageRequest())
        assert [i.name for i in by_tags.items] == ["Classic Manicure"]

        by_price = menu_item_repository.find_by_filters(
            MenuItemFilters(min_price=Decimal("50"), min_duration=60), PageRequest()
        )
        assert [i.name for i in by_price.items] == ["Deep Tissue Massage"]

        offline = menu_item_repository.find_by_filters(MenuItemFilters(available_online=False), PageRequest())
        assert [i.name for i in offline.items] == ["Deep Tissue Massage"]

        by_text = menu_item_repository.find_by_filters(MenuItemFilters(search="cuticle"), PageRequest())
        assert [i.name for i in by_text.items] == ["Classic Manicure"]

    def test_available_for_date(self, menu_item_repository):
        menu_item_repository.create(make_menu_item())
        menu_item_repository.create(
            make_menu_item(
                name="Winter Glow Facial",
                description="Hydrating facial for the cold season",
                category="SEASONAL_OFFERS",
                seasonal_item=True,
                valid_from=now() + timedelta(days=30),
                valid_to=now() + timedelta(days=90),
            )
        )
        today = menu_item_repository.find_available_for_date(now())
        assert [i.name for i in today] == ["Classic Manicure"]
        later = menu_item_repository.find_available_for_date(now() + timedelta(days=45))
        assert len(later) == 2
