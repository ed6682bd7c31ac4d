"""Builders for valid domain objects used across the test-suite."""
from datetime import timedelta

from salon_crm.domain.models.client import Client
from salon_crm.domain.models.customer import Customer
from salon_crm.domain.models.menu_item import MenuItem
from salon_crm.domain.models.product import Product
from salon_crm.domain.value_objects import SKU, ContactPerson, CreditTerms
from salon_crm.utils.datetime_utils import now


def make_customer(name="Jane Doe", email="jane@example.com", phone="+15551234567", **kwargs):
    return Customer.create(name=name, email=email, phone=phone, **kwargs)


def make_product(**overrides):
    values = dict(
        name="Signature Haircut",
        description="Wash, cut and blow-dry with a senior stylist",
        price="45.00",
        category="HAIR_SERVICES",
        product_type="SERVICE",
        sku=SKU.generate("HS", 1),
        duration_minutes=45,
    )
    values.update(overrides)
    return Product.create(**values)


def make_physical_product(**overrides):
    values = dict(
        name="Argan Shampoo",
        description="Sulfate-free shampoo with argan oil, 250ml",
        price="18.50",
        category="HAIR_PRODUCTS",
        product_type="PHYSICAL_PRODUCT",
        sku=SKU.generate("HP", 1),
        duration_minutes=None,
        stock_level=20,
        low_stock_threshold=5,
    )
    values.update(overrides)
    return Product.create(**values)


def make_contact(name="John Smith", email="john@acme.example", phone="+15559876543", primary=False):
    return ContactPerson.create(name, "HR Manager", email, phone, is_primary=primary)


def make_client(**overrides):
    values = dict(
        company_name="Acme Corporation",
        business_type="CORPORATE",
        primary_contact=make_contact(primary=True),
        billing_address="100 Market Street, Springfield",
        credit_terms=CreditTerms.net30(1000),
        contract_start_date=now() - timedelta(days=30),
        contract_end_date=now() + timedelta(days=335),
    )
    values.update(overrides)
    return Client.create(**values)


def make_menu_item(**overrides):
    values = dict(
        name="Classic Manicure",
        description="Nail shaping, cuticle care and polish",
        category="NAIL_SERVICES",
        duration=45,
        price="30.00",
    )
    values.update(overrides)
    return MenuItem.create(**values)
