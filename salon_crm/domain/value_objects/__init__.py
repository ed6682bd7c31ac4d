"""
Value Objects
=============

Immutable, self-validating values. Construction either succeeds with a
valid value or raises a domain error; equality is field-wise.
"""
from .business_type import BusinessType
from .contact_person import ContactPerson
from .credit_terms import CreditTerms, PaymentTerms
from .email import Email
from .loyalty_points import LoyaltyPoints, LoyaltyTier
from .menu_category import MenuCategory
from .phone import Phone
from .price import Price
from .product_category import ProductCategory
from .product_type import ProductType
from .service_duration import ServiceDuration
from .sku import SKU

__all__ = [
    "BusinessType",
    "ContactPerson",
    "CreditTerms",
    "Email",
    "LoyaltyPoints",
    "LoyaltyTier",
    "MenuCategory",
    "PaymentTerms",
    "Phone",
    "Price",
    "ProductCategory",
    "ProductType",
    "SKU",
    "ServiceDuration",
]
