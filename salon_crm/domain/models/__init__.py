"""
Domain Models
=============

Salon CRM entities. Relations between entities are by id only.
"""
from .client import Client
from .customer import Customer
from .menu_item import MenuItem
from .product import Product

__all__ = ["Client", "Customer", "MenuItem", "Product"]
