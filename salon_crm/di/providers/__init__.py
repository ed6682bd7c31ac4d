"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .client_provider import ClientProvider
from .customer_provider import CustomerProvider
from .database_provider import DatabaseProvider
from .menu_provider import MenuProvider
from .product_provider import ProductProvider
from .repository_provider import RepositoryProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "CustomerProvider",
    "ProductProvider",
    "ClientProvider",
    "MenuProvider",
]
