"""
API v1 Package
===============

Version 1 API controllers.
"""
from .client_controller import router as client_router
from .customer_controller import router as customer_router
from .menu_item_controller import router as menu_item_router
from .product_controller import router as product_router

__all__ = ["customer_router", "product_router", "client_router", "menu_item_router"]
