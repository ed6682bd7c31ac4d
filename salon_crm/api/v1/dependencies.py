"""
Service Dependencies
====================

FastAPI dependencies that resolve application services from the container
stored on ``app.state.container``.
"""
from fastapi import Request

from salon_crm.application.services.client_service import ClientService
from salon_crm.application.services.customer_service import CustomerService
from salon_crm.application.services.menu_item_service import MenuItemService
from salon_crm.application.services.product_service import ProductService
from salon_crm.di.container import DIContainer


def get_container(request: Request) -> DIContainer:
    """
    Get the DI container of the running application.

    Returns:
        DIContainer built when the application starts
    """
    return request.app.state.container


def get_customer_service(request: Request) -> CustomerService:
    return get_container(request).get(CustomerService)


def get_product_service(request: Request) -> ProductService:
    return get_container(request).get(ProductService)


def get_client_service(request: Request) -> ClientService:
    return get_container(request).get(ClientService)


def get_menu_item_service(request: Request) -> MenuItemService:
    return get_container(request).get(MenuItemService)
