"""Pytest configuration and shared fixtures."""
import mongomock
import pytest
from fastapi.testclient import TestClient

from salon_crm.core.config import Settings
from salon_crm.infrastructure.db.mongo_client_repository import MongoClientRepository
from salon_crm.infrastructure.db.mongo_customer_repository import MongoCustomerRepository
from salon_crm.infrastructure.db.mongo_menu_item_repository import MongoMenuItemRepository
from salon_crm.infrastructure.db.mongo_product_repository import MongoProductRepository
from salon_crm.main import create_application


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def database():
    """Fresh in-memory MongoDB database."""
    client = mongomock.MongoClient()
    yield client["test_salon_crm"]
    client.close()


@pytest.fixture
def customer_repository(database):
    return MongoCustomerRepository(database["customers"])


@pytest.fixture
def product_repository(database):
    return MongoProductRepository(database["products"])


@pytest.fixture
def client_repository(database):
    return MongoClientRepository(database["clients"])


@pytest.fixture
def menu_item_repository(database):
    return MongoMenuItemRepository(database["menu_items"])


@pytest.fixture
def api_client(settings, database):
    """FastAPI test client wired to the in-memory database."""
    application = create_application(settings, database)
    with TestClient(application) as client:
        yield client
