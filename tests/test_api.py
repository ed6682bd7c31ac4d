"""HTTP tests for the v1 API running against an in-memory database."""
from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from salon_crm.di.container import DIContainer
from salon_crm.main import create_application
from salon_crm.utils.datetime_utils import now

CUSTOMERS = "/api/v1/customers"
PRODUCTS = "/api/v1/products"
CLIENTS = "/api/v1/clients"
MENU_ITEMS = "/api/v1/menu-items"


def customer_payload(**overrides):
    payload = {"name": "Jane Doe", "email": "jane@example.com", "phone": "+15551234567"}
    payload.update(overrides)
    return payload


def client_payload(**overrides):
    payload = {
        "company_name": "Acme Corporation",
        "business_type": "CORPORATE",
        "primary_contact": {
            "name": "John Smith",
            "position": "HR Manager",
            "email": "john@acme.example",
            "phone": "+15559876543",
        },
        "billing_address": "100 Market Street, Springfield",
        "credit_terms": {"payment_terms": "NET_30", "credit_limit": "1000"},
        "contract_end_date": (now() + timedelta(days=365)).isoformat(),
    }
    payload.update(overrides)
    return payload


def menu_payload(**overrides):
    payload = {
        "name": "Classic Manicure",
        "description": "Nail shaping, cuticle care and polish",
        "category": "NAIL_SERVICES",
        "duration": 45,
        "price": "30.00",
    }
    payload.update(overrides)
    return payload


class TestServiceEndpoints:
    def test_root(self, api_client):
        response = api_client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, api_client):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestApplicationLifespan:
    def test_container_is_built_on_startup_and_closed_on_shutdown(self, settings, database, monkeypatch):
        closed = []
        monkeypatch.setattr(DIContainer, "close", lambda container: closed.append(container))
        application = create_application(settings, database)

        with TestClient(application) as client:
            container = application.state.container
            assert isinstance(container, DIContainer)
            assert client.get("/health").json() == {"status": "healthy"}
            assert closed == []

        assert closed == [container]


class TestCustomerRoutes:
    """Test the /customers routes."""

    def test_create_and_get(self, api_client):
        response = api_client.post(CUSTOMERS, json=customer_payload())
        assert response.status_code == 201
        body = response.json()
        assert body["loyalty_tier"] == "BRONZE"
        assert body["is_vip"] is False

        fetched = api_client.get(f"{CUSTOMERS}/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["email"] == "jane@example.com"

    def test_missing_customer(self, api_client):
        response = api_client.get(f"{CUSTOMERS}/does-not-exist")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_duplicate_email(self, api_client):
        api_client.post(CUSTOMERS, json=customer_payload())
        response = api_client.post(CUSTOMERS, json=customer_payload(phone="+15550000000"))
        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    def test_invalid_email(self, api_client):
        response = api_client.post(CUSTOMERS, json=customer_payload(email="not-an-email"))
        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["field"] == "email"

    def test_missing_body_field(self, api_client):
        response = api_client.post(CUSTOMERS, json={"name": "Jane Doe"})
        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_loyalty_and_visits(self, api_client):
        customer_id = api_client.post(CUSTOMERS, json=customer_payload()).json()["id"]

        added = api_client.post(f"{CUSTOMERS}/{customer_id}/loyalty/add", json={"points": 600})
        assert added.status_code == 200
        assert added.json()["loyalty_tier"] == "SILVER"
        assert added.json()["discount_percentage"] == 5

        overdrawn = api_client.post(f"{CUSTOMERS}/{customer_id}/loyalty/redeem", json={"points": 601})
        assert overdrawn.status_code == 422
        assert overdrawn.json()["code"] == "BUSINESS_RULE_VIOLATION"

        visit = api_client.post(f"{CUSTOMERS}/{customer_id}/visits")
        assert visit.json()["total_visits"] == 1

    def test_update_and_delete(self, api_client):
        customer_id = api_client.post(CUSTOMERS, json=customer_payload()).json()["id"]

        updated = api_client.patch(f"{CUSTOMERS}/{customer_id}", json={"preferences": "Quiet stylist"})
        assert updated.status_code == 200
        assert updated.json()["preferences"] == "Quiet stylist"

        assert api_client.delete(f"{CUSTOMERS}/{customer_id}").status_code == 204
        assert api_client.get(f"{CUSTOMERS}/{customer_id}").status_code == 404

    def test_list_pagination(self, api_client):
        for index in range(3):
            api_client.post(
                CUSTOMERS,
                json=customer_payload(email=f"user{index}@example.com", phone=f"+1555000000{index}"),
            )
        response = api_client.get(CUSTOMERS, params={"page": 1, "limit": 2})
        assert response.status_code == 200
        body = response.json()
        assert len(body["items"]) == 2
        assert body["pagination"] == {
            "page": 1,
            "limit": 2,
            "total": 3,
            "pages": 2,
            "has_next": True,
            "has_previous": False,
        }

    def test_invalid_sort_field(self, api_client):
        response = api_client.get(CUSTOMERS, params={"sort_by": "password"})
        assert response.status_code == 400

    def test_stats(self, api_client):
        api_client.post(CUSTOMERS, json=customer_payload())
        response = api_client.get(f"{CUSTOMERS}/stats")
        assert response.status_code == 200
        assert response.json()["active_customers"] == 1


class TestProductRoutes:
    """Test the /products routes."""

    def test_create_service(self, api_client):
        response = api_client.post(
            PRODUCTS,
            json={
                "name": "Signature Haircut",
                "description": "Wash, cut and blow-dry with a senior stylist",
                "price": "45.00",
                "category": "HAIR_SERVICES",
                "type": "SERVICE",
                "duration_minutes": 90,
            },
        )
        assert response.status_code == 201
        body = response.json()
        assert body["sku"] == "HS-001"
        assert body["formatted_duration"] == "1h 30m"
        assert body["can_be_ordered"] is True

    def test_service_without_duration(self, api_client):
        response = api_client.post(
            PRODUCTS,
            json={
                "name": "Signature Haircut",
                "description": "Wash, cut and blow-dry with a senior stylist",
                "price": "45.00",
                "category": "HAIR_SERVICES",
                "type": "SERVICE",
            },
        )
        assert response.status_code == 422

    def test_restock_flow(self, api_client):
        created = api_client.post(
            PRODUCTS,
            json={
                "name": "Argan Shampoo",
                "description": "Sulfate-free shampoo with argan oil, 250ml",
                "price": "18.50",
                "category": "HAIR_PRODUCTS",
                "type": "PHYSICAL_PRODUCT",
                "stock_level": 2,
                "low_stock_threshold": 5,
            },
        ).json()
        low = api_client.get(f"{PRODUCTS}/low-stock").json()
        assert [p["id"] for p in low] == [created["id"]]

        restocked = api_client.post(f"{PRODUCTS}/{created['id']}/restock", json={"quantity": 10})
        assert restocked.status_code == 200
        assert restocked.json()["stock_level"] == 12
        assert api_client.get(f"{PRODUCTS}/low-stock").json() == []

    def test_choice_endpoints(self, api_client):
        categories = api_client.get(f"{PRODUCTS}/categories").json()
        assert {"value": "HAIR_SERVICES", "display_name": "Hair Services", "description": None} in categories
        types = api_client.get(f"{PRODUCTS}/types").json()
        assert len(types) == 3

    def test_unknown_category_filter(self, api_client):
        response = api_client.get(PRODUCTS, params={"category": "PETS"})
        assert response.status_code == 400
        assert response.json()["field"] == "productCategory"


class TestClientRoutes:
    """Test the /clients routes."""

    def test_create_and_charge(self, api_client):
        response = api_client.post(CLIENTS, json=client_payload())
        assert response.status_code == 201
        client_id = response.json()["id"]

        charged = api_client.post(f"{CLIENTS}/{client_id}/charges", json={"amount": "250.50"})
        assert charged.status_code == 200
        assert charged.json()["current_balance"] == pytest.approx(250.50)

        over_limit = api_client.post(f"{CLIENTS}/{client_id}/charges", json={"amount": "800"})
        assert over_limit.status_code == 422

        paid = api_client.post(f"{CLIENTS}/{client_id}/payments", json={"amount": "50.50"})
        assert paid.json()["current_balance"] == pytest.approx(200.0)

        outstanding = api_client.get(f"{CLIENTS}/credit-outstanding").json()
        assert outstanding["total_outstanding"] == pytest.approx(200.0)

    def test_duplicate_company(self, api_client):
        api_client.post(CLIENTS, json=client_payload())
        payload = client_payload(company_name="acme corporation")
        payload["primary_contact"]["email"] = "buyer@acme.example"
        response = api_client.post(CLIENTS, json=payload)
        assert response.status_code == 409

    def test_expiring_contracts(self, api_client):
        soon = client_payload(contract_end_date=(now() + timedelta(days=10)).isoformat())
        client_id = api_client.post(CLIENTS, json=soon).json()["id"]

        expiring = api_client.get(f"{CLIENTS}/expiring-contracts", params={"days_ahead": 30}).json()
        assert [c["id"] for c in expiring] == [client_id]

        extended = api_client.put(
            f"{CLIENTS}/{client_id}/contract",
            json={"contract_end_date": (now() + timedelta(days=200)).isoformat()},
        )
        assert extended.status_code == 200
        assert extended.json()["is_contract_expiring"] is False


class TestMenuItemRoutes:
    """Test the /menu-items routes."""

    def test_create_and_list_by_category(self, api_client):
        first = api_client.post(MENU_ITEMS, json=menu_payload())
        assert first.status_code == 201
        assert first.json()["duration_display"] == "45 min"
        api_client.post(MENU_ITEMS, json=menu_payload(name="Gel Manicure"))

        items = api_client.get(f"{MENU_ITEMS}/category/NAIL_SERVICES").json()
        assert [(i["name"], i["display_order"]) for i in items] == [
            ("Classic Manicure", 0),
            ("Gel Manicure", 1),
        ]

    def test_invalid_duration(self, api_client):
        response = api_client.post(MENU_ITEMS, json=menu_payload(duration=50))
        assert response.status_code == 400

    def test_reorder(self, api_client):
        first = api_client.post(MENU_ITEMS, json=menu_payload()).json()
        second = api_client.post(MENU_ITEMS, json=menu_payload(name="Gel Manicure")).json()

        response = api_client.put(
            f"{MENU_ITEMS}/reorder",
            json={
                "items": [
                    {"id": first["id"], "display_order": 1},
                    {"id": second["id"], "display_order": 0},
                ]
            },
        )
        assert response.status_code == 200
        orders = {item["id"]: item["display_order"] for item in response.json()}
        assert orders == {first["id"]: 1, second["id"]: 0}

    def test_empty_reorder(self, api_client):
        response = api_client.put(f"{MENU_ITEMS}/reorder", json={"items": []})
        assert response.status_code == 400

    def test_change_category(self, api_client):
        item = api_client.post(MENU_ITEMS, json=menu_payload()).json()
        response = api_client.put(f"{MENU_ITEMS}/{item['id']}/category", json={"category": "ADD_ON_SERVICES"})
        assert response.status_code == 200
        assert response.json()["category"] == "ADD_ON_SERVICES"

    def test_categories(self, api_client):
        categories = api_client.get(f"{MENU_ITEMS}/categories").json()
        assert len(categories) == 12
        assert all(category["description"] for category in categories)

    def test_delete(self, api_client):
        item = api_client.post(MENU_ITEMS, json=menu_payload()).json()
        assert api_client.delete(f"{MENU_ITEMS}/{item['id']}").status_code == 204
        assert api_client.get(f"{MENU_ITEMS}/{item['id']}").status_code == 404
