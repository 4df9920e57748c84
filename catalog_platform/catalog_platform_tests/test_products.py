import uuid
from datetime import timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest

from catalog_platform.catalog_platform.shared.tokens import create_access_token


def make_identity(role="User"):
    return SimpleNamespace(id=uuid.uuid4(), email=f"{uuid.uuid4().hex[:8]}@example.com", role=role, name="Tester")


def auth_header_for(identity, **kwargs):
    token, _ = create_access_token(identity, **kwargs)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner():
    return make_identity()


@pytest.fixture
def admin():
    return make_identity(role="Admin")


def create_product(client, identity, **overrides):
    payload = {"name": "Desk Lamp", "description": "Brass", "price": 19.99, "is_available": True}
    payload.update(overrides)
    response = client.post("/products", json=payload, headers=auth_header_for(identity))
    assert response.status_code == 201, response.text
    return response.json()


def test_create_product_requires_auth(product_client):
    response = product_client.post("/products", json={"name": "Lamp", "price": 1})
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_create_product_with_expired_token_is_401(product_client, owner):
    headers = auth_header_for(owner, expires_delta=timedelta(seconds=-5))
    response = product_client.post("/products", json={"name": "Lamp", "price": 1}, headers=headers)
    assert response.status_code == 401
    assert response.json() == {"detail": "Not authenticated"}


def test_create_and_get_product(product_client, owner):
    created = create_product(product_client, owner)
    assert created["user_id"] == str(owner.id)
    assert Decimal(created["price"]) == Decimal("19.99")
    assert created["updated_at"] is None

    fetched = product_client.get(f"/products/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Desk Lamp"


@pytest.mark.parametrize("payload", [
    {"name": "", "price": 1},
    {"name": "x" * 201, "price": 1},
    {"name": "Lamp", "description": "d" * 1001, "price": 1},
    {"name": "Lamp", "price": -0.01},
    {"price": 1},
])
def test_create_product_validation(product_client, owner, payload):
    response = product_client.post("/products", json=payload, headers=auth_header_for(owner))
    assert response.status_code == 422


def test_get_unknown_product_is_404(product_client):
    assert product_client.get(f"/products/{uuid.uuid4()}").status_code == 404


def test_update_product_by_owner(product_client, owner):
    created = create_product(product_client, owner)

    response = product_client.put(
        f"/products/{created['id']}",
        json={"price": 9.99, "description": ""},
        headers=auth_header_for(owner),
    )
    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["price"]) == Decimal("9.99")
    assert body["description"] == ""
    assert body["name"] == "Desk Lamp"
    assert body["updated_at"] is not None


def test_update_product_by_non_owner_is_403(product_client, owner):
    created = create_product(product_client, owner, price=5)
    intruder = make_identity()

    response = product_client.put(
        f"/products/{created['id']}", json={"price": 9.99}, headers=auth_header_for(intruder)
    )
    assert response.status_code == 403

    unchanged = product_client.get(f"/products/{created['id']}").json()
    assert Decimal(unchanged["price"]) == Decimal("5")


def test_update_rejects_empty_name_and_unknown_id(product_client, owner):
    created = create_product(product_client, owner)
    headers = auth_header_for(owner)

    assert product_client.put(f"/products/{created['id']}", json={"name": ""}, headers=headers).status_code == 422
    assert product_client.put(f"/products/{uuid.uuid4()}", json={"name": "X"}, headers=headers).status_code == 404


def test_delete_product(product_client, owner):
    created = create_product(product_client, owner)
    intruder = make_identity()

    assert product_client.delete(f"/products/{created['id']}", headers=auth_header_for(intruder)).status_code == 403
    assert product_client.delete(f"/products/{created['id']}", headers=auth_header_for(owner)).status_code == 204
    assert product_client.get(f"/products/{created['id']}").status_code == 404
    assert product_client.delete(f"/products/{created['id']}", headers=auth_header_for(owner)).status_code == 404


def test_list_products_filters_and_paginates(product_client, owner):
    other = make_identity()
    for i in range(1, 13):
        create_product(product_client, owner, name=f"Chair {i:02d}", price=i)
    create_product(product_client, other, name="Table", price=100, is_available=False)

    page = product_client.get("/products", params={"user_id": str(owner.id), "page": 2, "page_size": 5})
    assert page.status_code == 200
    assert [p["name"] for p in page.json()] == [f"Chair {i:02d}" for i in range(6, 11)]

    cheap = product_client.get("/products", params={"name": "chair", "max_price": 3})
    assert [p["name"] for p in cheap.json()] == ["Chair 01", "Chair 02", "Chair 03"]

    unavailable = product_client.get("/products", params={"is_available": "false"})
    assert [p["name"] for p in unavailable.json()] == ["Table"]


def test_list_products_rejects_oversized_page(product_client):
    assert product_client.get("/products", params={"page_size": 101}).status_code == 422
    assert product_client.get("/products", params={"page": 0}).status_code == 422


def test_admin_bulk_deactivate_and_activate(product_client, owner, admin):
    first = create_product(product_client, owner, name="One")
    second = create_product(product_client, owner, name="Two")
    headers = auth_header_for(admin)

    response = product_client.post(f"/products/admin/deactivate-user-products/{owner.id}", headers=headers)
    assert response.status_code == 204
    assert product_client.get("/products", params={"user_id": str(owner.id)}).json() == []

    response = product_client.post(f"/products/admin/activate-user-products/{owner.id}", headers=headers)
    assert response.status_code == 204
    restored = product_client.get("/products", params={"user_id": str(owner.id)}).json()
    assert [p["id"] for p in restored] == [first["id"], second["id"]]
    assert restored[0]["name"] == "One"


def test_bulk_endpoints_require_admin_role(product_client, owner):
    create_product(product_client, owner)
    headers = auth_header_for(owner)

    for action in ("deactivate", "activate"):
        response = product_client.post(f"/products/admin/{action}-user-products/{owner.id}", headers=headers)
        assert response.status_code == 403
        assert product_client.post(f"/products/admin/{action}-user-products/{owner.id}").status_code == 401

    assert len(product_client.get("/products").json()) == 1


def test_health(product_client):
    assert product_client.get("/health").json() == {"service": "product-service", "status": "ok"}
