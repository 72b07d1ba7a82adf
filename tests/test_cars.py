import pytest
from sqlalchemy.orm import Session


def test_create_car_success(client, db: Session, supplier: dict):
    response = client.post(
        "/cars",
        json={"name": "Toyota Camry", "supplier_id": supplier["id"], "price": 25000},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["name"] == "Toyota Camry"
    assert data["supplier_id"] == supplier["id"]
    assert data["price"] == 25000


def test_create_car_supplier_not_enforced(client, db: Session):
    """The supplier reference is stored as given; no integrity check is made."""
    response = client.post(
        "/cars", json={"name": "Ghost", "supplier_id": "no-such-supplier", "price": 1}
    )
    assert response.status_code == 201


def test_create_car_zero_price(client, db: Session, supplier: dict):
    response = client.post(
        "/cars", json={"name": "Free", "supplier_id": supplier["id"], "price": 0}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


def test_create_car_missing_supplier(client, db: Session):
    response = client.post("/cars", json={"name": "Orphan", "price": 10})
    assert response.status_code == 400


def test_update_car_negative_price(client, db: Session, car: dict):
    """Validation fails before the service is called."""
    response = client.put(
        f"/cars/{car['id']}",
        json={"name": car["name"], "supplier_id": car["supplier_id"], "price": -5},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"

    assert client.get(f"/cars/{car['id']}").json()["price"] == car["price"]


def test_update_car_negative_price_unknown_id(client, db: Session):
    response = client.put(
        "/cars/does-not-exist", json={"name": "x", "supplier_id": "s", "price": -1}
    )
    assert response.status_code == 400


def test_update_car_success(client, db: Session, car: dict):
    response = client.put(
        f"/cars/{car['id']}",
        json={"name": "Toyota Corolla", "supplier_id": car["supplier_id"], "price": 19000},
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Car updated successfully"}

    data = client.get(f"/cars/{car['id']}").json()
    assert data["name"] == "Toyota Corolla"
    assert data["price"] == 19000
    assert data["created_at"] == car["created_at"]


def test_get_car_not_found(client, db: Session):
    response = client.get("/cars/missing")
    assert response.status_code == 404
    assert response.json() == {"code": "NOT_FOUND", "message": "Car with ID 'missing' not found"}


def test_list_and_delete_car(client, db: Session, car: dict):
    assert [c["id"] for c in client.get("/cars").json()] == [car["id"]]

    response = client.delete(f"/cars/{car['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Car deleted successfully"}
    assert client.get("/cars").json() == []


def test_create_car_price_beyond_32_bits(client, db: Session, supplier: dict):
    price = 2**40
    response = client.post(
        "/cars", json={"name": "Hypercar", "supplier_id": supplier["id"], "price": price}
    )
    assert response.status_code == 201
    assert client.get(f"/cars/{response.json()['id']}").json()["price"] == price


def test_create_car_price_beyond_64_bits(client, db: Session, supplier: dict):
    response = client.post(
        "/cars", json={"name": "Overflow", "supplier_id": supplier["id"], "price": 2**63}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


@pytest.mark.parametrize("price", [True, "25000", 250.5])
def test_create_car_price_must_be_integer(client, db: Session, supplier: dict, price):
    response = client.post(
        "/cars", json={"name": "Loose", "supplier_id": supplier["id"], "price": price}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


def test_create_car_supplier_id_too_long(client, db: Session):
    response = client.post("/cars", json={"name": "Long", "supplier_id": "s" * 65, "price": 1})
    assert response.status_code == 400
    assert "supplier_id" in response.json()["message"]


def test_car_fields_documented_in_openapi(client):
    schemas = client.get("/openapi.json").json()["components"]["schemas"]
    car = next(s for name, s in schemas.items() if name.startswith("Car") and "created_at" in s["properties"])
    assert car["properties"]["price"]["description"]
    assert car["properties"]["price"]["examples"] == [25000]
    assert car["properties"]["supplier_id"]["description"] == "Identifier of the supplier"
