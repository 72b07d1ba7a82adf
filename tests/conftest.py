import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_goodschain.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["LOG_LEVEL"] = "debug"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from goodschain.main import app
from goodschain.api.deps import get_db


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(test_db_url, connect_args={"check_same_thread": False})
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()
        try:
            os.remove(test_db_path)
            os.rmdir(temp_db_dir)
        except OSError as e:
            print(f"Cleanup failed: {e}")


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def customer(client) -> dict:
    response = client.post(
        "/customers",
        json={"name": "John Doe", "address": "1 Main St", "email": "john@example.com"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture(scope="function")
def supplier(client) -> dict:
    response = client.post(
        "/suppliers",
        json={"name": "Supplier Inc.", "address": "456 Industrial Rd", "email": "contact@supplier.com"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture(scope="function")
def car(client, supplier: dict) -> dict:
    response = client.post(
        "/cars",
        json={"name": "Toyota Camry", "supplier_id": supplier["id"], "price": 25000},
    )
    assert response.status_code == 201
    return response.json()
