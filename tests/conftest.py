"""
Shared fixtures for EasyShop API tests

Every test gets its own in-memory SQLite database. The FastAPI app is wired to it
through dependency_overrides[get_db], so API tests exercise the real routers,
services and DAOs without a PostgreSQL server.
"""
import os

# Must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.main import app
from app.core.security import AuthContext, get_password_hash
from app.dao import users
from app.db.base import Base
from app.db.session import build_engine, get_db
from app.models.product import Category, Product
from app.models.user import RoleEnum

PASSWORD = "secret123"


@pytest.fixture
def session_factory():
    """Fresh in-memory database with all tables created."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def test_client(session_factory):
    """
    TestClient bound to the per-test database.
    Lifespan is not run, so no tables are created on the global engine.
    """
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def customer(db):
    return users.create_with_profile(db, "alice", get_password_hash(PASSWORD))


@pytest.fixture
def admin(db):
    return users.create_with_profile(db, "admin", get_password_hash(PASSWORD), role=RoleEnum.admin)


@pytest.fixture
def customer_ctx(customer) -> AuthContext:
    return AuthContext(user_id=customer.id, username=customer.username, role=customer.role)


def login(client: TestClient, username: str, password: str = PASSWORD) -> dict:
    response = client.post("/auth/token", data={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def customer_headers(test_client, customer):
    return login(test_client, customer.username)


@pytest.fixture
def admin_headers(test_client, admin):
    return login(test_client, admin.username)


@pytest.fixture
def catalog(db):
    """
    Two categories with three products:
    - Electronics: Smartphone (10) 499.99, Headphones (11) 79.50
    - Clothing: T-Shirt (12) 19.99, subcategory Red
    """
    electronics = Category(id=1, name="Electronics", description="Gadgets")
    clothing = Category(id=2, name="Clothing", description="Apparel")
    db.add_all([electronics, clothing])
    db.add_all([
        Product(id=10, name="Smartphone", price=499.99, category_id=1, stock=5, subcategory="Black"),
        Product(id=11, name="Headphones", price=79.50, category_id=1, stock=20, subcategory="White"),
        Product(id=12, name="T-Shirt", price=19.99, category_id=2, stock=100, subcategory="Red"),
    ])
    db.commit()
    return {"electronics": electronics, "clothing": clothing}
