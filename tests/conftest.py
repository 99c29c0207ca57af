"""
Shared fixtures: in-memory SQLite database and an authenticated TestClient.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import Base, get_db
from app.main import app
from app.models.product_model import Product
from app.models.user_model import User


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def signup_and_login(client, email="seller@example.com", password="abc123"):
    """Create a user through the API and return (user_id, auth headers)."""
    response = client.post(
        "/user/signup",
        json={"email": email, "password": password, "password_confirm": password},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/user/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["access_token"]
    return user_id, {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth(client):
    return signup_and_login(client)


def add_product(db, user_id, company, category, tone, satisfaction=True, name="상품"):
    product = Product(
        user_id=user_id,
        name=name,
        company=company,
        category=category,
        introduce_text=f"{tone} 소개글",
        introduce_text_category=tone,
        satisfaction=satisfaction,
    )
    db.add(product)
    db.commit()
    return product


def add_user(db, email):
    user = User(email=email, hashed_password="not-a-real-hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
