"""Pytest configuration and fixtures"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test_secret_key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.security import create_access_token, get_password_hash
from app.db.session import create_db_and_tables, get_session
from app.main import app
from app.models.product import Product
from app.models.user import User
from app.repositories import CartRepository, ProductRepository, UserRepository
from app.services.cart import CartService

VALID_ADDRESS = "ITPL Main Rd, Whitefield, Bengaluru, Karnataka 560066"


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    """Test client sharing the test's session"""
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make_user(email="test-user@gmail.com", password="password1",
                   wallet_money=100, address=VALID_ADDRESS):
        user = User(
            name="test-user",
            email=email,
            password_hash=get_password_hash(password),
            address=address,
        )
        session.add(user)
        session.commit()
        # Set after insert so None is written as NULL instead of the default
        user.wallet_money = wallet_money
        session.add(user)
        session.commit()
        session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token({'sub': user.email})}"}


@pytest.fixture
def make_product(session):
    def _make_product(name, cost, category="Fashion"):
        product = Product(name=name, category=category, cost=cost, rating=4)
        session.add(product)
        session.commit()
        session.refresh(product)
        return product
    return _make_product


@pytest.fixture
def product_a(make_product):
    return make_product("UNIFACTOR Mens Running Shoes", 10)


@pytest.fixture
def product_b(make_product):
    return make_product("YONEX Smash Badminton Racquet", 5, category="Sports")


@pytest.fixture
def cart_service(session):
    return CartService(
        carts=CartRepository(session),
        products=ProductRepository(session),
        users=UserRepository(session),
    )
