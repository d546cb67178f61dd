"""Tests for model defaults and timestamps"""
from app.models.cart import Cart
from app.models.user import User
from app.repositories import CartRepository, UserRepository


def test_default_timestamps_are_timezone_aware():
    user = User(email="tz@gmail.com", password_hash="x")
    cart = Cart(email="tz@gmail.com")

    assert user.created_at.tzinfo is not None
    assert user.updated_at.tzinfo is not None
    assert cart.created_at.tzinfo is not None


def test_save_stamps_timezone_aware_updated_at(session):
    cart = Cart(email="tz@gmail.com")

    CartRepository(session).save(cart, commit=False)

    assert cart.updated_at.tzinfo is not None


def test_create_user_and_cart_persist(session):
    user = UserRepository(session).create(email="tz@gmail.com", password_hash="x")
    cart = CartRepository(session).create(user.email, [])

    assert user.id is not None
    assert cart.id is not None
    assert cart.cart_items == []


def test_carts_do_not_share_items_list():
    first = Cart(email="first@gmail.com")
    second = Cart(email="second@gmail.com")

    first.cart_items.append({"product": {"id": 1}, "quantity": 1})

    assert second.cart_items == []


def test_unset_wallet_is_stored_as_null(make_user):
    user = make_user(wallet_money=None)

    assert user.wallet_money is None
