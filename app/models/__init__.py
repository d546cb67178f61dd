# Import all models to register them with SQLModel
from app.models.user import User, UserPublic
from app.models.product import Product, ProductSnapshot
from app.models.cart import Cart, CartItem, CartRead

__all__ = [
    "User",
    "UserPublic",
    "Product",
    "ProductSnapshot",
    "Cart",
    "CartItem",
    "CartRead",
]
