"""
Repositories, one per entity, each scoped to a single Session.

- UserRepository: user lookup, wallet and address writes
- ProductRepository: read-only product catalog
- CartRepository: one cart record per user, keyed by email
"""
from app.repositories.user import UserRepository
from app.repositories.product import ProductRepository
from app.repositories.cart import CartRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "CartRepository",
]
