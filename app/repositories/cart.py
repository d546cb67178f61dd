from typing import List, Optional
from sqlmodel import select
from app.models.cart import Cart
from app.repositories.base import BaseRepository


class CartRepository(BaseRepository):

    def find_by_email(self, email: str) -> Optional[Cart]:
        return self.session.exec(select(Cart).where(Cart.email == email)).first()

    def create(self, email: str, cart_items: List[dict]) -> Cart:
        cart = Cart(email=email, cart_items=cart_items)
        return self.save(cart)
