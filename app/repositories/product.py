from typing import List, Optional
from sqlmodel import select
from app.models.product import Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository):
    """Read-only product catalog."""

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.session.get(Product, product_id)

    def find_all(self) -> List[Product]:
        return list(self.session.exec(select(Product).order_by(Product.id)).all())
