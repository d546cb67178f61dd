from typing import List
from app.core.errors import NotFoundError
from app.models.product import Product
from app.repositories import ProductRepository

class ProductService:
    def __init__(self, products: ProductRepository):
        self.products = products

    def list_products(self) -> List[Product]:
        return self.products.find_all()

    def get_product(self, product_id: int) -> Product:
        product = self.products.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product
