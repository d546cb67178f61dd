from typing import List
from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_session
from app.models.product import Product
from app.repositories import ProductRepository
from app.services.product import ProductService

router = APIRouter()

def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(ProductRepository(session))

@router.get("/", response_model=List[Product])
def read_products(service: ProductService = Depends(get_product_service)):
    return service.list_products()

@router.get("/{product_id}", response_model=Product)
def read_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.get_product(product_id)
