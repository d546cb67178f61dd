from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session
from pydantic import BaseModel, ConfigDict, Field
from app.db.session import get_session
from app.models.cart import CartRead
from app.models.user import User
from app.repositories import CartRepository, ProductRepository, UserRepository
from app.routers.auth import get_current_user
from app.services.cart import CartService

router = APIRouter()

class CartItemBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    quantity: int = Field(ge=1)

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(
        carts=CartRepository(session),
        products=ProductRepository(session),
        users=UserRepository(session),
    )

@router.get("/", response_model=CartRead)
def get_cart(current_user: User = Depends(get_current_user), service: CartService = Depends(get_cart_service)):
    """Get the user's cart"""
    return service.get_cart_by_user(current_user)

@router.post("/", response_model=CartRead, status_code=status.HTTP_201_CREATED)
def add_product_to_cart(
    body: CartItemBody,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Add a product to the cart, creating the cart on first use"""
    return service.add_product_to_cart(current_user, body.product_id, body.quantity)

@router.put("/", response_model=CartRead)
def update_product_in_cart(
    body: CartItemBody,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Change the quantity of a product already in the cart"""
    return service.update_product_in_cart(current_user, body.product_id, body.quantity)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product_from_cart(
    product_id: int,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Remove a product from the cart"""
    service.delete_product_from_cart(current_user, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/checkout", status_code=status.HTTP_204_NO_CONTENT)
def checkout(current_user: User = Depends(get_current_user), service: CartService = Depends(get_cart_service)):
    """Pay for the cart from the wallet and empty it"""
    service.checkout(current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
