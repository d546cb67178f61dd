from typing import Optional
from fastapi import APIRouter, Depends
from sqlmodel import Session
from pydantic import BaseModel, Field
from app.core.errors import ForbiddenError
from app.db.session import get_session
from app.models.user import User, UserPublic
from app.repositories import UserRepository
from app.routers.auth import get_current_user
from app.services.user import UserService

router = APIRouter()

class AddressUpdate(BaseModel):
    address: str = Field(min_length=20)

class AddressResponse(BaseModel):
    address: str

def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(UserRepository(session))

def _ensure_self(user_id: int, current_user: User) -> None:
    if current_user.id != user_id:
        raise ForbiddenError("User not authorized to access this resource")

@router.get("/{user_id}", response_model=UserPublic | AddressResponse)
def get_user(
    user_id: int,
    q: Optional[str] = None,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """
    Get a user. ``?q=address`` returns only the address.
    """
    _ensure_self(user_id, current_user)
    user = service.get_user_by_id(user_id)
    if q == "address":
        return AddressResponse(address=user.address)
    return UserPublic.model_validate(user, from_attributes=True)

@router.put("/{user_id}", response_model=AddressResponse)
def set_address(
    user_id: int,
    address_in: AddressUpdate,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """
    Set the user's shipping address.
    """
    _ensure_self(user_id, current_user)
    user = service.get_user_by_id(user_id)
    return {"address": service.set_address(user, address_in.address)}
