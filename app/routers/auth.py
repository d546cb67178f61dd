import re
from typing import Optional
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from sqlmodel import Session
from pydantic import BaseModel, Field, field_validator
from app.db.session import get_session
from app.models.user import User, UserPublic
from app.repositories import UserRepository
from app.services.auth import AuthService

router = APIRouter()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/token")


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class AuthResponse(Token):
    user: UserPublic

class UserCreate(BaseModel):
    name: Optional[str] = None
    email: str
    password: str = Field(min_length=8)

    @field_validator("password")
    @classmethod
    def _password_has_letter_and_digit(cls, v: str) -> str:
        if not re.search(r"\d", v) or not re.search(r"[a-zA-Z]", v):
            raise ValueError("password must contain at least 1 letter and 1 number")
        return v

class UserLogin(BaseModel):
    email: str
    password: str

def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(UserRepository(session))

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_in: UserCreate, service: AuthService = Depends(get_auth_service)):
    user = service.register_user(user_in.email, user_in.password, name=user_in.name)
    return {"user": user, "access_token": service.generate_auth_token(user)}

@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, service: AuthService = Depends(get_auth_service)):
    user = service.login_with_email_and_password(credentials.email, credentials.password)
    return {"user": user, "access_token": service.generate_auth_token(user)}

@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = Depends(get_auth_service),
):
    """OAuth2 password flow, used by the Swagger UI "Authorize" button."""
    user = service.login_with_email_and_password(form_data.username, form_data.password)
    return {"access_token": service.generate_auth_token(user)}

def get_current_user(token: str = Depends(oauth2_scheme), service: AuthService = Depends(get_auth_service)) -> User:
    return service.get_user_from_token(token)
