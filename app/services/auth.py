from typing import Optional
from app.core.errors import InvalidRequestError, UnauthorizedError
from app.core.logging import get_logger, sanitize_for_logging
from app.core.security import get_password_hash, verify_password, create_access_token, decode_access_token
from app.models.user import User
from app.repositories import UserRepository

logger = get_logger(__name__)

class AuthService:
    def __init__(self, users: UserRepository):
        self.users = users

    def register_user(self, email: str, password: str, name: Optional[str] = None) -> User:
        if self.users.find_by_email(email):
            raise InvalidRequestError("Email already taken")

        user = self.users.create(email=email, password_hash=get_password_hash(password), name=name)
        logger.info("Registered user %s", sanitize_for_logging(email))
        return user

    def login_with_email_and_password(self, email: str, password: str) -> User:
        user = self.users.find_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise UnauthorizedError("Incorrect email or password")
        return user

    def generate_auth_token(self, user: User) -> str:
        return create_access_token(data={"sub": user.email})

    def get_user_from_token(self, token: str) -> User:
        email = decode_access_token(token)
        if email is None:
            raise UnauthorizedError()

        user = self.users.find_by_email(email)
        if user is None:
            raise UnauthorizedError()
        return user
