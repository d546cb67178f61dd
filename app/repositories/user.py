from typing import Optional
from sqlalchemy import func
from sqlmodel import select
from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository):

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        # Case-insensitive exact match, no LIKE so "_" and "%" stay literal
        return self.session.exec(select(User).where(func.lower(User.email) == email.lower())).first()

    def create(self, email: str, password_hash: str, name: Optional[str] = None) -> User:
        user = User(email=email, password_hash=password_hash, name=name)
        return self.save(user)
