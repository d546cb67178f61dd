from app.core.errors import NotFoundError
from app.core.logging import get_logger
from app.models.user import User
from app.repositories import UserRepository

logger = get_logger(__name__)

class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    def get_user_by_id(self, user_id: int) -> User:
        user = self.users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def set_address(self, user: User, new_address: str) -> str:
        user.address = new_address
        self.users.save(user)
        logger.info("Updated address for user %s", user.id)
        return user.address
