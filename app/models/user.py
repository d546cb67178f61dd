from typing import Optional
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone
from app.core.config import settings

class UserBase(SQLModel):
    name: Optional[str] = None
    email: str = Field(unique=True, index=True)

    # Wallet & Address
    wallet_money: Optional[float] = Field(default_factory=lambda: settings.DEFAULT_WALLET_MONEY)
    address: str = Field(default_factory=lambda: settings.DEFAULT_ADDRESS)

class User(UserBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    password_hash: str

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def has_non_default_address(self) -> bool:
        return bool(self.address) and self.address != settings.DEFAULT_ADDRESS

class UserPublic(UserBase):
    """User as returned by the API (no password hash)."""
    id: int
    created_at: datetime
