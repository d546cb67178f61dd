from typing import Optional
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone

class ProductBase(SQLModel):
    name: str = Field(index=True)
    category: Optional[str] = Field(default=None, index=True)

    # Pricing
    cost: float = Field(ge=0)

    rating: float = Field(default=0, ge=0, le=5)
    image: Optional[str] = None

class Product(ProductBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Metadata
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_snapshot(self) -> dict:
        """Copy of the fields a cart line keeps, frozen at add time."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "cost": self.cost,
            "rating": self.rating,
            "image": self.image,
        }

class ProductSnapshot(ProductBase):
    """Product as embedded in a cart line (a value copy, not a reference)."""
    id: int
