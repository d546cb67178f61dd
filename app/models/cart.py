from typing import List, Optional
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from app.core.config import settings
from app.models.product import ProductSnapshot

class CartItem(SQLModel):
    product: ProductSnapshot
    quantity: int = Field(ge=1)

class Cart(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Owner (one cart per user)
    email: str = Field(unique=True, index=True)

    # Line items stored as a JSON document: [{"product": {...}, "quantity": n}]
    # Reassign the whole list on change, in-place mutation is not tracked.
    cart_items: List[dict] = Field(default_factory=list, sa_column=Column(JSON))

    payment_option: str = Field(default_factory=lambda: settings.DEFAULT_PAYMENT_OPTION)

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def find_item_index(self, product_id: int) -> Optional[int]:
        for idx, item in enumerate(self.cart_items or []):
            if item["product"]["id"] == product_id:
                return idx
        return None

class CartRead(SQLModel):
    email: str
    cart_items: List[CartItem]
    payment_option: str
