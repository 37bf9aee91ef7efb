from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime
from app.models.base import TimestampType, utc_now

from app.models.order_item import OrderItem
from app.models.shipment import Shipment

class Order(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    order_status_id: int = Field(foreign_key="order_status.id")
    payment_provider_id: int = Field(foreign_key="payment_provider.id")

    subtotal_amount: int
    delivery_price: int
    total_amount: int

    created_at: datetime = Field(default_factory=utc_now, sa_type=TimestampType)

    items: List["OrderItem"] = Relationship(back_populates="order")
    shipment: Optional["Shipment"] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={"uselist": False},
    )
