from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.order import Order


class Shipment(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="order.id", unique=True)

    address: str
    city: str
    recipient_name: str
    phone_number: str
    postal_code: Optional[str] = None
    delivery_type_id: Optional[int] = None

    order: Optional["Order"] = Relationship(back_populates="shipment")
