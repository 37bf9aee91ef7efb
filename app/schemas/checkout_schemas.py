# app/schemas/checkout_schemas.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List, Optional

from app.schemas.cart_schemas import CartItem


class ShipmentInfo(BaseModel):
    address: str
    city: str
    recipient_name: str
    phone_number: str
    postal_code: Optional[str] = None
    delivery_type_id: Optional[int] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CheckoutRequest(BaseModel):
    # presence checks run in the validator so each gets its own message;
    # any client-sent prices are dropped as unknown fields
    items: List[CartItem] = []
    shipment: Optional[ShipmentInfo] = None
    payment_provider_id: Optional[int] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CheckoutResponse(BaseModel):
    order_id: int
    total_amount: int
    status: str

    class Config:
        alias_generator = to_camel
        populate_by_name = True
