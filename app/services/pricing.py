from pydantic import BaseModel
from typing import Dict, List

from app.models.book import Book
from app.schemas.cart_schemas import CartItem


class PricedLine(BaseModel):
    book_id: int
    quantity: int
    unit_price: int


class PricedOrder(BaseModel):
    lines: List[PricedLine]
    subtotal_amount: int
    delivery_price: int
    total_amount: int


def price_order(
    items: List[CartItem],
    books: Dict[int, Book],
    delivery_price: int,
) -> PricedOrder:
    # unit prices come from the catalog only; items must already be validated
    lines = [
        PricedLine(
            book_id=item.book_id,
            quantity=item.quantity,
            unit_price=books[item.book_id].base_price,
        )
        for item in items
    ]

    subtotal = sum(line.unit_price * line.quantity for line in lines)

    return PricedOrder(
        lines=lines,
        subtotal_amount=subtotal,
        delivery_price=delivery_price,
        total_amount=subtotal + delivery_price,
    )
