import logging
from typing import List

from app.schemas.cart_schemas import CartItem
from app.services.state_cell import StateCell, StateRegistry

logger = logging.getLogger(__name__)

CART_STATE_NAME = "cart"


def is_cart_value(value) -> bool:
    return isinstance(value, list) and all(
        isinstance(line, dict)
        and isinstance(line.get("bookId"), int)
        and isinstance(line.get("quantity"), int)
        for line in value
    )


def drop_empty_lines(lines: List[dict]) -> List[dict]:
    return [line for line in lines if line["quantity"] > 0]


def normalize_lines(lines: List[dict]) -> List[dict]:
    """One line per book, first-seen order, positive quantities only."""
    merged: List[dict] = []
    by_book = {}

    for line in lines:
        book_id = line["bookId"]
        if book_id in by_book:
            by_book[book_id]["quantity"] += line["quantity"]
        else:
            by_book[book_id] = {"bookId": book_id, "quantity": line["quantity"]}
            merged.append(by_book[book_id])

    return drop_empty_lines(merged)


class CartManager:
    """
    Line items of one buyer's cart, kept in a persisted state cell.

    Every mutation builds a new list and hands it to the cell, so the cell is
    always marked for persistence. A negative ``add_item`` works as a
    relative decrement; any line that ends at zero or below is dropped.
    Catalog checks happen at checkout.
    """

    def __init__(self, registry: StateRegistry, name: str = CART_STATE_NAME):
        self._cell: StateCell = registry.bind(name, default=list)
        value = self._cell.value

        if not is_cart_value(value):
            logger.warning(f"Resetting malformed cart state '{name}'")
            self._cell.set([])
            return

        lines = normalize_lines(value)
        if lines != value:
            logger.warning(f"Normalized cart state '{name}'")
            self._cell.set(lines)

    def _lines(self) -> List[dict]:
        return [dict(line) for line in self._cell.value]

    def items(self) -> List[CartItem]:
        return [CartItem.model_validate(line) for line in self._cell.value]

    def count(self) -> int:
        return len(self._cell.value)

    def add_item(self, book_id: int, quantity: int) -> None:
        lines = self._lines()

        for line in lines:
            if line["bookId"] == book_id:
                line["quantity"] += quantity
                break
        else:
            if quantity <= 0:
                return
            lines.append({"bookId": book_id, "quantity": quantity})

        self._cell.set(drop_empty_lines(lines))

    def remove_item(self, book_id: int, quantity: int) -> None:
        lines = self._lines()

        line = next((l for l in lines if l["bookId"] == book_id), None)
        if line is None:
            return

        line["quantity"] -= quantity
        self._cell.set(drop_empty_lines(lines))

    def clear(self) -> None:
        self._cell.set([])
