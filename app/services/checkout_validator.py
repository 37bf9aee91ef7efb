"""
Checks applied to a checkout request before anything is priced or written.

Both gates raise ``CheckoutValidationError`` on the first problem found and
never collect more than one.
"""

from typing import Dict, List

from app.errors import CheckoutValidationError
from app.models.book import Book
from app.schemas.cart_schemas import CartItem
from app.schemas.checkout_schemas import CheckoutRequest


def validate_request(body: CheckoutRequest) -> None:
    """Request-level checks that need no catalog data."""
    if not body.items:
        raise CheckoutValidationError("Cart is empty")

    if body.shipment is None:
        raise CheckoutValidationError("Shipment info is required")

    if not body.payment_provider_id:
        raise CheckoutValidationError("Payment provider is required")


def validate_items(items: List[CartItem], books: Dict[int, Book]) -> None:
    """Per-item checks against the catalog snapshot, in request order."""
    for item in items:
        book = books.get(item.book_id)

        if book is None:
            raise CheckoutValidationError(
                f"Book with id {item.book_id} not found", book_id=item.book_id
            )

        if not book.is_active:
            raise CheckoutValidationError(
                f"Book with id {item.book_id} is not available", book_id=item.book_id
            )

        if item.quantity < 1:
            raise CheckoutValidationError(
                "Quantity must be at least 1", book_id=item.book_id
            )
