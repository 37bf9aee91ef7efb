import logging

from pydantic import BaseModel

from app.constants.order_status import ORDER_STATUS_NAMES, ORDER_STATUS_PENDING
from app.schemas.checkout_schemas import CheckoutRequest, CheckoutResponse
from app.services.catalog import SqlCatalog
from app.services.checkout_validator import validate_items, validate_request
from app.services.order_commit import SqlOrderStore
from app.services.pricing import price_order

logger = logging.getLogger(__name__)


class CheckoutContext(BaseModel):
    """Everything one checkout needs, passed explicitly through each stage."""

    user_id: int
    body: CheckoutRequest
    delivery_price: int


def checkout(
    ctx: CheckoutContext,
    catalog: SqlCatalog,
    orders: SqlOrderStore,
) -> CheckoutResponse:
    body = ctx.body

    validate_request(body)

    # read prices only after the request itself is known to be well formed
    books = catalog.fetch_books(item.book_id for item in body.items)
    validate_items(body.items, books)

    priced = price_order(body.items, books, ctx.delivery_price)

    order_id = orders.create_order(
        user_id=ctx.user_id,
        order_status_id=ORDER_STATUS_PENDING,
        payment_provider_id=body.payment_provider_id,
        subtotal_amount=priced.subtotal_amount,
        delivery_price=priced.delivery_price,
        total_amount=priced.total_amount,
        items=priced.lines,
        shipment=body.shipment,
    )

    return CheckoutResponse(
        order_id=order_id,
        total_amount=priced.total_amount,
        status=ORDER_STATUS_NAMES[ORDER_STATUS_PENDING],
    )
