import logging

from fastapi import APIRouter, Depends

from app.config import settings
from app.dependencies.checkout import get_catalog, get_order_store
from app.errors import CheckoutValidationError
from app.schemas.checkout_schemas import CheckoutRequest, CheckoutResponse
from app.services.catalog import SqlCatalog
from app.services.checkout_service import CheckoutContext, checkout
from app.services.order_commit import SqlOrderStore
from app.utils.token import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter()


# Only POST is registered; other methods get 405 from the router
@router.post("", response_model=CheckoutResponse)
def place_order(
    body: CheckoutRequest,
    user_id: int = Depends(get_current_user_id),
    catalog: SqlCatalog = Depends(get_catalog),
    orders: SqlOrderStore = Depends(get_order_store),
):
    ctx = CheckoutContext(
        user_id=user_id,
        body=body,
        delivery_price=settings.delivery_price,
    )

    try:
        return checkout(ctx, catalog, orders)
    except CheckoutValidationError as exc:
        logger.warning(f"Checkout rejected for user {user_id}: {exc.detail}")
        raise
