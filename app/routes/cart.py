from fastapi import APIRouter, Depends, Response

from app.dependencies.state import get_cart, get_state_registry
from app.schemas.cart_schemas import CartChangeRequest, CartResponse
from app.services.cart_service import CartManager
from app.services.state_cell import StateRegistry


router = APIRouter()


def cart_response(cart: CartManager) -> CartResponse:
    return CartResponse(items=cart.items(), count=cart.count())


# View Cart

@router.get("/", response_model=CartResponse)
def get_cart_items(
    response: Response,
    cart: CartManager = Depends(get_cart),
    registry: StateRegistry = Depends(get_state_registry),
):
    # writes back a cookie that was reset or normalized on read
    registry.flush(response)
    return cart_response(cart)


# Add to Cart

@router.post("/add", response_model=CartResponse)
def add_to_cart(
    data: CartChangeRequest,
    response: Response,
    cart: CartManager = Depends(get_cart),
    registry: StateRegistry = Depends(get_state_registry),
):
    cart.add_item(data.book_id, data.quantity)
    registry.flush(response)
    return cart_response(cart)


# Remove from Cart

@router.post("/remove", response_model=CartResponse)
def remove_from_cart(
    data: CartChangeRequest,
    response: Response,
    cart: CartManager = Depends(get_cart),
    registry: StateRegistry = Depends(get_state_registry),
):
    cart.remove_item(data.book_id, data.quantity)
    registry.flush(response)
    return cart_response(cart)


# Clear Cart

@router.delete("/clear", response_model=CartResponse)
def clear_cart(
    response: Response,
    cart: CartManager = Depends(get_cart),
    registry: StateRegistry = Depends(get_state_registry),
):
    cart.clear()
    registry.flush(response)
    return cart_response(cart)
