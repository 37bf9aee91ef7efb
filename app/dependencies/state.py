from fastapi import Depends, Request

from app.config import settings
from app.services.cart_service import CartManager
from app.services.state_cell import StateRegistry


def get_state_registry(request: Request) -> StateRegistry:
    return StateRegistry(
        request.cookies,
        max_age_days=settings.cart_cookie_max_age_days,
    )


def get_cart(registry: StateRegistry = Depends(get_state_registry)) -> CartManager:
    return CartManager(registry, name=settings.cart_cookie_name)
