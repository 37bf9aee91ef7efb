import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from app.database import create_db_and_tables
from app.config import settings
from app.errors import CheckoutError, checkout_error_handler, request_validation_error_handler
from app.routes import (
    cart,
    checkout,
    health,
)

from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.env == "local":
        create_db_and_tables()
    yield

app = FastAPI(title="Bookstore Cart & Checkout API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(CheckoutError, checkout_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

app.include_router(cart.router, prefix="/cart", tags=["Cart"])
app.include_router(checkout.router, prefix="/checkout", tags=["Checkout"])
app.include_router(health.router, prefix="/health", tags=["Health"])

@app.get("/")
def root():
    return {
        "cart": [
            "/cart", "/cart/add", "/cart/remove", "/cart/clear"
        ],
        "checkout": [
            "/checkout"
        ],
        "health": [
            "/health/check"
        ]
    }
