from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class CheckoutError(HTTPException):
    """Base for failures raised while processing a checkout."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str, book_id: Optional[int] = None):
        super().__init__(status_code=self.status_code, detail=detail)
        self.book_id = book_id


class AuthError(CheckoutError):
    status_code = status.HTTP_401_UNAUTHORIZED


class CheckoutValidationError(CheckoutError):
    status_code = status.HTTP_400_BAD_REQUEST


class InfrastructureError(CheckoutError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def checkout_error_handler(request: Request, exc: CheckoutError):
    content = {"detail": exc.detail}
    if exc.book_id is not None:
        content["bookId"] = exc.book_id

    headers = None
    if isinstance(exc, AuthError):
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # malformed bodies are reported as 400 rather than FastAPI's default 422
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body", "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError):
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
