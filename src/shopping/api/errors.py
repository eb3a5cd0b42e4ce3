"""Exception-to-status mapping for the cart API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from shopping.exceptions import CartCreationError


async def _cart_creation_failed(request: Request, exc: CartCreationError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=500, content={"error": exc.messages})


def register_error_handlers(app: FastAPI) -> None:
    """ValidationError -> 400 and ObjectNotFoundError -> 404 come from Protean."""
    register_exception_handlers(app)
    app.add_exception_handler(CartCreationError, _cart_creation_failed)
