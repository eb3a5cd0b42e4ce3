"""QKart cart FastAPI application.

Processes cart commands synchronously over HTTP. Every request under
``/v1/cart`` runs inside the shopping domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8082 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the provider configuration overlay.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from shopping.domain import shopping
from shopping.utils.logging import clear_context

shopping.init()

_DOMAIN_PREFIXES = ("/v1/cart",)


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="QKart Cart API",
    description="Per-user shopping cart and wallet checkout",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the shopping domain context for cart requests."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        with shopping.domain_context():
            response = await call_next(request)
        clear_context()
        return response
    # Health check, docs
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from shopping.api import cart_router, register_error_handlers  # noqa: E402

app.include_router(cart_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": shopping.name})
