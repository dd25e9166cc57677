# app/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.routers import carts, health, snacks
from app.domain.errors import CartServiceError
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def cart_service_error_handler(request: Request, exc: CartServiceError):
    # kod statusu niesie sam wyjatek
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(lifespan=None) -> FastAPI:
    app = FastAPI(
        title="Snack Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(CartServiceError, cart_service_error_handler)

    app.include_router(health.router)
    app.include_router(snacks.router)
    app.include_router(carts.router)

    return app
