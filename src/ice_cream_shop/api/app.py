"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ice_cream_shop.api.models import DishResponse, OrderRequest
from ice_cream_shop.app_logging import configure_logging
from ice_cream_shop.containers import AppContainer
from ice_cream_shop.domain.errors import IceCreamShopError, OutOfStockError

def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level, container.settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(IceCreamShopError)
    async def order_rejected(request: Request, exc: IceCreamShopError) -> JSONResponse:
        status_code = (
            status.HTTP_409_CONFLICT
            if isinstance(exc, OutOfStockError)
            else status.HTTP_422_UNPROCESSABLE_ENTITY
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": exc.code},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/orders")
    def submit_order(payload: OrderRequest, request: Request) -> DishResponse:
        """Prepare and charge an order."""
        state_container: AppContainer = request.app.state.container
        dish = state_container.shop.submit(payload.to_order())
        return DishResponse.from_dish(dish)

    return app
