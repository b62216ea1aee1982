# product_api/main.py
import logging
from typing import List, Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .config import Settings, settings as default_settings
from .database import ProductStore
from .errors import UnauthorizedError
from .handlers import (
    create_product_logic, delete_product_logic, get_product_logic,
    list_products_logic, update_product_logic
)
from .logging_config import configure_logging
from .middleware import (
    ErrorHandlerMiddleware, RequestLoggerMiddleware,
    require_bearer_token, unauthorized_handler
)
from .models import ErrorResponse, Product, ProductResponse

logger = logging.getLogger("product_api.main")

WELCOME = "Welcome to the Product API! Go to /api/products to see all products."

NOT_FOUND = {404: {"model": ErrorResponse}}
MUTATION_ERRORS = {401: {"model": ErrorResponse}, 400: {"model": ErrorResponse}}


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def create_app(store: Optional[ProductStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)
    app.state.store = store if store is not None else ProductStore.seeded()

    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestLoggerMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)

    # ---------------------------
    # Root
    # ---------------------------
    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/api/products", response_model=List[Product])
    async def list_products(store: ProductStore = Depends(get_store)):
        return await list_products_logic(store)

    @app.get("/api/products/{product_id}", response_model=Product, responses=NOT_FOUND)
    async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await get_product_logic(store, product_id)

    @app.post(
        "/api/products",
        status_code=201,
        response_model=ProductResponse,
        responses=MUTATION_ERRORS,
        dependencies=[Depends(require_bearer_token)],
    )
    async def create_product(request: Request, store: ProductStore = Depends(get_store)):
        payload = await request.body()
        return await create_product_logic(store, payload)

    @app.put(
        "/api/products/{product_id}",
        response_model=ProductResponse,
        responses={**MUTATION_ERRORS, **NOT_FOUND},
        dependencies=[Depends(require_bearer_token)],
    )
    async def update_product(product_id: str, request: Request, store: ProductStore = Depends(get_store)):
        payload = await request.body()
        return await update_product_logic(store, product_id, payload)

    @app.delete(
        "/api/products/{product_id}",
        response_model=ProductResponse,
        responses={401: {"model": ErrorResponse}, **NOT_FOUND},
        dependencies=[Depends(require_bearer_token)],
    )
    async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
        return await delete_product_logic(store, product_id)

    return app


app = create_app()


def run() -> None:
    configure_logging(default_settings.LOG_LEVEL)
    logger.info("Server is running on http://localhost:%s", default_settings.PORT)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT, log_level=default_settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
