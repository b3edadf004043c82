"""FastAPI application factory for the product category page."""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.database import create_tables
from config.logging_config import setup_logging
from controllers.product_category_controller import ProductCategoryController
from middleware.error_handler import storage_error_handler
from middleware.rate_limiter import RateLimiterMiddleware
from repositories.exceptions import StorageError

logger = logging.getLogger(__name__)

RATE_LIMIT_CALLS = int(os.getenv('RATE_LIMIT_CALLS', '100'))
RATE_LIMIT_PERIOD = int(os.getenv('RATE_LIMIT_PERIOD', '60'))


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Creating database tables if missing")
    create_tables()
    yield


def create_fastapi_app() -> FastAPI:
    setup_logging()

    app = FastAPI(title="Online Shop - Product Categories", lifespan=lifespan)
    app.add_middleware(RateLimiterMiddleware, calls=RATE_LIMIT_CALLS, period=RATE_LIMIT_PERIOD)
    app.add_exception_handler(StorageError, storage_error_handler)

    app.include_router(ProductCategoryController().router)

    @app.get("/health_check")
    async def health_check():
        return {"status": "ok"}

    return app
