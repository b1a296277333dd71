"""TechStore catalog API main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from techstore.api.catalog import router as catalog_router
from techstore.api.dependencies import get_catalog_store
from techstore.api.health import router as health_router
from techstore.api.middleware import setup_middleware
from techstore.infrastructure.config import settings
from techstore.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    The catalog is loaded before the first request is served.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level, json=settings.log_json)
    logger.info(
        "Starting TechStore catalog API",
        version=settings.api_version,
        debug=settings.debug,
    )

    store = get_catalog_store()
    logger.info(
        "Catalog ready",
        product_count=len(store),
        categories=store.category_counts(),
    )

    yield

    logger.info("Shutting down TechStore catalog API")


app = FastAPI(
    title="TechStore Catalog API",
    description="Catalog query engine: filtering, sorting, pagination and shareable queries",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Setup custom middleware (request ID, error handling)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(catalog_router)
