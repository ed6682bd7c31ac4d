"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
The lifespan handler builds the DI container (and with it the MongoDB connection and
indexes) on startup and closes the connection on shutdown.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from salon_crm.api.v1 import client_router, customer_router, menu_item_router, product_router
from salon_crm.api.v1.error_handlers import register_exception_handlers
from salon_crm.core.config import Settings, get_settings
from salon_crm.core.logging import setup_logging
from salon_crm.di.container import CONNECTION_KEY, DIContainer

logger = logging.getLogger(__name__)

SERVICE_NAME = "Salon CRM API"
VERSION = "1.0.0"


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - Error handlers mapping domain errors to HTTP responses
    - API route registration
    - A lifespan handler that builds and closes the dependency container

    Args:
        settings: Settings to use; loaded from the environment when omitted
        database: Database to use instead of connecting with ``settings.mongo_uri``

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Wire repositories and services on startup, close the connection on shutdown."""
        app.state.container = DIContainer(settings, database)
        logger.info(f"{SERVICE_NAME} {VERSION} started with prefix {settings.api_prefix}")
        try:
            yield
        finally:
            app.state.container.close()
            logger.info(f"{SERVICE_NAME} stopped")

    application = FastAPI(
        title=SERVICE_NAME,
        description="CRM backend for a beauty salon: customers, catalogue, B2B clients and the service menu",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(application)

    application.include_router(customer_router, prefix=f"{settings.api_prefix}/customers")
    application.include_router(product_router, prefix=f"{settings.api_prefix}/products")
    application.include_router(client_router, prefix=f"{settings.api_prefix}/clients")
    application.include_router(menu_item_router, prefix=f"{settings.api_prefix}/menu-items")

    @application.get("/")
    async def root():
        """Root endpoint - service information."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": VERSION,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        container = application.state.container
        if container.has(CONNECTION_KEY) and not container.get(CONNECTION_KEY).ping():
            return {"status": "degraded", "database": "unreachable"}
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("salon_crm.main:app", host=settings.host, port=settings.port)
