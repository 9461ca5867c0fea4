"""
FastAPI application initialization and configuration.
"""
import logging
from fastapi import FastAPI

from bridge.adapter import PodioAdapter
from .middleware import log_requests_middleware
from .endpoints import (
    health_router,
    contacts_router,
    oauth2_router,
)

logger = logging.getLogger(__name__)


def create_app(adapter: PodioAdapter) -> FastAPI:
    """Create the bridge application around a configured adapter"""
    app = FastAPI(title="Podio Bridge", version="1.0.0")
    app.state.adapter = adapter

    # Add middleware
    app.middleware("http")(log_requests_middleware)

    # Register routers
    app.include_router(health_router)
    app.include_router(contacts_router)
    app.include_router(oauth2_router)

    logger.debug("FastAPI application initialized with all routers and middleware")
    return app
