"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Easier to test (can create multiple instances)

2. Lifespan Events
   - startup: log configuration before accepting requests
   - shutdown: dispose of the database connection pool

3. GraphQL + WebSocket
   - /graphql serves queries over HTTP and WebSocket
   - GraphQL errors are reported by Strawberry in the response body

4. Exception Handlers
   - Apply to the plain HTTP routes (/, /health)
   - Log errors, show details only in the development environment
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.database import engine
from app.graphql import create_graphql_router

# =============================================================================
# Logging Configuration
# =============================================================================
# Configure logging before creating the app
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug mode: {settings.debug}")
    logger.info(f"GraphQL IDE: {settings.graphql_ide}")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {settings.app_name}...")
    engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Locations API

A read-only GraphQL API over the Locations table.

### GraphQL
- `locations`: all locations sorted by name
- `location(code: String!)`: locations with the given code, sorted by name

Endpoint: `/graphql` (HTTP and WebSocket)
        """,
        version=__version__,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In the development environment the error message is returned,
        otherwise it is hidden.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.is_development:
            return JSONResponse(
                status_code=500,
                content={"detail": str(exc)},
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "An internal error occurred."},
        )

    # -------------------------------------------------------------------------
    # GraphQL Endpoint
    # -------------------------------------------------------------------------
    # HTTP and WebSocket transport share the /graphql path.
    graphql_router = create_graphql_router()
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and healthy.",
    )
    async def health_check() -> dict:
        """
        Health check endpoint.

        Used by load balancers, Kubernetes probes and monitoring systems.
        """
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "environment": settings.environment,
            "graphql": {
                "endpoint": "/graphql",
                "websocket": True,
                "ide": settings.graphql_ide_option,
            },
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": __version__,
            "graphql": "/graphql",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m app.main runs a development server.
# In production, use: uvicorn app.main:app --host 0.0.0.0 --port 8000

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,  # Auto-reload on code changes
    )
