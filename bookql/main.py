"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Tests can build their own instance

2. Lifespan Events
   - startup: log configuration, optionally create tables
   - shutdown: dispose of the connection pool

3. Exception Handlers
   - Database errors on REST routes become a generic HTTP 500
   - GraphQL errors are reported by Strawberry in the `errors` field
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from bookql import __version__
from bookql.config import get_settings
from bookql.database import create_tables, engine
from bookql.dependencies import DbSession
from bookql.graphql import DATABASE_ERROR_MESSAGE, create_graphql_router

# =============================================================================
# Logging Configuration
# =============================================================================
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

    Code before yield runs on startup, code after yield on shutdown.
    """
    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug mode: {settings.debug}")

    if settings.create_tables_on_startup:
        create_tables()
        logger.info("Database tables created")

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
        description="GraphQL API for creating and reading books. "
                    "The schema is served at /graphql.",
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
    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error and returns a generic message to the client.
        """
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"detail": DATABASE_ERROR_MESSAGE},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        Error details are only returned in debug mode.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
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
    graphql_router = create_graphql_router()
    app.include_router(graphql_router, prefix="/graphql", tags=["GraphQL"])

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check that the API is running and the database answers.",
    )
    def health_check(db: DbSession) -> JSONResponse:
        """
        Health check endpoint.

        Runs `SELECT 1` on a fresh session. Returns 503 when the database
        cannot be reached so load balancers stop routing to this instance.
        """
        body = {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "database": "connected",
            "graphql": {
                "endpoint": "/graphql",
                "ide": settings.graphql_ide_option,
            },
        }

        try:
            db.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning(f"Health check failed: {exc}")
            body["status"] = "unhealthy"
            body["database"] = "unavailable"
            return JSONResponse(status_code=503, content=body)

        return JSONResponse(status_code=200, content=body)

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
# This is what uvicorn imports: uvicorn bookql.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m bookql.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookql.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
