"""
Home Monitor - FastAPI Application
Main entry point for the API server
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import uvicorn
import structlog
from contextlib import asynccontextmanager

from home_monitor import __version__
from home_monitor.api.routes import alarm, device, health, sensors
from home_monitor.core.config import settings
from home_monitor.core.logging_config import configure_logging
from home_monitor.database.store import MonitorStore

configure_logging(settings.log_level)

logger = structlog.get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Home Monitor API")
    if app.state.store is None:
        app.state.store = MonitorStore.from_settings(settings)

    # The service has no degraded mode without its database
    try:
        app.state.store.check_connection()
        app.state.store.create_schema()
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield
    logger.info("Shutting down Home Monitor API")

def create_app(store: Optional[MonitorStore] = None) -> FastAPI:
    """Build the application; a store built from settings is used when none is given"""
    app = FastAPI(
        title="Home Monitor API",
        description="Device reports, alarm configuration and sensor history for the home dashboard",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.store = store

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include routers
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(device.router, prefix="/api", tags=["device"])
    app.include_router(alarm.router, prefix="/api", tags=["alarm"])
    app.include_router(sensors.router, prefix="/api", tags=["sensors"])

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request, exc):
        """Store failures are reported with the underlying error"""
        detail = str(getattr(exc, "orig", None) or exc)
        logger.error("Database operation failed", path=request.url.path, error=detail)
        return JSONResponse(
            status_code=500,
            content={"detail": detail}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """Global exception handler"""
        logger.error("Unhandled exception", exc_info=exc, path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"}
        )

    return app

app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "home_monitor.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower()
    )
