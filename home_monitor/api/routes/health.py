"""
Health check endpoints
"""

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
import structlog

from home_monitor import __version__
from home_monitor.api.dependencies import get_store
from home_monitor.database.store import MonitorStore

logger = structlog.get_logger(__name__)
router = APIRouter()

SERVICE_NAME = "Home Monitor API"

@router.get("/health")
def health_check():
    """Basic health check"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": __version__
    }

@router.get("/health/detailed")
def detailed_health_check(store: MonitorStore = Depends(get_store)):
    """Detailed health check with database connectivity"""
    try:
        store.check_connection()
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.error("Database health check failed", error=str(e))
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "unhealthy",
        "database": db_status,
        "service": SERVICE_NAME,
        "version": __version__
    }
