"""
Health Check Routes
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, status
import structlog

from store_service.db.database import StoreDatabase, get_database

router = APIRouter()
logger = structlog.get_logger(__name__)


@router.get("")
async def health_check(request: Request):
    """Basic health check"""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.version
    }


@router.get("/database")
async def database_health_check(db: StoreDatabase = Depends(get_database)):
    """Database connection health check"""
    try:
        await db.ping()
        return {
            "status": "healthy",
            "database": "connected",
            "test_query": "passed"
        }
    except Exception as e:
        logger.error("Database health check failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed"
        )
