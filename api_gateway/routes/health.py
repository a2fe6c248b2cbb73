"""
Health Check Routes
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from api_gateway.routes.relay import get_store_client
from api_gateway.utils.store_client import StoreServiceClient

router = APIRouter()


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


@router.get("/store")
async def store_health_check(store_client: StoreServiceClient = Depends(get_store_client)):
    """Probe the store service"""
    store_status = await store_client.health_check()
    return {
        "status": "healthy" if store_status == "healthy" else "degraded",
        "components": {
            "store": {
                "status": store_status,
                "url": store_client.base_url
            }
        }
    }
