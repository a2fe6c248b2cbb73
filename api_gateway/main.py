"""
API Gateway - FastAPI Application
Single entry point for clients, relays requests to the store service
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import httpx
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from api_gateway.config import Settings, get_settings
from api_gateway.exceptions import RelayFailure
from api_gateway.routes import health, relay
from api_gateway.utils.store_client import StoreServiceClient
from shared.schemas import error_body
from shared.utils.logger import configure_logging

logger = structlog.get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store_transport: Optional[httpx.AsyncBaseTransport] = None
) -> FastAPI:
    """
    Build the gateway application

    Args:
        settings: Gateway settings, read from the environment when omitted
        store_transport: httpx transport for store calls, mainly for wiring
            the gateway to an in-process store
    """
    settings = settings or get_settings()
    configure_logging(settings.service_name, settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("API Gateway starting up", store_service_url=settings.store_service_url)
        await app.state.store_client.start()

        yield

        await app.state.store_client.stop()
        logger.info("API Gateway shutdown complete")

    app = FastAPI(
        title="API Gateway",
        description="Relays client requests to the store service",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store_client = StoreServiceClient(settings, transport=store_transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2)
        )
        return response

    @app.exception_handler(RelayFailure)
    async def relay_failure_handler(request: Request, exc: RelayFailure):
        """Every relay failure looks the same to the caller"""
        logger.error("Relay failed", path=request.url.path, **exc.to_log_context())
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content=error_body(exc.code, exc.public_message, status.HTTP_502_BAD_GATEWAY)
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Custom HTTP exception handler"""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("http_error", str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(
            "Unhandled exception",
            error=str(exc),
            method=request.method,
            url=str(request.url),
            exc_info=True
        )
        return JSONResponse(
            status_code=500,
            content=error_body("internal_error", "An unexpected error occurred", 500)
        )

    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(relay.router, prefix="/api/v1", tags=["Relay"])

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.version,
            "status": "running",
            "docs": "/docs"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api_gateway.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
