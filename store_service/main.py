"""
Store Service - FastAPI Application
Backend of record for accounts and file references
"""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from shared.schemas import error_body
from shared.utils.logger import configure_logging
from store_service.config import Settings, get_settings
from store_service.db.database import StoreDatabase
from store_service.exceptions import StoreError
from store_service.routes import accounts, files, health

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the store application"""
    settings = settings or get_settings()
    configure_logging(settings.service_name, settings.log_level, settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan events"""
        logger.info("Starting Store Service")

        db = StoreDatabase(settings)
        await db.initialize()
        app.state.db = db

        yield

        await app.state.db.close()
        logger.info("Store Service shutdown complete")

    app = FastAPI(
        title="Store Service",
        description="Persists accounts and file references",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings

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

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        """Domain failures keep their own code and status"""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.code, exc.message, exc.status_code)
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
    app.include_router(accounts.router, prefix="/api/v1/accounts", tags=["Accounts"])
    app.include_router(files.router, prefix="/api/v1/files", tags=["Files"])

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
        "store_service.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
        log_level="info"
    )
