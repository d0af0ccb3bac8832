"""FastAPI application factory"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from pyrme_loans.api.dependencies import get_request_id
from pyrme_loans.api.middleware import MetricsMiddleware, RequestIDMiddleware
from pyrme_loans.api.v1 import eligibility, emi, offers
from pyrme_loans.config import settings
from pyrme_loans.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="PYRME Loans",
        description="EMI, eligibility and offer ranking service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        request_id = get_request_id(request)
        logging.error(f"Unexpected error: {exc}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
            headers={"X-Request-ID": request_id},
        )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(emi.router, prefix="/v1", tags=["emi"])
    app.include_router(eligibility.router, prefix="/v1", tags=["eligibility"])
    app.include_router(offers.router, prefix="/v1", tags=["offers"])

    return app


app = create_app()
