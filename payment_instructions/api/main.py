"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from payment_instructions.api.middleware import RequestIDMiddleware, MetricsMiddleware
from payment_instructions.api.v1 import instructions
from payment_instructions.infrastructure.observability.logging import setup_logging
from payment_instructions.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def describe_errors(exc: RequestValidationError) -> list:
    """Location, message and type of each error; raw inputs may be NaN and are not echoed"""
    return jsonable_encoder(
        [{"loc": error["loc"], "msg": error["msg"], "type": error["type"]} for error in exc.errors()]
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed payloads before they reach the engine"""
    logging.warning(
        "Invalid request payload",
        extra={"request_id": getattr(request.state, "request_id", "unknown"), "path": request.url.path},
    )
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request payload", "errors": describe_errors(exc)},
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Instructions Service",
        description="Parses, validates and executes free-text payment instructions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(instructions.router, tags=["payment-instructions"])

    return app


app = create_app()
