"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from payoff_projector.api.middleware import RequestIDMiddleware, MetricsMiddleware
from payoff_projector.api.v1 import payment, projection
from payoff_projector.infrastructure.observability.logging import setup_logging
from payoff_projector.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Debt Payoff Projector",
        description="Month-by-month debt payoff and snowball projections",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(projection.router, prefix="/v1", tags=["projections"])
    app.include_router(payment.router, prefix="/v1", tags=["payments"])

    return app


app = create_app()
