"""
FastAPI application entry point for Carbon Mail.
"""

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from carbon_mail.api.dependencies import get_health_prober, get_llm_client, get_settings
from carbon_mail.api.error_handlers import EXCEPTION_HANDLERS
from carbon_mail.api.middleware import RequestTracingMiddleware
from carbon_mail.api.routes_inbox import router as inbox_router
from carbon_mail.api.routes_scan import router as scan_router
from carbon_mail.config import settings
from carbon_mail.logging_config import configure_logging

# Configure structured logging before the app starts handling requests
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Inbox cleanup assistant: DELETE / KEEP / REVIEW classification with a local Ollama model",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
# Added last so it is outermost and every log line carries the request id
app.add_middleware(RequestTracingMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(scan_router, tags=["scan"])
app.include_router(inbox_router, tags=["inbox"])


@app.on_event("startup")
async def startup():
    """Log configuration and whether Ollama is reachable. Never blocks startup."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        ollama_base_url=settings.OLLAMA_BASE_URL,
        default_model=settings.OLLAMA_MODEL,
        batch_size=settings.BATCH_SIZE,
    )

    health = await get_health_prober(get_settings()).probe()
    if not health.available:
        logger.warning("Ollama not reachable at startup; scans will return 503 until it is started")
    elif not health.models:
        logger.warning("Ollama has no models installed", suggested_model=settings.OLLAMA_MODEL)
    else:
        logger.info("Ollama connection successful", models=health.models)


@app.on_event("shutdown")
async def shutdown():
    """Close the pooled Ollama connection."""
    await get_llm_client().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "scan": "/scan",
        "emails": "/emails",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "carbon_mail.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
