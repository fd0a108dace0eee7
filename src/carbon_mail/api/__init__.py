"""
FastAPI API routes and endpoints.

- routes_scan.py: Classification endpoint (POST /scan, GET /scan)
- routes_inbox.py: Sample inbox listing (GET /emails, GET /emails/scan-subset)
- dependencies.py: Dependency injection for the Ollama client, prober, services
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from carbon_mail.api import dependencies, error_handlers, models
from carbon_mail.api.routes_inbox import router as inbox_router
from carbon_mail.api.routes_scan import router as scan_router

__all__ = [
    "scan_router",
    "inbox_router",
    "dependencies",
    "error_handlers",
    "models",
]
