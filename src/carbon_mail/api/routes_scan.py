"""
Classification endpoint.

POST /scan classifies a list of emails with the local model service.
GET /scan returns the service health for client-side pre-flight checks.
"""

import structlog
from fastapi import APIRouter, Depends, status

from carbon_mail.api.dependencies import get_scan_service
from carbon_mail.models.input_models import ScanRequest
from carbon_mail.models.output_models import HealthStatus, ScanResponse
from carbon_mail.service.scan_service import ScanService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/scan",
    response_model=ScanResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify emails as DELETE / KEEP / REVIEW",
    description="""
    Classify the given emails with a locally running Ollama model.

    Emails are processed in groups of at most 5 concurrent calls. An email
    whose call fails is marked REVIEW for manual review; it never fails the
    whole scan. If the requested model is not installed, the first
    installed model is used and reported in `model`.
    """,
    responses={
        200: {"description": "Every email classified"},
        400: {"description": "No emails provided"},
        404: {"description": "Ollama is running but has no models installed"},
        500: {"description": "Unexpected failure"},
        503: {"description": "Ollama is not running"},
    },
)
async def scan_emails(
    request: ScanRequest,
    service: ScanService = Depends(get_scan_service),
) -> ScanResponse:
    """
    Classify a list of emails.

    Args:
        request: ScanRequest with emails and optional model
        service: Scan service (injected)

    Returns:
        ScanResponse with results, resolved model and count processed
    """
    logger.info(
        "Scan request received",
        email_count=len(request.emails or []),
        requested_model=request.model,
    )
    return await service.scan(request.emails, request.model)


@router.get(
    "/scan",
    response_model=HealthStatus,
    summary="Local model service health",
    description="Whether Ollama is reachable and which models are installed.",
)
async def scan_health(
    service: ScanService = Depends(get_scan_service),
) -> HealthStatus:
    return await service.health()
