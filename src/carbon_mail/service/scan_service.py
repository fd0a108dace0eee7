"""
Scan orchestration behind ``POST /scan``.

Request-scoped state machine, no persistence across calls:
    1. Validate the email list
    2. Probe the local model service
    3. Resolve the requested model (prefix match, else first installed)
    4. Classify in batches
    5. Shape the response

Usage:
    service = ScanService(prober, batch_classifier, default_model="mistral")
    response = await service.scan(emails, requested_model="llama3")
"""

import time
from collections.abc import Sequence
from typing import Optional

import structlog

from carbon_mail.classifier.batch_classifier import BatchClassifier
from carbon_mail.llm.health_prober import HealthProber
from carbon_mail.models.input_models import Email
from carbon_mail.models.output_models import HealthStatus, ScanResponse
from carbon_mail.monitoring.metrics import model_fallbacks_total, scan_requests_total
from carbon_mail.service.exceptions import (
    InternalError,
    NO_EMAILS_MESSAGE,
    InvalidRequest,
    NoModelInstalled,
    ScanError,
    ServiceUnavailable,
)

logger = structlog.get_logger(__name__)


def resolve_model(requested: str, installed: Sequence[str], default_model: str) -> str:
    """
    Pick the model to run.

    The requested name is kept when any installed model starts with it
    ("mistral" matches "mistral:7b"); otherwise the first installed model is
    used.

    Raises:
        NoModelInstalled: Nothing is installed
    """
    if any(name.startswith(requested) for name in installed):
        return requested
    if not installed:
        raise NoModelInstalled(default_model)
    return installed[0]


class ScanService:
    """
    Classification boundary service.

    Attributes:
        prober: Health prober for the local model service
        batch_classifier: Batched classifier
        default_model: Model used when the request names none, and the one
            suggested when nothing is installed
    """

    def __init__(
        self,
        prober: HealthProber,
        batch_classifier: BatchClassifier,
        default_model: str = "mistral",
    ):
        self.prober = prober
        self.batch_classifier = batch_classifier
        self.default_model = default_model

    async def health(self) -> HealthStatus:
        """Current availability, for client-side pre-flight checks."""
        return await self.prober.probe()

    async def scan(
        self,
        emails: Optional[Sequence[Email]],
        requested_model: Optional[str] = None,
    ) -> ScanResponse:
        """
        Classify a list of emails.

        Args:
            emails: Emails to classify (must be non-empty)
            requested_model: Model name asked for by the client

        Returns:
            ScanResponse with one result per email and the model actually used

        Raises:
            InvalidRequest: No emails provided
            ServiceUnavailable: Ollama not reachable
            NoModelInstalled: Ollama reachable but no model installed
            InternalError: Any other failure
        """
        start_time = time.perf_counter()
        try:
            response = await self._scan(emails, requested_model or self.default_model)
        except ScanError as e:
            scan_requests_total.labels(status=e.metric_status).inc()
            raise
        except Exception as e:
            scan_requests_total.labels(status=InternalError.metric_status).inc()
            logger.exception("Scan failed unexpectedly", error_type=type(e).__name__)
            raise InternalError(e) from e

        scan_requests_total.labels(status="success").inc()
        logger.info(
            "Scan completed",
            model=response.model,
            total_processed=response.total_processed,
            duration_ms=int((time.perf_counter() - start_time) * 1000),
        )
        return response

    async def _scan(self, emails: Optional[Sequence[Email]], requested_model: str) -> ScanResponse:
        if not emails:
            raise InvalidRequest(NO_EMAILS_MESSAGE)

        health = await self.prober.probe()
        if not health.available:
            raise ServiceUnavailable()

        model = resolve_model(requested_model, health.models, self.default_model)
        if model != requested_model:
            model_fallbacks_total.inc()
            logger.info(
                "Requested model not installed, falling back",
                requested_model=requested_model,
                selected_model=model,
                available_models=health.models,
            )

        logger.info("Scan started", email_count=len(emails), model=model)
        results = await self.batch_classifier.classify_all(emails, model)

        return ScanResponse(results=results, model=model, total_processed=len(results))
