"""
Availability probe for the local Ollama service.

Asks GET /api/tags for the installed models. The probe never raises: any
failure collapses to "unavailable, no models" so callers can branch on a
plain value.
"""

from typing import Optional

import httpx
import structlog

from carbon_mail.models.output_models import HealthStatus
from carbon_mail.monitoring.metrics import health_probes_total

logger = structlog.get_logger(__name__)


class HealthProber:
    """Query the model-listing endpoint with a short timeout."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 3.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def probe(self) -> HealthStatus:
        """
        Check whether Ollama is reachable and list its models.

        Returns:
            HealthStatus(available=True, models=[...]) on a 2xx answer (an
            empty list means the service runs but no model was pulled),
            HealthStatus(available=False, models=[]) otherwise.
        """
        status = await self._probe()
        health_probes_total.labels(available=str(status.available).lower()).inc()
        return status

    async def _probe(self) -> HealthStatus:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get("/api/tags")
        except httpx.TimeoutException:
            logger.warning("Ollama health probe timed out", timeout=self.timeout)
            return HealthStatus.unavailable()
        except httpx.HTTPError as e:
            logger.warning("Ollama unreachable", error=str(e), error_type=type(e).__name__)
            return HealthStatus.unavailable()

        if response.is_error:
            logger.warning("Ollama returned non-success status", status_code=response.status_code)
            return HealthStatus.unavailable()

        try:
            data = response.json()
        except ValueError:
            logger.warning("Ollama returned unreadable model list")
            return HealthStatus.unavailable()

        if not isinstance(data, dict):
            logger.warning("Ollama returned unexpected model list", body_type=type(data).__name__)
            return HealthStatus.unavailable()

        entries = data.get("models")
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            logger.warning("Ollama returned unexpected model list", models_type=type(entries).__name__)
            return HealthStatus.unavailable()

        models = [
            entry["name"]
            for entry in entries
            if isinstance(entry, dict) and isinstance(entry.get("name"), str)
        ]
        logger.debug("Ollama available", model_count=len(models), models=models)
        return HealthStatus(available=True, models=models)
