"""
Ollama client implementation for chat inference.

Communicates with the Ollama API using a pooled httpx AsyncClient. Supports
structured output via JSON Schema (``format`` parameter). No retries: a
failed call is reported once and the caller decides how to degrade.
"""

import time
from typing import Optional

import httpx
import structlog

from carbon_mail.llm.base_client import BaseLLMClient
from carbon_mail.llm.exceptions import (
    ModelConnectionError,
    ModelGenerationError,
    ModelTimeoutError,
)
from carbon_mail.models.llm_models import LLMChatRequest, LLMChatResponse
from carbon_mail.monitoring.metrics import llm_latency_seconds


logger = structlog.get_logger(__name__)

ERROR_SNIPPET_LENGTH = 200


class OllamaClient(BaseLLMClient):
    """
    Ollama-specific chat client using httpx for async HTTP communication.

    API Endpoints:
    - POST /api/chat: Chat completion with optional format constraint
    """

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        timeout: float = 60.0,
        connection_limits: Optional[httpx.Limits] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Ollama client.

        Args:
            base_url: Ollama server URL
            timeout: Per-call timeout in seconds
            connection_limits: httpx pool limits (default: 10 max connections)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        super().__init__(base_url, timeout)

        if connection_limits is None:
            connection_limits = httpx.Limits(
                max_keepalive_connections=5,
                max_connections=10,
                keepalive_expiry=30.0
            )

        self._client: Optional[httpx.AsyncClient] = None
        self._connection_limits = connection_limits
        self._transport = transport

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                limits=self._connection_limits,
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    @staticmethod
    def build_payload(request: LLMChatRequest) -> dict:
        """
        Build the POST /api/chat body.

        {
            "model": "mistral",
            "messages": [{"role": "system", ...}, {"role": "user", ...}],
            "stream": false,
            "format": <JSON Schema or "json">,
            "options": {"temperature": 0.1, "num_predict": 150}
        }
        """
        return {
            "model": request.model,
            "messages": [m.model_dump() for m in request.messages],
            "stream": request.stream,
            "format": request.format_schema or "json",
            "options": {
                "temperature": request.temperature,
                "num_predict": request.max_tokens,
            },
        }

    async def chat(self, request: LLMChatRequest) -> LLMChatResponse:
        """
        Run a chat completion using the Ollama API.

        Response on success:
        {
            "model": "mistral",
            "message": {"role": "assistant", "content": "..."},
            "done": true,
            "prompt_eval_count": 212,
            "eval_count": 31
        }
        """
        payload = self.build_payload(request)
        start_time = time.perf_counter()

        logger.debug(
            "Sending chat request to Ollama",
            model=request.model,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            has_schema=bool(request.format_schema),
        )

        try:
            client = await self._get_client()
            response = await client.post("/api/chat", json=payload, timeout=self.timeout)
        except httpx.TimeoutException as e:
            self._observe(request.model, start_time, success=False)
            logger.warning("Ollama chat timeout", model=request.model, timeout=self.timeout)
            raise ModelTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"model": request.model, "timeout": self.timeout},
            ) from e
        except httpx.RequestError as e:
            self._observe(request.model, start_time, success=False)
            logger.warning("Ollama network error", model=request.model, error=str(e))
            raise ModelConnectionError(
                f"Network error: {e}",
                details={"model": request.model, "error_type": type(e).__name__},
            ) from e

        if response.is_error:
            self._observe(request.model, start_time, success=False)
            error_text = response.text
            logger.error(
                "Ollama HTTP error",
                model=request.model,
                status_code=response.status_code,
                error_text=error_text,
            )
            raise ModelGenerationError(
                f"Ollama API error: {response.status_code} {error_text}".rstrip(),
                details={"status": response.status_code, "error": error_text},
            )

        try:
            data = response.json()
        except ValueError as e:
            self._observe(request.model, start_time, success=False)
            snippet = response.text[:ERROR_SNIPPET_LENGTH]
            raise ModelGenerationError(
                f"Invalid JSON from Ollama: {snippet}",
                details={"content_snippet": snippet},
            ) from e

        if not isinstance(data, dict):
            self._observe(request.model, start_time, success=False)
            raise ModelGenerationError(
                f"Unexpected Ollama response type: {type(data).__name__}",
                details={"content_snippet": response.text[:ERROR_SNIPPET_LENGTH]},
            )

        if data.get("error"):
            self._observe(request.model, start_time, success=False)
            raise ModelGenerationError(
                f"Ollama error: {data['error']}",
                details={"error": data["error"]},
            )

        message = data.get("message")
        content = message.get("content") if isinstance(message, dict) else None
        latency_ms = self._observe(request.model, start_time, success=True)

        logger.debug(
            "Ollama chat successful",
            model=data.get("model", request.model),
            latency_ms=latency_ms,
            prompt_tokens=data.get("prompt_eval_count"),
            completion_tokens=data.get("eval_count"),
        )

        return LLMChatResponse(
            content=content.strip() if isinstance(content, str) else "",
            model_version=str(data.get("model") or request.model),
            latency_ms=latency_ms,
            done=bool(data.get("done", True)),
            prompt_tokens=data.get("prompt_eval_count"),
            completion_tokens=data.get("eval_count"),
        )

    @staticmethod
    def _observe(model: str, start_time: float, success: bool) -> int:
        """Record latency and return it in milliseconds."""
        elapsed = time.perf_counter() - start_time
        llm_latency_seconds.labels(
            model=model, success=str(success).lower()
        ).observe(elapsed)
        return int(elapsed * 1000)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed Ollama client connection")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
