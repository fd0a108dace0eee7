"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without a running Ollama server.
"""

from unittest.mock import AsyncMock

import pytest

from carbon_mail.llm.base_client import BaseLLMClient
from carbon_mail.models.llm_models import LLMChatResponse
from carbon_mail.models.output_models import HealthStatus


def _chat_response(content: str, model: str = "mistral") -> LLMChatResponse:
    return LLMChatResponse(content=content, model_version=model, latency_ms=120)


@pytest.fixture
def make_chat_response():
    """Factory for LLMChatResponse carrying the given assistant text."""
    return _chat_response


@pytest.fixture
def mock_llm_client():
    """Mock BaseLLMClient answering DELETE/0.92 to every chat call."""
    mock = AsyncMock(spec=BaseLLMClient)
    mock.chat = AsyncMock(
        return_value=_chat_response(
            '{"decision": "DELETE", "confidence": 0.92, "reason": "Promotional email."}'
        )
    )
    return mock


@pytest.fixture
def mock_prober():
    """Mock HealthProber reporting llama3:8b as the only installed model."""
    mock = AsyncMock()
    mock.probe = AsyncMock(return_value=HealthStatus(available=True, models=["llama3:8b"]))
    return mock


@pytest.fixture
def mock_batch_classifier():
    """Mock BatchClassifier returning no results unless configured."""
    mock = AsyncMock()
    mock.classify_all = AsyncMock(return_value=[])
    return mock
