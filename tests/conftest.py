"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from carbon_mail.config import DEFAULT_PROMPT_TEMPLATES_DIR, Settings
from carbon_mail.llm.prompt_builder import PromptBuilder
from carbon_mail.models.enums import DecisionEnum
from carbon_mail.models.input_models import Email
from carbon_mail.models.output_models import Classification


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing."""
    return Settings(
        APP_NAME="Carbon Mail (Test)",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        OLLAMA_BASE_URL="http://ollama.test",
        OLLAMA_MODEL="mistral",
        OLLAMA_TIMEOUT=5.0,
        HEALTH_TIMEOUT=3.0,
        BATCH_SIZE=5,
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_email_data(fixtures_dir: Path) -> Dict[str, Any]:
    """Load sample email fixture as a wire-shaped dict."""
    with open(fixtures_dir / "sample_email.json") as f:
        return json.load(f)


@pytest.fixture
def sample_email(sample_email_data: Dict[str, Any]) -> Email:
    """Parsed Email instance from sample fixture."""
    return Email.model_validate(sample_email_data)


@pytest.fixture
def ollama_tags_data(fixtures_dir: Path) -> Dict[str, Any]:
    """GET /api/tags body listing llama3:8b and qwen2.5:7b."""
    with open(fixtures_dir / "ollama_tags_response.json") as f:
        return json.load(f)


@pytest.fixture
def ollama_chat_data(fixtures_dir: Path) -> Dict[str, Any]:
    """POST /api/chat body answering DELETE/0.92."""
    with open(fixtures_dir / "ollama_chat_response.json") as f:
        return json.load(f)


@pytest.fixture
def create_test_email():
    """Factory fixture to create Email with custom values.

    Usage:
        def test_something(create_test_email):
            email = create_test_email(email_id="e7", labels=["Spam"])
    """
    def _create(
        email_id: str = "test_email_001",
        subject: str = "Test Subject",
        body: str = "Test email body",
        labels: list[str] | None = None,
        size_kb: float = 10.0,
        read: bool = False,
    ) -> Email:
        return Email.model_validate({
            "id": email_id,
            "from": {"name": "Test Sender", "email": "sender@example.com"},
            "subject": subject,
            "body": body,
            "labels": labels if labels is not None else ["Primary"],
            "date": "2026-10-01T09:00:00Z",
            "read": read,
            "has_attachment": False,
            "sizeKB": size_kb,
        })

    return _create


@pytest.fixture
def create_test_emails(create_test_email):
    """Factory fixture for n emails with ids e00, e01, ..."""
    def _create(count: int) -> list[Email]:
        return [create_test_email(email_id=f"e{i:02d}") for i in range(count)]

    return _create


@pytest.fixture
def keep_classification() -> Classification:
    return Classification(decision=DecisionEnum.KEEP, confidence=0.8, reason="Personal email.")


@pytest.fixture
def prompt_builder() -> PromptBuilder:
    """PromptBuilder loading the packaged templates."""
    return PromptBuilder(templates_dir=Path(DEFAULT_PROMPT_TEMPLATES_DIR))
