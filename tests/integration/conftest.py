"""Integration test fixtures.

The API tests run the real stack (service, batch classifier, Ollama client,
health prober) against an in-process fake Ollama built on
httpx.MockTransport. The live tests are skipped unless a local Ollama is
reachable.
"""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from carbon_mail.api.dependencies import get_scan_service
from carbon_mail.classifier.batch_classifier import BatchClassifier
from carbon_mail.classifier.email_classifier import EmailClassifier
from carbon_mail.llm.health_prober import HealthProber
from carbon_mail.llm.ollama_client import OllamaClient
from carbon_mail.main import app
from carbon_mail.service.scan_service import ScanService


class FakeOllama:
    """Programmable stand-in for the Ollama HTTP API.

    Attributes:
        available: When False every request fails to connect
        models: Names returned by GET /api/tags
        answer: Assistant text returned by POST /api/chat
        failing_ids: Email ids whose chat call fails to connect
        calls: Every request seen, for assertions
    """

    def __init__(self, models=None, answer=None):
        self.available = True
        self.models = ["llama3:8b"] if models is None else models
        self.answer = answer or '{"decision":"DELETE","confidence":0.92,"reason":"Promotional email."}'
        self.failing_ids: set[str] = set()
        self.calls: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if not self.available:
            raise httpx.ConnectError("Connection refused", request=request)

        if request.url.path == "/api/tags":
            return httpx.Response(200, json={"models": [{"name": name} for name in self.models]})

        if request.url.path == "/api/chat":
            body = json.loads(request.content)
            user_prompt = body["messages"][-1]["content"]
            email = json.loads(user_prompt.split("\n", 1)[1])
            if email["id"] in self.failing_ids:
                raise httpx.ConnectError("Connection reset", request=request)
            return httpx.Response(
                200,
                json={
                    "model": body["model"],
                    "message": {"role": "assistant", "content": self.answer},
                    "done": True,
                },
            )

        return httpx.Response(404, text="not found")

    @property
    def chat_calls(self) -> list[httpx.Request]:
        return [c for c in self.calls if c.url.path == "/api/chat"]


@pytest.fixture
def fake_ollama() -> FakeOllama:
    return FakeOllama()


@pytest.fixture
def client(fake_ollama, prompt_builder):
    """TestClient whose scan service talks to the fake Ollama."""
    transport = httpx.MockTransport(fake_ollama)

    def override_scan_service() -> ScanService:
        llm_client = OllamaClient(base_url="http://ollama.test", timeout=5.0, transport=transport)
        return ScanService(
            prober=HealthProber(base_url="http://ollama.test", transport=transport),
            batch_classifier=BatchClassifier(EmailClassifier(llm_client, prompt_builder), batch_size=5),
            default_model="mistral",
        )

    app.dependency_overrides[get_scan_service] = override_scan_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def check_ollama():
    """Check if Ollama is available at localhost:11434.

    Skips tests if Ollama is not reachable or has no model installed.
    """
    try:
        response = httpx.get("http://localhost:11434/api/tags", timeout=5)
        if response.status_code != 200:
            pytest.skip("Ollama not available (non-200 status)")
        models = [m["name"] for m in response.json().get("models", [])]
    except Exception as e:
        pytest.skip(f"Ollama not available: {e}")
    if not models:
        pytest.skip("Ollama has no models installed")
    return models


@pytest.fixture
def real_ollama_client(check_ollama):
    """Real OllamaClient instance for live tests."""
    return OllamaClient(base_url="http://localhost:11434", timeout=60.0)
