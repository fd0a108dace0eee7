"""
FastAPI dependency injection for Carbon Mail.

Provides singleton instances of expensive resources (pooled Ollama client,
prompt builder) and factory functions for the request-scoped scan service.
Tests replace any of these through ``app.dependency_overrides``.
"""

from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from carbon_mail.classifier.batch_classifier import BatchClassifier
from carbon_mail.classifier.email_classifier import EmailClassifier
from carbon_mail.config import Settings, settings
from carbon_mail.llm.base_client import BaseLLMClient
from carbon_mail.llm.health_prober import HealthProber
from carbon_mail.llm.ollama_client import OllamaClient
from carbon_mail.llm.prompt_builder import PromptBuilder
from carbon_mail.service.scan_service import ScanService


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_llm_client() -> BaseLLMClient:
    """
    Get singleton Ollama client with connection pooling.

    The client keeps one httpx AsyncClient for the lifetime of the app and
    is closed on shutdown.
    """
    config = get_settings()
    return OllamaClient(
        base_url=config.OLLAMA_BASE_URL,
        timeout=config.OLLAMA_TIMEOUT,
    )


@lru_cache()
def get_prompt_builder() -> PromptBuilder:
    """
    Get singleton prompt builder.

    Loads Jinja2 templates once and reuses them across requests.
    """
    config = get_settings()
    return PromptBuilder(
        templates_dir=Path(config.PROMPT_TEMPLATES_DIR),
        temperature=config.LLM_TEMPERATURE,
        max_tokens=config.LLM_MAX_TOKENS,
    )


def get_health_prober(config: Settings = Depends(get_settings)) -> HealthProber:
    """Health prober (cheap, holds no connection)."""
    return HealthProber(
        base_url=config.OLLAMA_BASE_URL,
        timeout=config.HEALTH_TIMEOUT,
    )


def get_batch_classifier(
    llm_client: BaseLLMClient = Depends(get_llm_client),
    prompt_builder: PromptBuilder = Depends(get_prompt_builder),
    config: Settings = Depends(get_settings),
) -> BatchClassifier:
    """
    Create batch classifier with injected dependencies.

    Not cached: it is lightweight and stateless. Heavy resources (client,
    prompt builder) are singletons.
    """
    return BatchClassifier(
        EmailClassifier(llm_client, prompt_builder),
        batch_size=config.BATCH_SIZE,
    )


def get_scan_service(
    prober: HealthProber = Depends(get_health_prober),
    batch_classifier: BatchClassifier = Depends(get_batch_classifier),
    config: Settings = Depends(get_settings),
) -> ScanService:
    """Create the request-scoped scan service."""
    return ScanService(
        prober=prober,
        batch_classifier=batch_classifier,
        default_model=config.OLLAMA_MODEL,
    )
