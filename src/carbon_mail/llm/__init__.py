"""
LLM client abstraction and implementations.

Components:
- BaseLLMClient: Abstract base class for chat clients
- OllamaClient: Implementation for the local Ollama server
- HealthProber: Availability and installed-models probe
- PromptBuilder: Constructs chat requests from an Email
- response_parser: Total parser from model text to Classification
- exceptions: Model service exceptions
"""

from carbon_mail.llm.base_client import BaseLLMClient
from carbon_mail.llm.exceptions import (
    ModelConnectionError,
    ModelGenerationError,
    ModelServiceError,
    ModelTimeoutError,
)
from carbon_mail.llm.health_prober import HealthProber
from carbon_mail.llm.ollama_client import OllamaClient
from carbon_mail.llm.prompt_builder import PromptBuilder
from carbon_mail.llm.response_parser import parse_classification

__all__ = [
    "BaseLLMClient",
    "OllamaClient",
    "HealthProber",
    "PromptBuilder",
    "parse_classification",
    "ModelServiceError",
    "ModelConnectionError",
    "ModelTimeoutError",
    "ModelGenerationError",
]
