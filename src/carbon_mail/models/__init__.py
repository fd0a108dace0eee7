"""
Pydantic data models for Carbon Mail.

Includes:
- Enums (DecisionEnum, PageEnum)
- Input models (Sender, Email, ScanRequest)
- Output models (Classification, ClassifiedEmail, HealthStatus, ScanResponse)
- LLM models (ChatMessage, LLMChatRequest, LLMChatResponse)
"""

from carbon_mail.models.enums import DecisionEnum, PageEnum
from carbon_mail.models.input_models import Email, ScanRequest, Sender
from carbon_mail.models.llm_models import ChatMessage, LLMChatRequest, LLMChatResponse
from carbon_mail.models.output_models import (
    Classification,
    ClassifiedEmail,
    HealthStatus,
    ScanResponse,
)

__all__ = [
    # Enums
    "DecisionEnum",
    "PageEnum",
    # Input models
    "Sender",
    "Email",
    "ScanRequest",
    # Output models
    "Classification",
    "ClassifiedEmail",
    "HealthStatus",
    "ScanResponse",
    # LLM models
    "ChatMessage",
    "LLMChatRequest",
    "LLMChatResponse",
]
