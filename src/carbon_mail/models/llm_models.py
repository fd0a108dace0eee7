"""
LLM-specific data models for the chat request/response cycle.

These models are internal to the LLM layer and describe the raw exchange with
the local model service. They are kept apart from the business models
(Classification) so the transport can change without touching the parser.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """One turn of a chat exchange."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str


class LLMChatRequest(BaseModel):
    """
    Internal request model for a chat completion.

    Built by PromptBuilder, sent by any BaseLLMClient implementation.
    """

    model_config = ConfigDict(frozen=True)

    model: str = Field(..., description="Model name/identifier (e.g., 'mistral')")
    messages: list[ChatMessage] = Field(..., min_length=1)
    temperature: float = Field(default=0.1, ge=0.0, le=2.0, description="Sampling temperature")
    max_tokens: int = Field(default=150, ge=1, description="Maximum tokens to generate")
    format_schema: Optional[dict[str, Any]] = Field(
        default=None,
        description="JSON Schema constraining the response (Ollama format parameter)",
    )
    stream: bool = Field(default=False, description="Always False: the parser needs the full text")


class LLMChatResponse(BaseModel):
    """Raw assistant text plus metadata for logging."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Assistant message text (may be empty or malformed)")
    model_version: str = Field(..., description="Model reported by the server")
    latency_ms: int = Field(..., ge=0)
    done: bool = Field(default=True)
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
