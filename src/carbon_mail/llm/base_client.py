"""
Abstract base client for chat-completion inference.

Defines the interface the email classifier relies on, so the Ollama backend
can be replaced (or faked in tests) without touching the classifier.
"""

from abc import ABC, abstractmethod

import structlog

from carbon_mail.models.llm_models import LLMChatRequest, LLMChatResponse


logger = structlog.get_logger(__name__)


class BaseLLMClient(ABC):
    """
    Abstract base class for chat-completion clients.

    Responsibilities:
    - Send one chat request to the inference server with a bounded timeout
    - Return the raw assistant text plus metadata
    - Map transport and server failures to ModelServiceError subclasses

    Does NOT handle:
    - Prompt construction (PromptBuilder)
    - Parsing the assistant text (response_parser)
    - Retries (there are none; failures degrade to REVIEW upstream)
    """

    def __init__(self, base_url: str, timeout: float = 60.0):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the inference server (e.g., http://localhost:11434)
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

        logger.info(
            "Initialized LLM client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
        )

    @abstractmethod
    async def chat(self, request: LLMChatRequest) -> LLMChatResponse:
        """
        Run one non-streaming chat completion.

        Args:
            request: Standardized chat request

        Returns:
            LLMChatResponse with the assistant text

        Raises:
            ModelConnectionError: Service unreachable
            ModelTimeoutError: Request exceeded the timeout
            ModelGenerationError: Non-2xx status, unreadable body or error field
        """

    async def close(self):
        """
        Close client connections and cleanup resources.

        Default implementation does nothing.
        """
        logger.debug("Closing LLM client", client_class=self.__class__.__name__)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
