"""
Single-email classification against the local model service.

Usage:
    classifier = EmailClassifier(llm_client, prompt_builder)
    classification = await classifier.classify_one(email, "mistral")
"""

import structlog

from carbon_mail.llm.base_client import BaseLLMClient
from carbon_mail.llm.prompt_builder import PromptBuilder
from carbon_mail.llm.response_parser import parse_classification
from carbon_mail.models.input_models import Email
from carbon_mail.models.output_models import Classification

logger = structlog.get_logger(__name__)


class EmailClassifier:
    """
    Classify one email with one chat call.

    Only transport and service problems fail a call (ModelServiceError);
    malformed model content is absorbed by the response parser.

    Attributes:
        llm_client: Chat client for the local model service
        prompt_builder: Builds the system + user turns and format schema
    """

    def __init__(self, llm_client: BaseLLMClient, prompt_builder: PromptBuilder):
        self.llm_client = llm_client
        self.prompt_builder = prompt_builder

    async def classify_one(self, email: Email, model_name: str) -> Classification:
        """
        Classify a single email.

        Args:
            email: Email to classify
            model_name: Resolved model name

        Returns:
            Parsed Classification (REVIEW/0.5 when the model text is unusable)

        Raises:
            ModelServiceError: Transport failure, timeout, non-2xx status,
                unreadable body or service-level error field
        """
        request = self.prompt_builder.build_chat_request(email, model_name)
        response = await self.llm_client.chat(request)
        classification = parse_classification(response.content)

        logger.debug(
            "Email classified",
            email_id=email.id,
            model=model_name,
            decision=classification.decision.value,
            confidence=classification.confidence,
            latency_ms=response.latency_ms,
        )
        return classification
