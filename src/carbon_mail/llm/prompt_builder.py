"""
Prompt builder for classification requests.

Responsible for:
- Loading and rendering Jinja2 templates (system + user prompts)
- Serializing the email fields the model is allowed to see
- Constructing the complete LLMChatRequest with the Classification schema
"""

import json
from pathlib import Path
from typing import Any

import structlog
from jinja2 import Environment, FileSystemLoader

from carbon_mail.models.enums import DecisionEnum
from carbon_mail.models.input_models import Email
from carbon_mail.models.llm_models import ChatMessage, LLMChatRequest


logger = structlog.get_logger(__name__)

SYSTEM_TEMPLATE = "system_prompt.txt"
USER_TEMPLATE = "user_prompt_template.txt"

EXAMPLE_ANSWER = {
    "decision": "DELETE",
    "confidence": 0.92,
    "reason": "Promotional email with no personal or financial relevance.",
}


def classification_format_schema() -> dict[str, Any]:
    """JSON Schema passed as Ollama's ``format`` to constrain the answer."""
    return {
        "type": "object",
        "properties": {
            "decision": {"type": "string", "enum": DecisionEnum.values()},
            "confidence": {"type": "number"},
            "reason": {"type": "string"},
        },
        "required": ["decision", "confidence", "reason"],
    }


class PromptBuilder:
    """
    Build chat requests for single-email classification.

    The system prompt is rendered once at construction time: it is a constant
    instruction and only the user turn varies per email.
    """

    def __init__(
        self,
        templates_dir: Path,
        temperature: float = 0.1,
        max_tokens: int = 150,
    ):
        """
        Initialize prompt builder.

        Args:
            templates_dir: Directory containing the prompt templates
            temperature: Sampling temperature for every request
            max_tokens: Upper bound on generated tokens (Ollama num_predict)
        """
        self.templates_dir = Path(templates_dir)
        self.temperature = temperature
        self.max_tokens = max_tokens

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            autoescape=False  # Plain-text prompts, not HTML
        )

        try:
            self.user_template = self.jinja_env.get_template(USER_TEMPLATE)
            self.system_prompt = self.jinja_env.get_template(SYSTEM_TEMPLATE).render(
                example=json.dumps(EXAMPLE_ANSWER, separators=(",", ":")),
                decisions=DecisionEnum.values(),
            ).strip()
        except Exception as e:
            logger.error("Failed to load prompt templates", error=str(e), templates_dir=str(self.templates_dir))
            raise

        self.format_schema = classification_format_schema()

        logger.info(
            "PromptBuilder initialized",
            templates_dir=str(self.templates_dir),
            temperature=temperature,
            max_tokens=max_tokens,
        )

    def build_user_prompt(self, email: Email) -> str:
        """Render the user turn: the instruction line plus the email as JSON."""
        email_json = json.dumps(email.to_prompt_payload(), ensure_ascii=False)
        return self.user_template.render(email_json=email_json).strip()

    def build_chat_request(self, email: Email, model: str) -> LLMChatRequest:
        """
        Build the two-message chat request for one email.

        Args:
            email: Email to classify
            model: Resolved model name

        Returns:
            LLMChatRequest with system + user turns and the format schema
        """
        return LLMChatRequest(
            model=model,
            messages=[
                ChatMessage(role="system", content=self.system_prompt),
                ChatMessage(role="user", content=self.build_user_prompt(email)),
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            format_schema=self.format_schema,
            stream=False,
        )
