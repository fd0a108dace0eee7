"""
Unit tests for PromptBuilder.
"""

import json
from pathlib import Path

import pytest

from carbon_mail.llm.prompt_builder import PromptBuilder, classification_format_schema


class TestPromptBuilder:
    """Test suite for PromptBuilder."""

    def test_system_prompt_defines_task(self, prompt_builder):
        """Test that the system prompt carries taxonomy, bias and output shape."""
        prompt = prompt_builder.system_prompt

        assert "email-cleanup assistant" in prompt
        assert '"DELETE", "KEEP", "REVIEW"' in prompt
        assert "when in doubt, choose REVIEW" in prompt
        assert '{"decision":"DELETE","confidence":0.92' in prompt
        assert "{{" not in prompt

    def test_user_prompt_contains_email_json(self, prompt_builder, sample_email):
        prompt = prompt_builder.build_user_prompt(sample_email)

        assert prompt.startswith("Classify this email:\n")
        payload = json.loads(prompt.split("\n", 1)[1])
        assert payload == {
            "id": "msg_001",
            "from": {"name": "MegaDeals", "email": "promo@megadeals.example"},
            "subject": "48 HOURS ONLY: 70% off everything!",
            "body": "Don't miss our biggest sale of the year. Shop now and save big.",
            "labels": ["Promotions"],
            "date": "2026-09-02T08:15:00Z",
            "has_attachment": False,
            "read": False,
        }

    def test_user_prompt_excludes_size(self, prompt_builder, sample_email):
        assert "sizeKB" not in prompt_builder.build_user_prompt(sample_email)

    def test_chat_request(self, prompt_builder, sample_email):
        """Test two-message exchange with deterministic-leaning decoding."""
        request = prompt_builder.build_chat_request(sample_email, "llama3:8b")

        assert request.model == "llama3:8b"
        assert [m.role for m in request.messages] == ["system", "user"]
        assert request.messages[0].content == prompt_builder.system_prompt
        assert request.temperature == 0.1
        assert request.max_tokens == 150
        assert request.stream is False
        assert request.format_schema == classification_format_schema()

    def test_custom_decoding_parameters(self, sample_email):
        from carbon_mail.config import DEFAULT_PROMPT_TEMPLATES_DIR

        builder = PromptBuilder(Path(DEFAULT_PROMPT_TEMPLATES_DIR), temperature=0.0, max_tokens=64)
        request = builder.build_chat_request(sample_email, "mistral")

        assert request.temperature == 0.0
        assert request.max_tokens == 64

    def test_missing_templates_dir_raises(self, tmp_path):
        with pytest.raises(Exception):
            PromptBuilder(tmp_path / "does-not-exist")


def test_format_schema_shape():
    schema = classification_format_schema()

    assert schema["type"] == "object"
    assert schema["properties"]["decision"]["enum"] == ["DELETE", "KEEP", "REVIEW"]
    assert schema["properties"]["confidence"]["type"] == "number"
    assert schema["required"] == ["decision", "confidence", "reason"]
