"""
Unit tests for the model response parser.
"""

import pytest

from carbon_mail.llm.response_parser import (
    INVALID_DECISION_REASON,
    MISSING_REASON,
    UNPARSABLE_REASON,
    coerce_confidence,
    coerce_reason,
    extract_json_object,
    parse_classification,
)
from carbon_mail.models.enums import DecisionEnum
from carbon_mail.models.output_models import Classification


def assert_fallback(result: Classification, reason: str):
    assert result.decision == DecisionEnum.REVIEW
    assert result.confidence == 0.5
    assert result.reason == reason


class TestParseClassification:
    """Test suite for parse_classification."""

    def test_well_formed_payload(self):
        """Test that a clean answer parses to exactly that decision and confidence."""
        text = '{"decision":"DELETE","confidence":0.92,"reason":"Promotional email with no personal relevance."}'
        result = parse_classification(text)

        assert result.decision == DecisionEnum.DELETE
        assert result.confidence == 0.92
        assert result.reason == "Promotional email with no personal relevance."

    def test_json_wrapped_in_prose_and_markdown(self):
        """Test that the first JSON object is extracted from surrounding text."""
        text = 'Here you go:\n```json\n{"decision": "keep", "confidence": 0.7, "reason": "Bank statement."}\n```'
        result = parse_classification(text)

        assert result.decision == DecisionEnum.KEEP
        assert result.confidence == 0.7
        assert result.reason == "Bank statement."

    def test_lowercase_decision_is_uppercased(self):
        result = parse_classification('{"decision": "review", "confidence": 0.4, "reason": "Unsure."}')
        assert result.decision == DecisionEnum.REVIEW
        assert result.confidence == 0.4

    @pytest.mark.parametrize("text", ["", "   ", "DELETE", "I think you should delete it."])
    def test_no_json_object(self, text):
        """Test that text without braces falls back to REVIEW."""
        assert_fallback(parse_classification(text), UNPARSABLE_REASON)

    def test_malformed_json(self):
        assert_fallback(parse_classification('{"decision": DELETE, confidence: }'), UNPARSABLE_REASON)

    def test_unterminated_object(self):
        assert_fallback(parse_classification('{"decision": "DELETE", "confidence": 0.9'), UNPARSABLE_REASON)

    def test_none_input(self):
        assert_fallback(parse_classification(None), UNPARSABLE_REASON)

    @pytest.mark.parametrize("decision", ["MAYBE", "ARCHIVE", "", "delete it"])
    def test_invalid_decision(self, decision):
        """Test that unknown decisions map to the invalid-decision fallback."""
        text = f'{{"decision": "{decision}", "confidence": 0.99, "reason": "x"}}'
        assert_fallback(parse_classification(text), INVALID_DECISION_REASON)

    @pytest.mark.parametrize("decision", ["1", "true", '["DELETE"]'])
    def test_non_string_decision(self, decision):
        """Test that a decision of the wrong type reads as an unparsable answer."""
        text = '{"decision": ' + decision + ', "confidence": 0.9, "reason": "x"}'
        assert_fallback(parse_classification(text), UNPARSABLE_REASON)

    def test_missing_decision_defaults_to_review(self):
        """Test that an absent decision is REVIEW, keeping the model's confidence."""
        result = parse_classification('{"confidence": 0.3, "reason": "Not sure."}')

        assert result.decision == DecisionEnum.REVIEW
        assert result.confidence == 0.3
        assert result.reason == "Not sure."

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1.5", 1.0),
            ("-3", 0.0),
            ("0", 0.0),
            ("1", 1.0),
            ('"0.75"', 0.75),
            ('"high"', 0.5),
            ("null", 0.5),
            ("true", 0.5),
            ("[0.9]", 0.5),
            ("1e999", 1.0),
        ],
    )
    def test_confidence_coercion_and_clamping(self, raw, expected):
        text = '{"decision": "KEEP", "confidence": ' + raw + ', "reason": "x"}'
        assert parse_classification(text).confidence == expected

    def test_missing_confidence_defaults(self):
        result = parse_classification('{"decision": "DELETE", "reason": "Spam."}')
        assert result.decision == DecisionEnum.DELETE
        assert result.confidence == 0.5

    @pytest.mark.parametrize(
        "raw", ['"reason": null', '"reason": ""', '"reason": 0', '"reason": false', '"other": 1']
    )
    def test_missing_reason_defaults(self, raw):
        text = '{"decision": "KEEP", "confidence": 0.6, ' + raw + '}'
        assert parse_classification(text).reason == MISSING_REASON

    def test_non_string_reason_is_stringified(self):
        result = parse_classification('{"decision": "KEEP", "confidence": 0.6, "reason": 42}')
        assert result.reason == "42"

    def test_long_reason_truncated_to_200(self):
        reason = "x" * 450
        result = parse_classification('{"decision": "DELETE", "confidence": 0.9, "reason": "' + reason + '"}')

        assert result.decision == DecisionEnum.DELETE
        assert len(result.reason) == 200

    def test_reason_at_limit_untouched(self):
        reason = "y" * 200
        result = parse_classification('{"decision": "KEEP", "confidence": 0.9, "reason": "' + reason + '"}')
        assert result.reason == reason

    def test_json_array_is_not_an_object(self):
        assert_fallback(parse_classification('[1, 2, 3]'), UNPARSABLE_REASON)

    def test_first_object_wins(self):
        text = '{"decision": "KEEP", "confidence": 0.8, "reason": "a"} {"decision": "DELETE"}'
        assert parse_classification(text).decision == DecisionEnum.KEEP

    def test_nested_object_stops_at_first_closing_brace(self):
        """Test that only the first "{...}" span is considered (nested objects are not supported)."""
        text = '{"meta": {"x": 1}, "decision": "DELETE"}'
        assert_fallback(parse_classification(text), UNPARSABLE_REASON)

    @pytest.mark.parametrize(
        "text",
        [
            "{}",
            "{{}}",
            "}{",
            '{"decision": "DELETE", "confidence": NaN}',
            '{"decision": "KEEP", "confidence": Infinity, "reason": "x"}',
            '{"decision": "KEEP", "confidence": -Infinity, "reason": "x"}',
            '{"decision": "\\u0000"}',
            "{" + '"a":' * 50,
            '{"decision": "KEEP", "confidence": ' + "9" * 400 + "}",
            "\x00\x01{\x02}",
        ],
    )
    def test_never_raises_and_output_is_well_formed(self, text):
        """Test that adversarial input always yields a valid Classification."""
        result = parse_classification(text)

        assert result.decision in set(DecisionEnum)
        assert 0.0 <= result.confidence <= 1.0
        assert len(result.reason) <= 200


class TestHelpers:
    """Test suite for parser helpers."""

    def test_extract_json_object(self):
        assert extract_json_object('noise {"a": 1} tail') == '{"a": 1}'
        assert extract_json_object("no braces") is None

    def test_extract_spans_newlines(self):
        assert extract_json_object('{\n  "a": 1\n}') == '{\n  "a": 1\n}'

    @pytest.mark.parametrize(
        "value, expected",
        [(0.25, 0.25), (2, 1.0), (-0.1, 0.0), (" 0.5 ", 0.5), ("abc", 0.5), (None, 0.5), (False, 0.5), ({}, 0.5)],
    )
    def test_coerce_confidence(self, value, expected):
        assert coerce_confidence(value) == expected

    def test_coerce_confidence_huge_integer(self):
        assert coerce_confidence(10 ** 400) == 1.0
        assert coerce_confidence(-(10 ** 400)) == 0.0

    @pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
    def test_coerce_reason_falsy_values_are_missing(self, value):
        assert coerce_reason(value) == MISSING_REASON

    @pytest.mark.parametrize("value, expected", [("Spam.", "Spam."), (42, "42"), (True, "True")])
    def test_coerce_reason_keeps_other_values(self, value, expected):
        assert coerce_reason(value) == expected
