"""Tests for parsing the model's six-field JSON response."""

import json

import pytest

from estimation_hub.errors import ContractViolationError
from estimation_hub.llm.contract import parse_extraction_response, strip_code_fences
from estimation_hub.models.extraction import EXTRACTION_FIELDS, ExtractionResult


def test_plain_json_parses(extraction_payload: dict):
    result = parse_extraction_response(json.dumps(extraction_payload))
    assert isinstance(result, ExtractionResult)
    assert result.fund_name.value == "ABC Fund"
    assert result.items.value is None


@pytest.mark.parametrize(
    "template",
    [
        "```json\n{body}\n```",
        "```\n{body}\n```",
        "```JSON\n{body}\n```\n",
        "  ```json{body}```  ",
    ],
)
def test_fenced_json_matches_unwrapped(extraction_payload: dict, template: str):
    """Fence-wrapped responses yield the same object as the bare JSON."""
    body = json.dumps(extraction_payload, indent=2)
    fenced = parse_extraction_response(template.format(body=body))
    plain = parse_extraction_response(body)
    assert fenced == plain


@pytest.mark.parametrize("missing", EXTRACTION_FIELDS)
def test_missing_field_rejected(extraction_payload: dict, missing: str):
    """Any one of the six fields missing fails the whole response."""
    del extraction_payload[missing]
    raw = json.dumps(extraction_payload)
    with pytest.raises(ContractViolationError) as exc_info:
        parse_extraction_response(raw)
    assert exc_info.value.payload == raw


@pytest.mark.parametrize(
    "field_value",
    [
        {"value": "ABC Fund"},  # no confidence
        {"confidence": 0.9},  # no value
        {"value": "ABC Fund", "confidence": 1.5},  # out of range
        {"value": "ABC Fund", "confidence": -0.1},
        {"value": 42, "confidence": 0.9},  # non-string value
        "ABC Fund",  # not an object
    ],
)
def test_malformed_field_rejected(extraction_payload: dict, field_value):
    extraction_payload["fund_name"] = field_value
    with pytest.raises(ContractViolationError):
        parse_extraction_response(json.dumps(extraction_payload))


@pytest.mark.parametrize(
    "raw",
    [
        "",
        None,
        "```json\n```",
        "Sorry, I cannot help with that.",
        '{"fund_name": {"value": "ABC", "confidence": 0.9}',  # truncated
        "[1, 2, 3]",
    ],
)
def test_unparseable_response_rejected(raw):
    with pytest.raises(ContractViolationError):
        parse_extraction_response(raw)


def test_violation_carries_raw_payload_as_details():
    raw = "not json at all"
    with pytest.raises(ContractViolationError) as exc_info:
        parse_extraction_response(raw)
    assert exc_info.value.details == raw


def test_extra_keys_are_ignored(extraction_payload: dict):
    extraction_payload["notes"] = "model commentary"
    result = parse_extraction_response(json.dumps(extraction_payload))
    assert result.le_estimation.value == "1h for logic"


def test_strip_code_fences():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('{"a": 1}') == '{"a": 1}'


def test_fence_inside_value_is_preserved(extraction_payload: dict):
    """Only the wrapping fence is removed; backticks inside a value survive."""
    extraction_payload["items"] = {"value": "run ```make test``` first", "confidence": 0.6}
    raw = "```json\n" + json.dumps(extraction_payload) + "\n```"

    result = parse_extraction_response(raw)

    assert result.items.value == "run ```make test``` first"


def test_strip_code_fences_only_at_edges():
    assert strip_code_fences('{"a": "```"}') == '{"a": "```"}'
    assert strip_code_fences('```\n{"a": "x ``` y"}\n```\n') == '{"a": "x ``` y"}'
