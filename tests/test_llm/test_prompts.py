"""Prompt template tests for build_extraction_prompt."""

from estimation_hub.llm.prompts import (
    SUBTASK_KEYWORDS,
    build_extraction_prompt,
    build_response_schema,
)
from estimation_hub.models.extraction import EXTRACTION_FIELDS


def test_prompt_embeds_thread_verbatim(sample_thread: str):
    prompt = build_extraction_prompt(sample_thread)
    assert sample_thread in prompt


def test_prompt_survives_braces_in_thread():
    """Thread text with JSON-like braces is inserted, not interpreted."""
    thread = 'Alice: config is {"a": 1} for {fund}'
    assert thread in build_extraction_prompt(thread)


def test_prompt_names_every_field():
    prompt = build_extraction_prompt("Alice: hello world")
    for name in EXTRACTION_FIELDS:
        assert f'"{name}"' in prompt


def test_prompt_contains_field_rules():
    prompt = build_extraction_prompt("Alice: hello world")
    assert "FIRST message" in prompt
    assert "Data Science" in prompt
    assert "Logic Engineering" in prompt
    assert "QA" in prompt
    assert "clickup.com" in prompt
    assert "never convert or normalize units" in prompt


def test_prompt_contains_confidence_rubric():
    prompt = build_extraction_prompt("Alice: hello world")
    assert "High (0.8-1.0)" in prompt
    assert "Medium (0.5-0.79)" in prompt
    assert "Low (0.0-0.49)" in prompt


def test_prompt_lists_subtask_keywords():
    prompt = build_extraction_prompt("Alice: hello world")
    for keyword in SUBTASK_KEYWORDS:
        assert keyword in prompt


def test_prompt_demands_json_only():
    prompt = build_extraction_prompt("Alice: hello world")
    assert prompt.rstrip().endswith("Return ONLY the JSON object, no additional text or explanation.")


def test_response_schema_lists_fields_in_order():
    schema = build_response_schema()
    positions = [schema.index(f'"{name}"') for name in EXTRACTION_FIELDS]
    assert positions == sorted(positions)
    assert schema.startswith("{") and schema.endswith("}")
