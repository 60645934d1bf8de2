"""Tests for token usage extraction, cost calculation, and structured logging."""

from unittest.mock import MagicMock, patch

from estimation_hub.cost import (
    INPUT_PRICE_PER_TOKEN,
    OUTPUT_PRICE_PER_TOKEN,
    TokenUsage,
    extract_usage,
    log_usage,
)


def _make_mock_response(prompt_tokens: int | None, completion_tokens: int | None) -> MagicMock:
    """Build a mock Gemini response with usage_metadata."""
    metadata = MagicMock()
    metadata.prompt_token_count = prompt_tokens
    metadata.candidates_token_count = completion_tokens
    response = MagicMock()
    response.usage_metadata = metadata
    return response


def test_extract_usage_normal():
    """Normal response with token counts produces correct TokenUsage."""
    response = _make_mock_response(prompt_tokens=100, completion_tokens=50)

    usage = extract_usage(response)

    assert usage.prompt_tokens == 100
    assert usage.completion_tokens == 50
    assert usage.total_tokens == 150
    expected_cost = (100 * INPUT_PRICE_PER_TOKEN) + (50 * OUTPUT_PRICE_PER_TOKEN)
    assert abs(usage.cost_usd - expected_cost) < 1e-10


def test_extract_usage_none_counts():
    """Response with None token counts defaults to 0 tokens and $0 cost."""
    response = _make_mock_response(prompt_tokens=None, completion_tokens=None)

    usage = extract_usage(response)

    assert usage.total_tokens == 0
    assert usage.cost_usd == 0.0


def test_extract_usage_cost_precision():
    """1M input + 1M output tokens cost $0.30 + $2.50."""
    response = _make_mock_response(prompt_tokens=1_000_000, completion_tokens=1_000_000)

    usage = extract_usage(response)

    assert abs(usage.cost_usd - 2.80) < 1e-10


def test_extract_usage_no_metadata():
    """Response with no usage_metadata attribute defaults to 0 tokens."""
    response = MagicMock(spec=[])

    usage = extract_usage(response)

    assert usage.prompt_tokens == 0
    assert usage.completion_tokens == 0
    assert usage.cost_usd == 0.0


def test_log_usage_structured_output():
    """log_usage emits INFO log with structured extra fields."""
    usage = TokenUsage(
        prompt_tokens=100,
        completion_tokens=50,
        total_tokens=150,
        cost_usd=0.000155,
    )

    with patch("estimation_hub.cost.logger") as mock_logger:
        log_usage("gemini-2.5-flash", 240, usage)

    mock_logger.info.assert_called_once()
    call_args = mock_logger.info.call_args
    assert call_args[0][0] == "Gemini extraction complete"
    extra = call_args[1]["extra"]
    assert extra["model"] == "gemini-2.5-flash"
    assert extra["thread_chars"] == 240
    assert extra["total_tokens"] == 150
    assert extra["cost_usd"] == 0.000155
