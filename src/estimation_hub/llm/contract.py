"""Parsing and validation of the model's six-field JSON response.

The model is a non-deterministic text producer, so its output is validated
against ExtractionResult as a whole: either every field parses or the
response is rejected with ContractViolationError carrying the raw text.
"""

import json
import logging
import re

from pydantic import ValidationError

from estimation_hub.errors import ContractViolationError
from estimation_hub.models.extraction import ExtractionResult

logger = logging.getLogger(__name__)

# Markdown fence markers wrapping the whole response; fences inside values stay
_OPENING_FENCE = re.compile(r"^\s*```(?:json|JSON)?[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```\s*\Z")


def strip_code_fences(text: str) -> str:
    """Remove a leading and trailing Markdown code fence and surrounding whitespace."""
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_extraction_response(text: str | None) -> ExtractionResult:
    """Decode a model response into an ExtractionResult.

    Raises:
        ContractViolationError: Empty response, invalid JSON, a non-object
            top level, or any of the six fields missing or malformed.
    """
    raw = text or ""
    cleaned = strip_code_fences(raw)
    if not cleaned:
        raise ContractViolationError("AI response was empty", payload=raw)

    try:
        data = json.loads(cleaned)
    except ValueError as exc:
        logger.error("Failed to decode AI response as JSON: %s", exc)
        raise ContractViolationError(f"AI response is not valid JSON: {exc}", payload=raw) from exc

    if not isinstance(data, dict):
        raise ContractViolationError("AI response is not a JSON object", payload=raw)

    try:
        return ExtractionResult.model_validate(data)
    except ValidationError as exc:
        logger.error(
            "AI response failed schema validation",
            extra={"error_count": exc.error_count()},
        )
        raise ContractViolationError(
            f"AI response does not match the extraction contract: {exc}",
            payload=raw,
        ) from exc
