"""LLM extraction: thread text to a confidence-scored ExtractionResult via Gemini.

Public API:
    extract_fields(thread_text, client=None) -> ExtractionResult
        Sends the fixed extraction prompt to Gemini and validates the
        response against the six-field contract.
"""

from estimation_hub.llm.client import get_gemini_client, reset_client
from estimation_hub.llm.contract import parse_extraction_response, strip_code_fences
from estimation_hub.llm.extractor import extract_fields

__all__ = [
    "extract_fields",
    "get_gemini_client",
    "parse_extraction_response",
    "reset_client",
    "strip_code_fences",
]
