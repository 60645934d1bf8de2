"""Extraction engine: thread text -> ExtractionResult via Gemini.

Wires together the prompt, client, and contract modules. Each call is
independent: one prompt, one model call, no conversation memory, no retry.
Every Gemini or transport failure is translated into UpstreamTransportError.
"""

import logging

import aiohttp
import httpx
from google import genai
from google.genai import types
from google.genai.errors import APIError

from estimation_hub.cost import extract_usage, log_usage
from estimation_hub.errors import UpstreamTransportError, ValidationError
from estimation_hub.llm.client import get_gemini_client
from estimation_hub.llm.contract import parse_extraction_response
from estimation_hub.llm.prompts import GEMINI_MODEL, build_extraction_prompt
from estimation_hub.models.extraction import ExtractionResult

logger = logging.getLogger(__name__)

MIN_THREAD_LENGTH = 10


async def _call_gemini(client: genai.Client, prompt: str) -> object:
    """Send the extraction prompt to Gemini and return the raw response.

    Raises:
        UpstreamTransportError: On any API or network failure.
    """
    try:
        return await client.aio.models.generate_content(
            model=GEMINI_MODEL,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                temperature=0.2,
            ),
        )
    except APIError as exc:
        logger.error("Gemini API error during extraction", exc_info=True)
        raise UpstreamTransportError(f"Gemini request failed ({exc.code}): {exc.message}") from exc
    except (aiohttp.ClientError, httpx.HTTPError, OSError) as exc:
        logger.error("Transport failure calling Gemini", exc_info=True)
        raise UpstreamTransportError(f"Gemini request failed: {exc}") from exc


async def extract_fields(
    thread_text: str, client: genai.Client | None = None
) -> ExtractionResult:
    """Extract the six estimation fields from a conversation thread.

    Args:
        thread_text: Thread text, typically ``author: text`` blocks.
        client: Gemini client; defaults to the shared instance.

    Returns:
        A validated, confidence-annotated ExtractionResult.

    Raises:
        ValidationError: Thread text shorter than 10 characters.
        ConfigurationError: No Gemini API key configured.
        UpstreamTransportError: The model call failed.
        ContractViolationError: The response does not match the contract.
    """
    if not isinstance(thread_text, str) or len(thread_text) < MIN_THREAD_LENGTH:
        raise ValidationError(
            "Slack thread content is required and must be at least "
            f"{MIN_THREAD_LENGTH} characters long"
        )

    if client is None:
        client = get_gemini_client()

    prompt = build_extraction_prompt(thread_text)
    response = await _call_gemini(client, prompt)

    log_usage(GEMINI_MODEL, len(thread_text), extract_usage(response))

    result = parse_extraction_response(getattr(response, "text", None))
    low = result.low_confidence_fields()
    if low:
        logger.info("Low-confidence fields flagged for review: %s", ", ".join(low))
    return result
