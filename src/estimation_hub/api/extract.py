"""Interactive extraction endpoint: permalink or pasted text -> pre-filled fields."""

import logging

from fastapi import APIRouter

from estimation_hub.llm import extract_fields
from estimation_hub.models.extraction import ExtractionRequest, ExtractionResponse
from estimation_hub.slack.threads import fetch_thread_from_permalink, format_thread

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["extract"])


@router.post("/extract", response_model=ExtractionResponse)
async def extract(request: ExtractionRequest) -> ExtractionResponse:
    """Extract estimation fields from a Slack thread.

    A non-empty permalink takes precedence over pasted thread text: the
    thread is fetched from Slack and formatted before extraction. The
    permalink is echoed back as slack_link for the draft record.
    """
    permalink = (request.permalink or "").strip()
    thread_text = request.thread_text or ""

    if permalink:
        reference, messages = await fetch_thread_from_permalink(permalink)
        thread_text = format_thread(messages)
        logger.info(
            "Extracting from permalink thread %s in %s",
            reference.thread_anchor_ts,
            reference.channel_id,
        )

    result = await extract_fields(thread_text)
    return ExtractionResponse(**result.model_dump(), slack_link=permalink or None)
