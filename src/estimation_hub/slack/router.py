"""Slack webhook router with signature verification."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from estimation_hub.slack.handlers import handle_slack_event
from estimation_hub.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    payload: dict = Depends(verify_slack_request),
) -> JSONResponse:
    """Receive Slack webhook events.

    Slack retries (X-Slack-Retry-Num header) are acknowledged immediately
    to prevent duplicate processing.
    """
    # Dedup: if Slack is retrying, acknowledge immediately
    if request.headers.get("X-Slack-Retry-Num") and payload.get("type") != "url_verification":
        return JSONResponse({"ok": True})

    return handle_slack_event(payload)
