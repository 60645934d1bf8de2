"""Slack request signature verification as a FastAPI dependency."""

import json
import logging

from fastapi import HTTPException, Request
from slack_sdk.signature import Clock, SignatureVerifier

from estimation_hub.config import get_settings, is_configured

logger = logging.getLogger(__name__)


def verify_signature(
    raw_body: bytes,
    timestamp: str,
    signature: str,
    signing_secret: str,
    clock: Clock | None = None,
) -> bool:
    """Check a Slack request signature against the signing secret.

    Fails closed when the secret is unset or a placeholder. Requests whose
    timestamp is more than five minutes from now are rejected as replays.
    The HMAC comparison is constant-time (hmac.compare_digest in slack_sdk).

    Never raises: malformed headers or bodies simply fail verification.
    """
    if not is_configured(signing_secret):
        logger.error("SLACK_SIGNING_SECRET is not configured")
        return False
    if not timestamp or not signature:
        return False

    verifier = SignatureVerifier(signing_secret=signing_secret, clock=clock or Clock())
    try:
        return verifier.is_valid(body=raw_body, timestamp=timestamp, signature=signature)
    except (ValueError, TypeError) as exc:
        # Non-numeric timestamp, non-UTF-8 body, or non-ASCII signature
        logger.warning("Malformed Slack signature input: %s", exc)
        return False


async def verify_slack_request(request: Request) -> dict:
    """Verify Slack request signature and return parsed JSON payload.

    Reads the raw body FIRST (before any JSON parsing) to ensure the
    signature verification uses the exact bytes Slack signed.

    Raises HTTPException(401) if the signature is invalid. A verified body
    that is not a JSON object yields an empty payload.
    """
    settings = get_settings()
    body = await request.body()

    timestamp = request.headers.get("X-Slack-Request-Timestamp", "")
    signature = request.headers.get("X-Slack-Signature", "")

    if not verify_signature(body, timestamp, signature, settings.slack_signing_secret):
        logger.warning("Rejected Slack request with invalid signature")
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning("Verified Slack request body is not valid JSON")
        return {}
    return payload if isinstance(payload, dict) else {}
