"""Slack event dispatch and reaction trigger policy.

Every outcome other than a failed signature (handled by the router's
dependency) is acknowledged with HTTP 200 so Slack never retries delivery
for business-logic rejections.
"""

import logging

from fastapi.responses import JSONResponse

from estimation_hub.config import get_settings

logger = logging.getLogger(__name__)


def handle_slack_event(payload: dict) -> JSONResponse:
    """Dispatch a verified Slack payload based on its type.

    - url_verification: return the challenge token
    - event_callback: apply the reaction trigger policy
    - anything else: acknowledge with 200

    Unexpected faults are logged at ERROR and still acknowledged.
    """
    try:
        if payload.get("type") == "url_verification":
            logger.info("Slack URL verification challenge received")
            return JSONResponse({"challenge": payload.get("challenge")})

        if payload.get("type") == "event_callback":
            event = payload.get("event") or {}
            if event.get("type") == "reaction_added":
                handle_reaction_event(event)
            else:
                logger.info("Ignoring event type: %s", event.get("type"))
            return JSONResponse({"ok": True})

        logger.info("Ignoring callback type: %s", payload.get("type"))
    except Exception:
        logger.error("Unhandled error processing Slack event", exc_info=True)

    return JSONResponse({"ok": True})


def is_authorized_user(user_id: str | None) -> bool:
    """Return True if the user is on the configured allow-list."""
    if not user_id:
        return False
    return user_id in get_settings().authorized_user_ids


def is_trigger_emoji(emoji: str | None) -> bool:
    """Exact-match the reaction name against the configured trigger emoji."""
    return emoji == get_settings().slack_trigger_emoji


def handle_reaction_event(event: dict) -> bool:
    """Apply the trigger policy to a reaction_added event.

    Filters are applied in order:
    1. User not on the allow-list -> skip
    2. Emoji is not the trigger emoji -> skip

    Returns True if the trigger was dispatched.
    """
    user_id = event.get("user")
    emoji = event.get("reaction")
    item = event.get("item") or {}

    logger.info(
        "Reaction event received",
        extra={
            "user": user_id,
            "emoji": emoji,
            "item_channel": item.get("channel"),
            "item_ts": item.get("ts"),
        },
    )

    if not is_authorized_user(user_id):
        logger.info("User %s is not authorized", user_id)
        return False

    if not is_trigger_emoji(emoji):
        logger.info("Emoji %s does not match trigger emoji", emoji)
        return False

    dispatch_trigger(event)
    return True


def dispatch_trigger(event: dict) -> None:
    """Act on an authorized trigger reaction.

    Currently records the trigger. This is where thread fetch, extraction
    and record creation attach for automatic capture.
    """
    item = event.get("item") or {}
    logger.info(
        "Auto-extraction triggered",
        extra={
            "user": event.get("user"),
            "emoji": event.get("reaction"),
            "channel": item.get("channel"),
            "thread_ts": item.get("ts"),
        },
    )
