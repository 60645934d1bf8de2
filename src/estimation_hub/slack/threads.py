"""Slack thread fetching and formatting.

Fetches the full reply set (parent + replies) for a thread anchor and
translates every Slack or transport failure into a domain error with a
remediation hint. Nothing is retried; the operator decides.
"""

import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError

from estimation_hub.errors import (
    ChannelNotFoundError,
    EmptyThreadError,
    SlackAuthError,
    SlackPermissionError,
    UpstreamTransportError,
    ValidationError,
)
from estimation_hub.models.slack import ThreadMessage, ThreadReference
from estimation_hub.slack.client import get_slack_client
from estimation_hub.slack.permalink import parse_permalink

logger = logging.getLogger(__name__)

REQUIRED_SCOPES = (
    "channels:history",
    "groups:history",
    "im:history",
    "mpim:history",
    "channels:read",
    "groups:read",
)

_NOT_FOUND_CODES = ("channel_not_found", "thread_not_found")
_AUTH_CODES = ("invalid_auth", "not_authed", "account_inactive", "token_revoked")

_PAGE_SIZE = 200


async def fetch_thread(channel_id: str, anchor_ts: str) -> list[ThreadMessage]:
    """Fetch every message in a thread, oldest first.

    Follows conversations.replies cursor pagination until exhausted. A message
    returned on more than one page (same ts) is kept once.

    Raises:
        ConfigurationError: No bot token configured.
        SlackPermissionError: Token lacks the history/read scopes.
        ChannelNotFoundError: Channel unknown to the bot (not a member).
        SlackAuthError: Token invalid or revoked.
        EmptyThreadError: Slack returned zero messages.
        UpstreamTransportError: Any other Slack or network failure.
    """
    client = await get_slack_client()

    raw_messages: list[dict] = []
    seen_ts: set[str] = set()
    cursor: str | None = None

    try:
        while True:
            response = await client.conversations_replies(
                channel=channel_id,
                ts=anchor_ts,
                cursor=cursor,
                limit=_PAGE_SIZE,
            )
            for raw in response.get("messages") or []:
                # Each page repeats the parent message
                ts = raw.get("ts")
                if ts and ts in seen_ts:
                    continue
                if ts:
                    seen_ts.add(ts)
                raw_messages.append(raw)
            cursor = (response.get("response_metadata") or {}).get("next_cursor")
            if not cursor:
                break
    except SlackApiError as exc:
        raise _translate_slack_error(exc, channel_id) from exc
    except (SlackClientError, aiohttp.ClientError, TimeoutError, OSError) as exc:
        logger.error("Transport failure fetching thread %s/%s", channel_id, anchor_ts, exc_info=True)
        raise UpstreamTransportError(f"Failed to fetch Slack thread: {exc}") from exc

    if not raw_messages:
        raise EmptyThreadError("No messages found in the thread")

    messages = [_to_thread_message(raw) for raw in raw_messages]
    logger.info(
        "Fetched %d message(s) from thread %s in channel %s",
        len(messages),
        anchor_ts,
        channel_id,
    )
    return messages


def _to_thread_message(raw: dict) -> ThreadMessage:
    return ThreadMessage(
        author=raw.get("user") or raw.get("username") or raw.get("bot_id") or "Unknown",
        text=raw.get("text") or "",
        timestamp=raw.get("ts") or "",
    )


def _translate_slack_error(exc: SlackApiError, channel_id: str) -> Exception:
    """Map a Slack API error code to the matching domain error."""
    error_code = exc.response.get("error", "") if exc.response else ""
    logger.warning("Slack API error fetching thread in %s: %s", channel_id, error_code)

    if error_code == "missing_scope":
        return SlackPermissionError(
            "Slack bot is missing required permissions. "
            f"Please add the following scopes: {', '.join(REQUIRED_SCOPES)}"
        )
    if error_code in _NOT_FOUND_CODES:
        return ChannelNotFoundError(
            "Channel not found. Make sure the bot has been added to the channel."
        )
    if error_code in _AUTH_CODES:
        return SlackAuthError(
            "Invalid Slack Bot Token. Please check SLACK_BOT_TOKEN in your environment."
        )
    return UpstreamTransportError(
        f"Failed to fetch Slack thread: {error_code or exc}"
    )


def format_thread(messages: list[ThreadMessage]) -> str:
    """Render messages as ``author: text`` blocks separated by blank lines."""
    return "\n\n".join(f"{message.author}: {message.text}" for message in messages)


async def fetch_thread_from_permalink(
    url: str,
) -> tuple[ThreadReference, list[ThreadMessage]]:
    """Parse a permalink and fetch the thread it points into.

    Raises ValidationError if the link is not a recognisable Slack thread link,
    otherwise anything fetch_thread raises.
    """
    reference = parse_permalink(url)
    if reference is None:
        raise ValidationError("Invalid Slack URL. Please provide a valid Slack thread link.")

    messages = await fetch_thread(reference.channel_id, reference.thread_anchor_ts)
    return reference, messages
