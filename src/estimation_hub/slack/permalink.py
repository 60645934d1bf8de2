"""Slack permalink parsing into channel and thread timestamps.

Supported formats:
    https://<workspace>.slack.com/archives/C02SGCP7A1M/p1759458090303149
    https://<workspace>.slack.com/archives/C02SGCP7A1M/p1759458090303149?thread_ts=1759458000.000100

The first links to a thread root; the second to a reply inside a thread that
was started at ``thread_ts``.
"""

import logging
import re
from urllib.parse import parse_qs, urlparse

from pydantic import ValidationError

from estimation_hub.models.slack import ThreadReference

logger = logging.getLogger(__name__)

CHANNEL_ID_PATTERN = re.compile(r"^[CDG][A-Z0-9]+$")
# "p" + 10 seconds digits + 6+ fraction digits
PERMALINK_TS_PATTERN = re.compile(r"^p(\d{16,})$")
THREAD_TS_PATTERN = re.compile(r"^\d{10}\.\d+$")


def permalink_ts_to_slack_ts(digits: str) -> str:
    """Convert permalink digits to a Slack ts: 1759458090303149 -> 1759458090.303149."""
    return f"{digits[:10]}.{digits[10:]}"


def parse_permalink(url: str) -> ThreadReference | None:
    """Decode a Slack permalink into a ThreadReference.

    Resolution order:
    1. p-timestamp and thread_ts -> anchor=thread_ts, specific=p-timestamp
    2. p-timestamp only -> anchor=specific=p-timestamp
    3. thread_ts only -> anchor=thread_ts, specific=None
    4. neither -> None

    Returns None for anything unparseable, including links without a
    channel segment. Partial results are never returned.
    """
    if not isinstance(url, str) or not url.strip():
        return None

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        logger.warning("Unparseable permalink: %s", url)
        return None

    segments = [segment for segment in parsed.path.split("/") if segment]

    channel_id = next((s for s in segments if CHANNEL_ID_PATTERN.match(s)), None)
    if channel_id is None:
        return None

    message_ts = None
    for segment in segments:
        match = PERMALINK_TS_PATTERN.match(segment)
        if match:
            message_ts = permalink_ts_to_slack_ts(match.group(1))
            break

    thread_ts = parse_qs(parsed.query).get("thread_ts", [None])[0]
    if thread_ts is not None and not THREAD_TS_PATTERN.match(thread_ts):
        thread_ts = None

    if thread_ts and message_ts:
        anchor, specific = thread_ts, message_ts
    elif message_ts:
        anchor, specific = message_ts, message_ts
    elif thread_ts:
        anchor, specific = thread_ts, None
    else:
        return None

    try:
        return ThreadReference(
            channel_id=channel_id,
            thread_anchor_ts=anchor,
            specific_message_ts=specific,
        )
    except ValidationError:
        return None
