"""Slack ingress: webhook handling, signature verification, permalinks, and thread fetching."""

from estimation_hub.slack.client import get_slack_client, reset_client
from estimation_hub.slack.permalink import parse_permalink
from estimation_hub.slack.router import router
from estimation_hub.slack.threads import (
    fetch_thread,
    fetch_thread_from_permalink,
    format_thread,
)
from estimation_hub.slack.verification import verify_signature

__all__ = [
    "fetch_thread",
    "fetch_thread_from_permalink",
    "format_thread",
    "get_slack_client",
    "parse_permalink",
    "reset_client",
    "router",
    "verify_signature",
]
