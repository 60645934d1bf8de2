"""Slack thread coordinates and fetched thread messages."""

from pydantic import BaseModel, ConfigDict, Field


class ThreadReference(BaseModel):
    """A resolved pointer to a Slack thread, decoded from a permalink."""

    model_config = ConfigDict(frozen=True)

    channel_id: str = Field(pattern=r"^[CDG][A-Z0-9]+$")
    thread_anchor_ts: str  # Root message ts, e.g., "1759458090.303149"
    specific_message_ts: str | None = None  # Message the link points at


class ThreadMessage(BaseModel):
    """A single message from a fetched thread (parent or reply)."""

    model_config = ConfigDict(frozen=True)

    author: str
    text: str
    timestamp: str
