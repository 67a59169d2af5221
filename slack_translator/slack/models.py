"""Pydantic schemas for the Slack Web API responses the translator reads.

WHY: conversations.replies and chat.postMessage return large JSON
objects of which we use two fields. Validating just those fields at the
boundary gives a clear ResponseParseError instead of a KeyError.

HOW: slack_sdk returns SlackResponse objects; response_data() unwraps
them (or passes plain dicts through, which is what tests use). Unknown
fields are ignored.

RULES:
- messages defaults to [] (Slack omits it for some empty results)
- A message without text is treated as empty text
- chat.postMessage must return a ts
- A body with ok=false is rejected even when the client did not raise
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from slack_translator.errors import ResponseParseError


class SlackMessage(BaseModel):
    """One message from conversations.replies."""

    ts: Optional[str] = Field(default=None, description="Message timestamp")
    text: str = Field(default="", description="Message text (mrkdwn)")
    thread_ts: Optional[str] = Field(default=None, description="Parent thread timestamp")


class RepliesResponse(BaseModel):
    """Response of conversations.replies."""

    ok: bool = Field(default=True, description="Slack success flag")
    messages: List[SlackMessage] = Field(default_factory=list, description="Thread messages, parent first")


class PostMessageResponse(BaseModel):
    """Response of chat.postMessage."""

    ok: bool = Field(default=True, description="Slack success flag")
    channel: Optional[str] = Field(default=None, description="Channel the reply was posted to")
    ts: str = Field(description="Timestamp of the new message")


def response_data(resp: Any) -> Dict[str, Any]:
    """Return the JSON body of a SlackResponse (or a plain dict)."""
    data = getattr(resp, "data", resp)
    if not isinstance(data, dict):
        raise ResponseParseError("Slack", "expected a JSON object, got {}".format(type(data).__name__))
    if data.get("ok") is False:
        raise ResponseParseError("Slack", "ok is false ({})".format(data.get("error", "no error given")))
    return data


def parse_replies(resp: Any) -> RepliesResponse:
    try:
        return RepliesResponse.model_validate(response_data(resp))
    except ValidationError as exc:
        raise ResponseParseError.from_validation("Slack", exc) from exc


def parse_post_message(resp: Any) -> PostMessageResponse:
    try:
        return PostMessageResponse.model_validate(response_data(resp))
    except ValidationError as exc:
        raise ResponseParseError.from_validation("Slack", exc) from exc
