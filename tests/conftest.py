"""Shared test fixtures for the slack_translator test suite.

WHY: Most tests need the same three collaborators: a Slack WebClient
stand-in, resolved settings with a credential, and a completion client
whose HTTP traffic is answered locally. Centralizing them keeps each
test focused on one behavior.

HOW: The Slack client is a MagicMock returning plain dicts (the shape
SlackResponse.data has). The completion provider is an
httpx.MockTransport driven by a small recorder that keeps every request
it answered.

RULES:
- No test talks to Slack or OpenAI
- FakeProvider records requests; tests assert on them directly
- Settings are built explicitly, never from the developer's .env
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import httpx
import pytest

from slack_translator.api.client import CompletionClient
from slack_translator.config import ProviderCredential, TranslatorSettings
from slack_translator.models import TranslationRequest

CHANNEL_ID = "C0123456789"
MESSAGE_TS = "1718000000.000100"
REPLY_TS = "1718000042.000200"
TEST_API_KEY = "sk-test-123"
TEST_BASE_URL = "https://llm.test/v1"


def completion_body(content: Optional[str]) -> Dict[str, Any]:
    """A chat-completion response with a single choice."""
    return {
        "id": "chatcmpl-1",
        "model": "gpt-4-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeProvider:
    """Answers every completion request with a fixed response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body: Optional[Any] = None,
        text: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client(self) -> CompletionClient:
        return CompletionClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(self),
        )


@pytest.fixture
def translation_request():
    return TranslationRequest(
        channel_id=CHANNEL_ID,
        message_ts=MESSAGE_TS,
        target_language="French",
    )


@pytest.fixture
def settings():
    return TranslatorSettings(
        credential=ProviderCredential.from_value(TEST_API_KEY),
        base_url=TEST_BASE_URL,
        model="gpt-4-turbo",
    )


@pytest.fixture
def settings_without_key():
    return TranslatorSettings(
        credential=ProviderCredential.from_value(None),
        base_url=TEST_BASE_URL,
    )


@pytest.fixture
def slack_client():
    """WebClient stand-in: one message "Hello", replies posted at REPLY_TS."""
    client = MagicMock()
    client.conversations_replies.return_value = {
        "ok": True,
        "messages": [{"ts": MESSAGE_TS, "text": "Hello"}],
        "has_more": False,
    }
    client.chat_postMessage.return_value = {
        "ok": True,
        "channel": CHANNEL_ID,
        "ts": REPLY_TS,
        "message": {"text": "Bonjour"},
    }
    return client
