"""Completion provider package: HTTP client for the chat-completion API.

WHY: The translator needs exactly one provider call per invocation. This
package keeps that call, its authentication, and its response schema in
one place.

HOW: CompletionClient wraps httpx.Client with Bearer auth; responses are
validated into pydantic models defined in models.py.

RULES:
- All provider HTTP calls go through CompletionClient
- Authentication is via Bearer token from config
"""

from slack_translator.api.client import CompletionClient
from slack_translator.api.models import ChatCompletionResponse

__all__ = ["ChatCompletionResponse", "CompletionClient"]
