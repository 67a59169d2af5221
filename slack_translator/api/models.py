"""Pydantic schemas for the chat-completion response.

WHY: The provider returns loosely shaped JSON. Validating it into typed
models at the client boundary turns a malformed body into one clear
ResponseParseError instead of a KeyError deep inside the orchestrator.

HOW: Only the fields the translator reads are declared; everything else
in the response is ignored. parse_completion() wraps pydantic's
ValidationError.

RULES:
- choices is required (may be empty)
- message and content are optional; absence means "no translation"
- Python 3.9+ compatible (Optional/List from typing)
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError

from slack_translator.errors import ResponseParseError


class ChatMessage(BaseModel):
    """A message inside a completion choice."""

    role: Optional[str] = Field(default=None, description="Author role, usually 'assistant'")
    content: Optional[str] = Field(default=None, description="Generated text")


class ChatChoice(BaseModel):
    """One completion alternative."""

    index: int = Field(default=0, description="Position in the choices list")
    message: Optional[ChatMessage] = Field(default=None, description="Generated message")
    finish_reason: Optional[str] = Field(default=None, description="Why generation stopped")


class ChatCompletionResponse(BaseModel):
    """Successful response of POST /chat/completions."""

    id: Optional[str] = Field(default=None, description="Completion id")
    model: Optional[str] = Field(default=None, description="Model that served the request")
    choices: List[ChatChoice] = Field(description="Completion alternatives, best first")

    def first_content(self) -> Optional[str]:
        """Return the first choice's content, or None when there is none.

        RULES:
        - No choices -> None
        - First choice without message, or with empty content -> None
        """
        if not self.choices:
            return None
        message = self.choices[0].message
        if message is None or not message.content:
            return None
        return message.content


def parse_completion(data: Any) -> ChatCompletionResponse:
    """Validate decoded JSON into a ChatCompletionResponse."""
    try:
        return ChatCompletionResponse.model_validate(data)
    except ValidationError as exc:
        raise ResponseParseError.from_validation("translation", exc) from exc
