"""Transient values passed along the translate chain.

WHY: Each invocation derives a short chain of values: request -> source
message -> completion request -> completion result -> posted reply.
Typed dataclasses make every link explicit and keep the orchestrator
free of ad-hoc dicts.

HOW: Plain dataclasses. TranslationRequest parses the function inputs
sent by Slack; CompletionRequest renders the provider payload;
TranslationOutcome renders the function result.

RULES:
- Nothing here is persisted or shared between invocations
- All three request fields are required, with no defaults
- Function input names are channelId, messageTs, lang (Slack camelCase)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from slack_translator.config import SYSTEM_INSTRUCTION_TEMPLATE

# Function input name -> TranslationRequest attribute
INPUT_FIELDS = (
    ("channelId", "channel_id"),
    ("messageTs", "message_ts"),
    ("lang", "target_language"),
)


@dataclass(frozen=True)
class TranslationRequest:
    """Which message to translate, and into what language."""

    channel_id: str
    message_ts: str
    target_language: str

    @classmethod
    def from_inputs(cls, inputs: Mapping[str, Any]) -> TranslationRequest:
        """Build a request from the function's input parameters.

        RULES:
        - Every input must be present and non-empty
        - Raises ValueError naming the first missing input
        - Values are converted to str but otherwise left untouched
        """
        values: Dict[str, str] = {}
        for input_name, attr in INPUT_FIELDS:
            value = inputs.get(input_name)
            if value is None or str(value) == "":
                raise ValueError("Missing required input: {}".format(input_name))
            values[attr] = str(value)
        return cls(**values)


@dataclass(frozen=True)
class SourceMessage:
    """The message fetched from Slack."""

    text: str


@dataclass(frozen=True)
class CompletionRequest:
    """A chat-completion request for one translation.

    WHY: The provider expects a system instruction followed by the user
    message. Building the payload in one place keeps the prompt and the
    fixed sampling parameters together.

    RULES:
    - system_instruction contains target_language exactly as given
    - user_content is the source text verbatim (no trimming)
    """

    system_instruction: str
    user_content: str
    model: str
    max_tokens: int
    temperature: float

    @classmethod
    def for_translation(
        cls,
        message: SourceMessage,
        target_language: str,
        model: str,
        max_tokens: int,
        temperature: float,
    ) -> CompletionRequest:
        return cls(
            system_instruction=SYSTEM_INSTRUCTION_TEMPLATE.format(lang=target_language),
            user_content=message.text,
            model=model,
            max_tokens=max_tokens,
            temperature=temperature,
        )

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body for POST /chat/completions."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_instruction},
                {"role": "user", "content": self.user_content},
            ],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


@dataclass(frozen=True)
class CompletionResult:
    """The translated text, already trimmed."""

    translated_text: str


@dataclass(frozen=True)
class PostedReply:
    """The thread reply created in Slack."""

    ts: str


@dataclass
class TranslationOutcome:
    """Result of one translate invocation.

    WHY: The host platform distinguishes a completed function (with
    outputs, possibly empty) from a failed one (with an error string).

    RULES:
    - error is None on success; outputs is then {} or {"ts": ...}
    - to_dict() returns exactly {"outputs": ...} or {"error": ...}
    """

    outputs: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def posted(cls, reply: PostedReply) -> TranslationOutcome:
        return cls(outputs={"ts": reply.ts})

    @classmethod
    def noop(cls) -> TranslationOutcome:
        return cls()

    @classmethod
    def failed(cls, error: str) -> TranslationOutcome:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        if self.error is not None:
            return {"error": self.error}
        return {"outputs": dict(self.outputs)}
