"""Error taxonomy for the translate function.

WHY: The orchestrator reports a small, closed set of failures back to
Slack as structured errors. Typed exceptions let the client and the
schema parsers raise them where the problem is detected, while the
orchestrator converts them to a single error string in one place.

HOW: Every class derives from TranslatorError. str(exc) is the exact
text returned to the caller as the function error.

RULES:
- MissingCredentialError: no provider API key; raised before any call
- TranslationProviderError: non-2xx from the provider; body kept verbatim
- ResponseParseError: a collaborator response is not JSON or not the
  expected shape
- Transport faults (httpx.HTTPError) and Slack API errors are NOT part
  of this taxonomy; they propagate
"""

from __future__ import annotations

from pydantic import ValidationError

from slack_translator.config import MISSING_CREDENTIAL_MESSAGE


class TranslatorError(Exception):
    """Base class for failures surfaced as a function error."""


class MissingCredentialError(TranslatorError):
    """Raised when no completion provider API key is configured."""

    def __init__(self) -> None:
        super().__init__(MISSING_CREDENTIAL_MESSAGE)


class TranslationProviderError(TranslatorError):
    """Raised when the completion provider returns a non-2xx response.

    RULES:
    - body is the response text, unmodified
    - str(exc) is "Failed to translate message: <body>"
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__("Failed to translate message: {}".format(body))


class ResponseParseError(TranslatorError):
    """Raised when a collaborator response cannot be parsed.

    RULES:
    - source names the collaborator ("translation", "Slack")
    - str(exc) is "Failed to parse <source> response: <detail>"
    """

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__("Failed to parse {} response: {}".format(source, detail))

    @classmethod
    def from_validation(cls, source: str, exc: ValidationError) -> ResponseParseError:
        """Build from a pydantic ValidationError, keeping the first problem."""
        errors = exc.errors()
        if not errors:
            return cls(source, str(exc))
        first = errors[0]
        loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        return cls(source, "{}: {}".format(loc, first.get("msg", "invalid")))
