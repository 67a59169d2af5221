"""Configuration constants, credential resolution, and .env loading.

WHY: The translate function needs an OpenAI API key, a model id, and a
few fixed sampling parameters. Keeping them here (not inside the
orchestrator) makes them easy to find and override, and lets the
orchestrator receive one resolved settings object per invocation.

HOW: python-dotenv loads the .env file on import. Provider defaults are
module-level constants read from the environment. TranslatorSettings
resolves everything once, with the credential wrapped in an explicit
ProviderCredential whose status is an enum rather than a bare None.

RULES:
- API key is loaded from .env / environment, never hardcoded
- A missing or blank key resolves to CredentialStatus.MISSING (not an exception)
- max_tokens and temperature are constants, not derived from input
- DEBUG_MODE only affects log verbosity
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

# Load .env from the project root (where the app is started from)
load_dotenv()

# ---------------------------------------------------------------------------
# Completion provider defaults
# ---------------------------------------------------------------------------

OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4-turbo")

TRANSLATION_MAX_TOKENS = 1024
TRANSLATION_TEMPERATURE = 0.5

SYSTEM_INSTRUCTION_TEMPLATE = (
    "You are a helpful translation assistant. "
    "You translate the user's message into {lang}"
)
"""System prompt; {lang} is replaced by the requested language verbatim."""

MISSING_CREDENTIAL_MESSAGE = (
    "OpenAI API key is not set. Please configure it properly."
)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class CredentialStatus(str, Enum):
    """Whether a provider credential is available for this invocation."""

    CONFIGURED = "configured"
    MISSING = "missing"


@dataclass(frozen=True)
class ProviderCredential:
    """The completion provider's API key, resolved once per invocation.

    WHY: Callers should branch on an explicit status instead of checking
    an optional string in several places.

    RULES:
    - status is MISSING exactly when api_key is None
    - Surrounding whitespace is stripped; a blank key counts as missing
    """

    status: CredentialStatus
    api_key: str | None = None

    @classmethod
    def from_value(cls, value: str | None) -> ProviderCredential:
        key = (value or "").strip()
        if not key:
            return cls(status=CredentialStatus.MISSING)
        return cls(status=CredentialStatus.CONFIGURED, api_key=key)

    @property
    def is_configured(self) -> bool:
        return self.status is CredentialStatus.CONFIGURED


def is_debug_mode(env: Mapping[str, str] | None = None) -> bool:
    """Return True when DEBUG_MODE is set to a truthy value.

    RULES:
    - env defaults to os.environ
    - "1", "true", "yes", "on" (any case) are truthy; anything else is not
    """
    source = os.environ if env is None else env
    return source.get("DEBUG_MODE", "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class TranslatorSettings:
    """Everything the orchestrator needs besides the request itself.

    WHY: Resolving configuration once at invocation entry keeps the
    orchestrator free of environment lookups and makes it trivial to
    test with explicit values.

    HOW: from_env() reads OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_MODEL
    and DEBUG_MODE from the given mapping (os.environ by default),
    falling back to the module constants.

    RULES:
    - max_tokens defaults to 1024, temperature to 0.5
    - base_url never ends with a slash
    """

    credential: ProviderCredential
    base_url: str = OPENAI_BASE_URL
    model: str = OPENAI_MODEL
    max_tokens: int = TRANSLATION_MAX_TOKENS
    temperature: float = TRANSLATION_TEMPERATURE
    debug: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> TranslatorSettings:
        source = os.environ if env is None else env
        return cls(
            credential=ProviderCredential.from_value(source.get("OPENAI_API_KEY")),
            base_url=(source.get("OPENAI_BASE_URL") or OPENAI_BASE_URL).rstrip("/"),
            model=source.get("OPENAI_MODEL") or OPENAI_MODEL,
            debug=is_debug_mode(source),
        )
