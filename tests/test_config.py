"""Tests for configuration and credential resolution.

WHY: Every invocation starts by resolving settings. A wrong credential
status or debug flag changes what the orchestrator and the bot do.

HOW: Settings are built from explicit env mappings. monkeypatch covers
the default os.environ lookups.

RULES:
- A blank or whitespace-only key counts as missing
- max_tokens and temperature stay fixed; model and base URL can be overridden
- The developer's own .env never decides a result
"""

from __future__ import annotations

import pytest

from slack_translator.config import (
    OPENAI_BASE_URL,
    TRANSLATION_MAX_TOKENS,
    TRANSLATION_TEMPERATURE,
    CredentialStatus,
    ProviderCredential,
    TranslatorSettings,
    is_debug_mode,
)


class TestProviderCredential:
    def test_configured(self):
        cred = ProviderCredential.from_value("sk-abc")
        assert cred.status is CredentialStatus.CONFIGURED
        assert cred.api_key == "sk-abc"
        assert cred.is_configured

    @pytest.mark.parametrize("value", [None, "", "   ", "\n"])
    def test_missing(self, value):
        cred = ProviderCredential.from_value(value)
        assert cred.status is CredentialStatus.MISSING
        assert cred.api_key is None
        assert not cred.is_configured

    def test_whitespace_is_stripped(self):
        assert ProviderCredential.from_value("  sk-abc\n").api_key == "sk-abc"


class TestIsDebugMode:
    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", "on", " True "])
    def test_truthy(self, value):
        assert is_debug_mode({"DEBUG_MODE": value}) is True

    @pytest.mark.parametrize("value", ["false", "0", "", "no", "debug"])
    def test_falsy(self, value):
        assert is_debug_mode({"DEBUG_MODE": value}) is False

    def test_unset(self):
        assert is_debug_mode({}) is False

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("DEBUG_MODE", "true")
        assert is_debug_mode() is True


class TestTranslatorSettings:
    def test_from_env_with_key(self):
        settings = TranslatorSettings.from_env({"OPENAI_API_KEY": "sk-abc"})
        assert settings.credential.is_configured
        assert settings.base_url == OPENAI_BASE_URL.rstrip("/")
        assert settings.max_tokens == TRANSLATION_MAX_TOKENS == 1024
        assert settings.temperature == TRANSLATION_TEMPERATURE == 0.5
        assert settings.debug is False

    def test_from_env_without_key(self):
        settings = TranslatorSettings.from_env({})
        assert settings.credential.status is CredentialStatus.MISSING

    def test_overrides(self):
        settings = TranslatorSettings.from_env(
            {
                "OPENAI_API_KEY": "sk-abc",
                "OPENAI_BASE_URL": "https://proxy.internal/v1/",
                "OPENAI_MODEL": "gpt-4o-mini",
                "DEBUG_MODE": "1",
            }
        )
        assert settings.base_url == "https://proxy.internal/v1"
        assert settings.model == "gpt-4o-mini"
        assert settings.debug is True

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
        assert TranslatorSettings.from_env().credential.api_key == "sk-from-env"

    def test_missing_key_in_os_environ(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        assert not TranslatorSettings.from_env().credential.is_configured
