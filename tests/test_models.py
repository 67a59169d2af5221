"""Tests for the request/result dataclasses.

WHY: These values carry the function inputs into the chain and the
result back out. The input names, the prompt text and the outcome
shape are what Slack and the provider see.

HOW: Direct construction and factory calls. No collaborators are involved.

RULES:
- All three inputs are required; the first missing one is named
- The target language is inserted into the prompt unchanged
- to_dict() yields exactly {"outputs": ...} or {"error": ...}
"""

from __future__ import annotations

import pytest

from slack_translator.models import (
    CompletionRequest,
    PostedReply,
    SourceMessage,
    TranslationOutcome,
    TranslationRequest,
)


class TestTranslationRequest:
    def test_from_inputs(self):
        request = TranslationRequest.from_inputs(
            {"channelId": "C1", "messageTs": "1.2", "lang": "Swedish"}
        )
        assert request == TranslationRequest(channel_id="C1", message_ts="1.2", target_language="Swedish")

    def test_extra_inputs_are_ignored(self):
        request = TranslationRequest.from_inputs(
            {"channelId": "C1", "messageTs": "1.2", "lang": "sv", "user": "U1"}
        )
        assert request.target_language == "sv"

    @pytest.mark.parametrize("missing", ["channelId", "messageTs", "lang"])
    def test_missing_input(self, missing):
        inputs = {"channelId": "C1", "messageTs": "1.2", "lang": "sv"}
        del inputs[missing]
        with pytest.raises(ValueError, match="Missing required input: {}".format(missing)):
            TranslationRequest.from_inputs(inputs)

    def test_empty_input(self):
        with pytest.raises(ValueError, match="lang"):
            TranslationRequest.from_inputs({"channelId": "C1", "messageTs": "1.2", "lang": ""})

    def test_language_is_not_normalized(self):
        request = TranslationRequest.from_inputs({"channelId": "C1", "messageTs": "1.2", "lang": " Français "})
        assert request.target_language == " Français "


class TestCompletionRequest:
    def test_payload(self):
        request = CompletionRequest.for_translation(
            SourceMessage(text="Hello"),
            "French",
            model="gpt-4-turbo",
            max_tokens=1024,
            temperature=0.5,
        )
        assert request.to_payload() == {
            "model": "gpt-4-turbo",
            "messages": [
                {
                    "role": "system",
                    "content": "You are a helpful translation assistant. "
                               "You translate the user's message into French",
                },
                {"role": "user", "content": "Hello"},
            ],
            "max_tokens": 1024,
            "temperature": 0.5,
        }

    def test_language_with_braces_is_inserted_literally(self):
        request = CompletionRequest.for_translation(
            SourceMessage(text="x"), "{lang}", model="m", max_tokens=1, temperature=0.0
        )
        assert request.system_instruction.endswith("into {lang}")


class TestTranslationOutcome:
    def test_posted(self):
        outcome = TranslationOutcome.posted(PostedReply(ts="1.5"))
        assert outcome.ok
        assert outcome.to_dict() == {"outputs": {"ts": "1.5"}}

    def test_noop(self):
        outcome = TranslationOutcome.noop()
        assert outcome.ok
        assert outcome.to_dict() == {"outputs": {}}

    def test_failed(self):
        outcome = TranslationOutcome.failed("boom")
        assert not outcome.ok
        assert outcome.to_dict() == {"error": "boom"}

    def test_noop_instances_do_not_share_outputs(self):
        first = TranslationOutcome.noop()
        first.outputs["ts"] = "1"
        assert TranslationOutcome.noop().outputs == {}
