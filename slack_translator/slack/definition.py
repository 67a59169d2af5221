"""Declaration of the ``translate`` custom function for the Slack platform.

WHY: Slack only invokes a custom function it knows from the app
manifest: its callback id, title, and typed input/output parameters.
Keeping that declaration in code lets the CLI print it, lets the bot
register its listener under the same callback id, and lets tests check
that the request parser and the declaration agree.

HOW: A plain dict in manifest format. manifest_functions() wraps it in
the ``functions`` section of an app manifest.

RULES:
- callback_id must match the app.function() registration in bot.py
- Required inputs are channelId, messageTs, lang (all strings)
- The only output, ts, is optional (absent on no-op results)
"""

from __future__ import annotations

from typing import Any, Dict

from slack_translator.models import INPUT_FIELDS

CALLBACK_ID = "translate"

_STRING = "string"

TRANSLATE_FUNCTION: Dict[str, Any] = {
    "title": "Translate message using OpenAI and post as a reply in its thread",
    "description": "Translates a message into the given language and replies in its thread.",
    "input_parameters": {
        "properties": {
            "channelId": {"type": _STRING, "description": "Channel of the message"},
            "messageTs": {"type": _STRING, "description": "Timestamp of the message to translate"},
            "lang": {"type": _STRING, "description": "Target language name or code"},
        },
        "required": [name for name, _ in INPUT_FIELDS],
    },
    "output_parameters": {
        "properties": {
            "ts": {"type": _STRING, "description": "Timestamp of the posted translation"},
        },
        "required": [],
    },
}


def manifest_functions() -> Dict[str, Any]:
    """Return the ``functions`` manifest section for this app."""
    return {CALLBACK_ID: TRANSLATE_FUNCTION}
