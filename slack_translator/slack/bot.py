"""Slack bot: the ``translate`` custom-function listener and Socket Mode entry.

WHY: Slack invokes the translate function from workflows (for example a
"Translate this message" shortcut). This module is the glue between the
function execution event and the orchestrator: it parses the inputs,
resolves settings, runs translate_message, and reports the outcome back
with complete() or fail().

HOW: Uses slack-bolt with Socket Mode (no public URL needed). The
listener is registered with app.function(CALLBACK_ID); Bolt injects
inputs, the function-scoped WebClient, and the complete/fail helpers.

RULES:
- Function events are acknowledged by Bolt automatically
- Settings (and so the OpenAI key) are resolved once per invocation
- Structured errors from the orchestrator -> fail(error=...)
- Successful outcomes (including no-op) -> complete(outputs=...)
- Exceptions escaping the orchestrator (Slack API errors, network
  faults) are logged and reported with fail()
- Runnable as: python -m slack_translator.slack.bot
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from slack_translator.config import TranslatorSettings
from slack_translator.models import TranslationRequest
from slack_translator.slack.definition import CALLBACK_ID
from slack_translator.translate import translate_message

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------


def create_app(bot_token: Optional[str] = None) -> App:
    """Create and configure the Slack Bolt app with the function listener.

    WHY: Factory function allows tests to inject a custom bot_token
    and avoids module-level side effects.

    RULES:
    - If bot_token is None, reads from SLACK_BOT_TOKEN env var
    - The listener is registered under definition.CALLBACK_ID
    """
    token = bot_token or os.environ.get("SLACK_BOT_TOKEN", "")

    app = App(token=token)
    app.function(CALLBACK_ID)(handle_translate_function)
    return app


# ---------------------------------------------------------------------------
# Function listener
# ---------------------------------------------------------------------------


def handle_translate_function(
    inputs: Dict[str, Any],
    client: Any,
    complete: Any,
    fail: Any,
    logger: Any,
) -> None:
    """Run one translate invocation and report its outcome to Slack.

    WHY: Slack waits for either complete() or fail() to finish the
    workflow step. Every path through this handler calls exactly one of
    them.

    RULES:
    - Missing inputs -> fail() with the name of the missing input
    - Outcome with error -> fail(error=outcome.error)
    - Otherwise -> complete(outputs=outcome.outputs)
    - Unexpected exceptions -> logger.exception + fail()
    """
    try:
        request = TranslationRequest.from_inputs(inputs or {})
    except ValueError as exc:
        logger.warning("Rejected translate inputs: %s", exc)
        fail(error=str(exc))
        return

    settings = TranslatorSettings.from_env()

    try:
        outcome = translate_message(request, client, settings)
    except Exception as exc:
        logger.exception(
            "Translate function failed for %s/%s",
            request.channel_id,
            request.message_ts,
        )
        fail(error="Translation failed: {}".format(exc))
        return

    if outcome.ok:
        complete(outputs=outcome.outputs)
    else:
        fail(error=outcome.error)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def configure_logging(debug: bool = False) -> None:
    """Configure root logging; debug switches to DEBUG level."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main() -> None:
    """Start the Slack bot in Socket Mode.

    WHY: The bot needs to be runnable as a standalone process via
    python -m slack_translator.slack.bot (or the CLI's run command).

    HOW: Creates the app and starts the Socket Mode handler, which
    maintains a WebSocket connection to Slack.

    RULES:
    - Settings (including DEBUG_MODE) are resolved once, before logging
    - Requires SLACK_BOT_TOKEN and SLACK_APP_TOKEN environment variables
    - Warns (does not exit) when OPENAI_API_KEY is missing; each
      invocation then fails with the missing-key error
    - Blocks on the SocketModeHandler.start() call
    """
    settings = TranslatorSettings.from_env()
    configure_logging(settings.debug)

    bot_token = os.environ.get("SLACK_BOT_TOKEN", "")
    app_token = os.environ.get("SLACK_APP_TOKEN", "")

    if not bot_token:
        raise ValueError("SLACK_BOT_TOKEN environment variable is required")
    if not app_token:
        raise ValueError("SLACK_APP_TOKEN environment variable is required")

    if not settings.credential.is_configured:
        logger.warning("OPENAI_API_KEY is not set; translations will fail")

    app = create_app(bot_token=bot_token)

    logger.info("Starting Slack bot in Socket Mode...")
    logger.info("Translation model: %s (%s)", settings.model, settings.base_url)

    handler = SocketModeHandler(app, app_token)
    handler.start()


if __name__ == "__main__":
    main()
