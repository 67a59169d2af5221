"""Translate orchestrator: fetch a message, translate it, reply in thread.

WHY: This is the whole job of the ``translate`` function. Keeping it as
one plain function, independent of Bolt, lets the bot listener, the CLI
and the tests drive exactly the same chain.

HOW: Four sequential steps, each depending on the previous one:
credential check -> conversations.replies -> chat completion ->
chat.postMessage. Failures in the taxonomy (errors.py) are raised inside
the steps and converted to a TranslationOutcome error at the end.

RULES:
- No credential -> error result, no network call at all
- Empty message list or empty translation -> {"outputs": {}} (no-op success)
- Non-2xx from the provider -> "Failed to translate message: <body>", no post
- Posted text is the first choice's content, trimmed
- The reply is threaded under request.message_ts in request.channel_id
- Slack API errors and transport errors are not caught here
- Logging is observational only; it never changes the result
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from slack_translator.api.client import CompletionClient
from slack_translator.config import TranslatorSettings
from slack_translator.errors import MissingCredentialError, TranslatorError
from slack_translator.models import (
    CompletionRequest,
    CompletionResult,
    PostedReply,
    SourceMessage,
    TranslationOutcome,
    TranslationRequest,
)
from slack_translator.slack.models import parse_post_message, parse_replies

logger = logging.getLogger(__name__)


def translate_message(
    request: TranslationRequest,
    slack_client: Any,
    settings: TranslatorSettings,
    completion_client: Optional[CompletionClient] = None,
) -> TranslationOutcome:
    """Translate one Slack message and post the result as a thread reply.

    Args:
        request: Channel, message timestamp and target language.
        slack_client: A slack_sdk WebClient (or anything with the same
            conversations_replies / chat_postMessage methods).
        settings: Resolved provider settings, including the credential.
        completion_client: An already-entered CompletionClient. When
            None, one is created from settings for this call and closed
            afterwards.

    Returns:
        The outcome: {"outputs": {"ts": ...}}, {"outputs": {}} or
        {"error": ...} via TranslationOutcome.to_dict().
    """
    try:
        return _run(request, slack_client, settings, completion_client)
    except TranslatorError as exc:
        logger.warning("Translation of %s/%s failed: %s", request.channel_id, request.message_ts, exc)
        return TranslationOutcome.failed(str(exc))


def _run(
    request: TranslationRequest,
    slack_client: Any,
    settings: TranslatorSettings,
    completion_client: Optional[CompletionClient],
) -> TranslationOutcome:
    if not settings.credential.is_configured:
        raise MissingCredentialError()

    message = fetch_source_message(slack_client, request)
    if message is None:
        logger.info("No message found for translation.")
        return TranslationOutcome.noop()

    completion = CompletionRequest.for_translation(
        message,
        request.target_language,
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
    )
    result = request_translation(completion, settings, completion_client)
    if result is None:
        logger.info("No translation returned for %s/%s.", request.channel_id, request.message_ts)
        return TranslationOutcome.noop()

    reply = post_reply(slack_client, request, result)
    return TranslationOutcome.posted(reply)


def fetch_source_message(slack_client: Any, request: TranslationRequest) -> Optional[SourceMessage]:
    """Fetch the message at request.message_ts, or None if there is none.

    RULES:
    - Exactly one message is requested, inclusive of the timestamp
    - SlackApiError propagates
    """
    resp = slack_client.conversations_replies(
        channel=request.channel_id,
        ts=request.message_ts,
        limit=1,
        inclusive=True,
    )
    replies = parse_replies(resp)
    logger.info(
        "Fetched %d message(s) from %s at %s",
        len(replies.messages),
        request.channel_id,
        request.message_ts,
    )
    if not replies.messages:
        return None
    return SourceMessage(text=replies.messages[0].text)


def request_translation(
    completion: CompletionRequest,
    settings: TranslatorSettings,
    completion_client: Optional[CompletionClient] = None,
) -> Optional[CompletionResult]:
    """Ask the completion provider for the translation.

    RULES:
    - Returns None when there is no usable content in the first choice
      (no choices, no message, empty or whitespace-only content)
    - The returned text is stripped of surrounding whitespace
    """
    logger.info("Sending translation request (model=%s)", completion.model)
    logger.debug("Translation request body: %s", json.dumps(completion.to_payload(), ensure_ascii=False))

    if completion_client is not None:
        response = completion_client.complete(completion)
    else:
        with CompletionClient(
            api_key=settings.credential.api_key or "",
            base_url=settings.base_url,
        ) as client:
            response = client.complete(completion)

    content = response.first_content()
    # Whitespace-only content would post an empty reply, which Slack rejects.
    if content is None or not content.strip():
        return None
    return CompletionResult(translated_text=content.strip())


def post_reply(slack_client: Any, request: TranslationRequest, result: CompletionResult) -> PostedReply:
    """Post the translation in the original message's thread."""
    payload = {
        "channel": request.channel_id,
        "text": result.translated_text,
        "thread_ts": request.message_ts,
    }
    logger.info("Posting translation to %s in thread %s", request.channel_id, request.message_ts)
    logger.debug("Post message payload: %s", json.dumps(payload, ensure_ascii=False))

    resp = slack_client.chat_postMessage(**payload)
    return PostedReply(ts=parse_post_message(resp).ts)
