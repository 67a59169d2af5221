"""Slack message translator: translate a message and reply in its thread.

WHY: Teams working across languages want a one-click way to read a
Slack message in their own language. This package provides a Slack
custom function that fetches a message, asks a language model for a
translation, and posts the result as a thread reply.

HOW: One sequential chain, fetch -> translate -> reply, implemented by
translate.translate_message. The Slack side (function definition and
Bolt listener) lives in the slack package; the completion provider
client lives in the api package.

RULES:
- No retries, no caching, no persistence
- Every invocation is independent
"""

__version__ = "0.1.0"
