"""Slack integration for the message translator.

WHY: The translator runs as a Slack custom function. This package holds
everything Slack-specific: the function declaration, the schemas of the
two Web API responses we read, and the Bolt listener.

HOW: The bot runs as a Socket Mode process using slack-bolt. Slack calls
the ``translate`` function; the listener hands the inputs and the
function-scoped WebClient to translate.translate_message.

RULES:
- Socket Mode requires SLACK_BOT_TOKEN and SLACK_APP_TOKEN
- The app needs channels:history (or groups:history) and chat:write scopes
"""
