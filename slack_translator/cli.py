"""Command-line interface for the Slack message translator.

WHY: Operators need to start the bot, and it helps to run a single
translation from the terminal when checking a new API key or model
without going through a Slack workflow. Deploying the function also
needs its manifest declaration.

HOW: argparse with three subcommands:
- run: start the Socket Mode bot (default when no subcommand is given)
- translate: run translate_message once with a bot-token WebClient and
  print the outcome JSON to stdout
- definition: print the ``functions`` manifest section as JSON

RULES:
- Status output goes to stderr; results go to stdout
- translate exits 1 when the outcome is an error or a setup value is missing
- translate needs SLACK_BOT_TOKEN and OPENAI_API_KEY in the environment
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

from slack_sdk import WebClient

from slack_translator.config import TranslatorSettings
from slack_translator.models import TranslationRequest
from slack_translator.slack.definition import manifest_functions
from slack_translator.translate import translate_message


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr)


def _run_translate(args: argparse.Namespace) -> int:
    bot_token = os.environ.get("SLACK_BOT_TOKEN", "")
    if not bot_token:
        _status("Error: SLACK_BOT_TOKEN environment variable is required")
        return 1

    request = TranslationRequest.from_inputs(
        {"channelId": args.channel, "messageTs": args.ts, "lang": args.lang}
    )
    settings = TranslatorSettings.from_env()

    _status("Translating {} in {} into {}...".format(request.message_ts, request.channel_id, request.target_language))
    outcome = translate_message(request, WebClient(token=bot_token), settings)

    print(json.dumps(outcome.to_dict(), ensure_ascii=False))
    if not outcome.ok:
        return 1
    if "ts" in outcome.outputs:
        _status("Posted translation: {}".format(outcome.outputs["ts"]))
    else:
        _status("Nothing to translate; no reply posted.")
    return 0


def _run_definition(args: argparse.Namespace) -> int:
    print(json.dumps({"functions": manifest_functions()}, indent=args.indent))
    return 0


def _run_bot(args: argparse.Namespace) -> int:
    from slack_translator.slack.bot import main as bot_main

    bot_main()
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable without touching Slack or OpenAI.
    """
    parser = argparse.ArgumentParser(
        prog="slack_translator",
        description="Translate Slack messages with OpenAI and reply in their thread.",
    )
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Start the Slack bot in Socket Mode.")
    run.set_defaults(handler=_run_bot)

    translate = sub.add_parser("translate", help="Translate one message and post the reply.")
    translate.add_argument("--channel", required=True, help="Channel ID of the message.")
    translate.add_argument("--ts", required=True, help="Timestamp of the message.")
    translate.add_argument("--lang", required=True, help="Target language name or code.")
    translate.set_defaults(handler=_run_translate)

    definition = sub.add_parser("definition", help="Print the function manifest section.")
    definition.add_argument("--indent", type=int, default=2, help="JSON indent (default: %(default)s).")
    definition.set_defaults(handler=_run_definition)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - No subcommand starts the bot
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", _run_bot)

    try:
        code = handler(args)
    except ValueError as e:
        # Config errors (missing tokens, missing inputs)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
