"""Package entry point for ``python -m slack_translator``.

WHY: Users start the bot (or run a one-off translation) with
``python -m slack_translator``.

HOW: Delegates to the CLI's main() function. Without a subcommand the
CLI starts the Socket Mode bot.
"""

from slack_translator.cli import main

if __name__ == "__main__":
    main()
