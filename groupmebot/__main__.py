"""Command-line entry point: ``python -m groupmebot --config bot_cfg.json``."""

import argparse
import importlib
import sys
from typing import Callable, List, Optional

from groupmebot.app import GroupMeBot
from groupmebot.config import BotConfig


def load_hook_installer(path: str) -> Callable[[GroupMeBot], None]:
    """Resolve ``package.module:attr`` to a callable that registers triggers."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Expected module:function, got {path!r}")
    module = importlib.import_module(module_name)
    installer = getattr(module, attr)
    if not callable(installer):
        raise TypeError(f"{path} is not callable")
    return installer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="groupmebot", description="Serve a GroupMe bot")
    parser.add_argument("--config", "-c", default="bot_cfg.json", help="Bot configuration JSON")
    parser.add_argument(
        "--hooks",
        action="append",
        default=[],
        metavar="MODULE:FUNC",
        help="Callable that registers triggers on the bot (repeatable)",
    )
    parser.add_argument(
        "--env",
        action="store_true",
        help="Let GROUPME_* environment variables (and .env) override the config file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = BotConfig.from_json(args.config)
    except (OSError, ValueError) as e:
        print(f"Error reading bot configuration {args.config}: {e}", file=sys.stderr)
        return 1
    if args.env:
        config = BotConfig.from_env(config)

    bot = GroupMeBot(config)
    for path in args.hooks:
        try:
            installer = load_hook_installer(path)
        except (ImportError, AttributeError, TypeError, ValueError) as e:
            print(f"Error loading hooks {path}: {e}", file=sys.stderr)
            return 1
        installer(bot)

    if len(bot.registry) == 0:
        print("⚠️ No triggers registered; the bot will only log messages", file=sys.stderr)

    bot.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
