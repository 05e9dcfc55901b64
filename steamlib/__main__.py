"""Command line entry point for inspecting the local Steam library."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from .errors import ExtensionError
from .extension import SteamExtension
from .settings import SETTINGS_FILE, load_settings

LOGGER = logging.getLogger("steamlib")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="steamlib", description=__doc__)
    parser.add_argument("--settings", default=SETTINGS_FILE, help="JSON settings file")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("scan", help="list installed games")
    for name, help_text in (("details", "resolve one game"), ("launch", "start one game")):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("appid", type=int)
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> object:
    extension = SteamExtension(load_settings(args.settings))
    await extension.initialize()
    try:
        if args.command == "scan":
            return await extension.handle_hook("scan_games")
        hook = "get_game_details" if args.command == "details" else "launch_game"
        return await extension.handle_hook(hook, {"appid": args.appid})
    finally:
        await extension.shutdown()


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    try:
        result = asyncio.run(_run(args))
    except ExtensionError as exc:
        LOGGER.error("%s", exc)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
