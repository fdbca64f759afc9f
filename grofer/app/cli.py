#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import re
import sys

from grofer.config import get_config, strip_markup_enabled
from grofer.ui_curses.help import (
    HelpKeybindingType,
    command_names,
    help_keybindings_for_command,
)

logger = logging.getLogger(__name__)

_MARKUP = re.compile(r"\[(?P<text>[^\]]*)\]\((?P<style>[^)]*)\)")


def plain_line(line: str) -> str:
    """Drop `[text](style)` markup, keeping only the text."""
    return _MARKUP.sub(lambda match: match.group("text"), line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grofer-help",
        description="Print the keybindings of a grofer command",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=command_names(),
        default=None,
        help="Command to show keybindings for (default: from config, else root)",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Strip style markup from the output",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and more verbose error reporting",
    )
    return parser


def resolve_command(name: str | None) -> HelpKeybindingType | None:
    command = name if name is not None else get_config().command
    kind = HelpKeybindingType.from_name(command)
    if kind is None:
        logger.warning("unknown command %r, showing default help", command)
    return kind


def render_lines(kind: HelpKeybindingType | None, plain: bool = False) -> list[str]:
    lines = help_keybindings_for_command(kind)
    if plain:
        return [plain_line(line) for line in lines]
    return lines


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the grofer help printer.

    Usage:
        grofer-help [--plain] [--debug] [COMMAND]
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        kind = resolve_command(args.command)
        lines = render_lines(kind, plain=args.plain or strip_markup_enabled())
        print("\n".join(lines))
    except (OSError, ValueError) as exc:  # pragma: no cover
        if args.debug:
            raise
        print(f"grofer-help error: {exc}", file=sys.stderr)


if __name__ == "__main__":
    main()
