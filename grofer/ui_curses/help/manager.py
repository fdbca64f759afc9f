from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum
from typing import Any

from .data import (
    CONTAINER_COMMAND_HELP,
    DEFAULT_HELP,
    MAIN_COMMAND_HELP,
    PER_CONTAINER_COMMAND_HELP,
    PER_PROC_COMMAND_HELP,
    PROC_COMMAND_HELP,
)

logger = logging.getLogger(__name__)


class HelpKeybindingType(IntEnum):
    """Identifies which grofer command a help page describes."""

    # `grofer`
    ROOT_COMMAND = 0
    # `grofer proc`
    PROC_COMMAND = 1
    # `grofer proc -p <pid>`
    PER_PROC_COMMAND = 2
    # `grofer container`
    CONTAINER_COMMAND = 3
    # `grofer container -c <cid>`
    PER_CONTAINER_COMMAND = 4

    @property
    def command_name(self) -> str:
        return _COMMAND_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> HelpKeybindingType | None:
        key = name.strip().lower().replace("_", "-")
        for member, command_name in _COMMAND_NAMES.items():
            if command_name == key:
                return member
        return None


_COMMAND_NAMES: dict[HelpKeybindingType, str] = {
    HelpKeybindingType.ROOT_COMMAND: "root",
    HelpKeybindingType.PROC_COMMAND: "proc",
    HelpKeybindingType.PER_PROC_COMMAND: "per-proc",
    HelpKeybindingType.CONTAINER_COMMAND: "container",
    HelpKeybindingType.PER_CONTAINER_COMMAND: "per-container",
}


def command_names() -> list[str]:
    return [_COMMAND_NAMES[member] for member in HelpKeybindingType]


def default_help_keybindings() -> list[str]:
    return list(DEFAULT_HELP)


def error_keybindings() -> list[str]:
    return default_help_keybindings()


def main_command_keybindings() -> list[str]:
    return list(MAIN_COMMAND_HELP)


def proc_command_keybindings() -> list[str]:
    return list(PROC_COMMAND_HELP)


def per_proc_command_keybindings() -> list[str]:
    return list(PER_PROC_COMMAND_HELP)


def container_command_keybindings() -> list[str]:
    return list(CONTAINER_COMMAND_HELP)


def per_container_command_keybindings() -> list[str]:
    return list(PER_CONTAINER_COMMAND_HELP)


_KEYBINDINGS: dict[HelpKeybindingType, Callable[[], list[str]]] = {
    HelpKeybindingType.ROOT_COMMAND: main_command_keybindings,
    HelpKeybindingType.PROC_COMMAND: proc_command_keybindings,
    HelpKeybindingType.PER_PROC_COMMAND: per_proc_command_keybindings,
    HelpKeybindingType.CONTAINER_COMMAND: container_command_keybindings,
    HelpKeybindingType.PER_CONTAINER_COMMAND: per_container_command_keybindings,
}


def _as_keybinding_type(value: Any) -> HelpKeybindingType | None:
    if isinstance(value, HelpKeybindingType):
        return value
    # bool is an int subclass but never names a command
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    try:
        return HelpKeybindingType(value)
    except ValueError:
        return None


def help_keybindings_for_command(for_command: Any = None) -> list[str]:
    """
    Return the help lines shown in the help prompt of a command.

    Any value that is not one of the known keybinding types, including
    out-of-range integers and None, gets the default help lines. A new list
    is built on every call, so callers may modify the result freely.
    """
    kind = _as_keybinding_type(for_command)
    if kind is None:
        logger.debug("no help keybindings for %r, using default", for_command)
        return default_help_keybindings()
    return _KEYBINDINGS[kind]()
