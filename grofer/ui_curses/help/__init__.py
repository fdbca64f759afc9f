from __future__ import annotations

from .manager import (
    HelpKeybindingType,
    command_names,
    container_command_keybindings,
    default_help_keybindings,
    error_keybindings,
    help_keybindings_for_command,
    main_command_keybindings,
    per_container_command_keybindings,
    per_proc_command_keybindings,
    proc_command_keybindings,
)


def help_for_command_name(name: str) -> list[str]:
    return help_keybindings_for_command(HelpKeybindingType.from_name(name))


__all__ = [
    "HelpKeybindingType",
    "command_names",
    "container_command_keybindings",
    "default_help_keybindings",
    "error_keybindings",
    "help_for_command_name",
    "help_keybindings_for_command",
    "main_command_keybindings",
    "per_container_command_keybindings",
    "per_proc_command_keybindings",
    "proc_command_keybindings",
]
