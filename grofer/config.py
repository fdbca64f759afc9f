from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

MARKUP_MODES = ("keep", "strip")


@dataclass
class Config:
    markup: str = "keep"
    command: str = "root"


_CONFIG: Config | None = None


def get_config() -> Config:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _load_config()
    return _CONFIG


def config_path() -> Path:
    override = os.environ.get("GROFER_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path("~/.config/grofer/config.toml").expanduser()


def strip_markup_enabled() -> bool:
    return get_config().markup == "strip"


def _load_config() -> Config:
    if os.environ.get("PYTEST_CURRENT_TEST") and "GROFER_CONFIG" not in os.environ:
        return Config()
    cfg = Config()
    path = config_path()
    if path.is_file():
        try:
            raw = tomllib.loads(path.read_text())
        except (OSError, tomllib.TOMLDecodeError):
            raw = {}
        _apply_file_config(cfg, raw)

    _apply_env_overrides(cfg)
    return cfg


def _apply_file_config(cfg: Config, raw: dict[str, Any]) -> None:
    markup_value = raw.get("markup")
    if isinstance(markup_value, str) and markup_value.strip().lower() in MARKUP_MODES:
        cfg.markup = markup_value.strip().lower()

    command_value = raw.get("command")
    if isinstance(command_value, str) and command_value.strip():
        cfg.command = command_value.strip().lower()


def _apply_env_overrides(cfg: Config) -> None:
    env_markup = os.environ.get("GROFER_HELP_MARKUP")
    if env_markup and env_markup.strip().lower() in MARKUP_MODES:
        cfg.markup = env_markup.strip().lower()

    env_command = os.environ.get("GROFER_HELP_COMMAND")
    if env_command and env_command.strip():
        cfg.command = env_command.strip().lower()
