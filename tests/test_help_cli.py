from __future__ import annotations

import logging

import pytest

from grofer import config
from grofer.app import cli
from grofer.ui_curses.help import HelpKeybindingType


@pytest.fixture(autouse=True)
def _default_config(monkeypatch) -> None:
    monkeypatch.delenv("GROFER_CONFIG", raising=False)
    monkeypatch.setattr(config, "_CONFIG", config.Config())


def test_plain_line_strips_markup() -> None:
    assert cli.plain_line("[Sorting](fg:white)") == "Sorting"
    assert cli.plain_line("  - k and <Up>: up") == "  - k and <Up>: up"
    assert cli.plain_line("") == ""


def test_cli_prints_requested_command(capsys) -> None:
    cli.main(["per-proc"])
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Quit: q or <C-c>",
        "Pause Rendering: s",
        "",
        "[To close this prompt: <Esc>](fg:white)",
    ]


def test_cli_plain_output(capsys) -> None:
    cli.main(["container", "--plain"])
    lines = capsys.readouterr().out.splitlines()
    assert "Container actions" in lines
    assert lines[-1] == "To close this prompt: <Esc>"
    assert not any(line.startswith("[") for line in lines)


def test_cli_uses_configured_command_and_markup(monkeypatch, capsys) -> None:
    monkeypatch.setattr(config, "_CONFIG", config.Config(markup="strip", command="proc"))
    cli.main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines[3] == "Process navigation"


def test_cli_unknown_configured_command_shows_default(monkeypatch, capsys, caplog) -> None:
    monkeypatch.setattr(config, "_CONFIG", config.Config(command="bogus"))
    with caplog.at_level(logging.WARNING):
        cli.main([])
    assert capsys.readouterr().out.splitlines() == [
        "",
        "[To close this prompt: <Esc>](fg:white)",
    ]
    assert "bogus" in caplog.text


def test_cli_rejects_unknown_command_argument(capsys) -> None:
    with pytest.raises(SystemExit):
        cli.main(["bogus"])
    assert "invalid choice" in capsys.readouterr().err


def test_resolve_command_maps_names() -> None:
    assert cli.resolve_command("root") is HelpKeybindingType.ROOT_COMMAND
    assert cli.resolve_command(None) is HelpKeybindingType.ROOT_COMMAND


def test_render_lines_returns_fresh_lists() -> None:
    lines = cli.render_lines(HelpKeybindingType.ROOT_COMMAND)
    lines.append("extra")
    assert cli.render_lines(HelpKeybindingType.ROOT_COMMAND)[-1] == (
        "[To close this prompt: <Esc>](fg:white)"
    )
