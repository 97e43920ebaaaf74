"""CLI entry point for msh. Uses Click for option parsing."""

from __future__ import annotations

import logging
import sys

import click

from msh.line.editor import LineEditor
from msh.line.history import History
from msh.line.terminal import ProcessTerminal
from msh.shell.prompt import make_prompt
from msh.shell.repl import Shell
from msh.shell.settings import SettingsManager


def build_overrides(
    history_size: int | None,
    max_line_length: int | None,
    no_color: bool,
) -> dict:
    """Translate CLI options into a settings override dict."""
    return {
        "editor": {
            "historySize": history_size,
            "maxLineLength": max_line_length,
        },
        "prompt": {"color": False if no_color else None},
    }


@click.command()
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding settings.json (default: $MSH_CONFIG_DIR or ~/.msh)",
)
@click.option("--history-size", type=int, default=None, help="Number of history entries kept")
@click.option(
    "--max-line-length",
    type=click.IntRange(min=2),
    default=None,
    help="Capacity of the edit line",
)
@click.option("--no-color", is_flag=True, default=False, help="Plain prompt without colors")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Diagnostics level (written to stderr)",
)
def main(config_dir, history_size, max_line_length, no_color, log_level):
    """Minimal interactive shell."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    manager = SettingsManager.create(config_dir)
    manager.apply_overrides(build_overrides(history_size, max_line_length, no_color))
    editor_settings = manager.get_editor_settings()
    prompt_settings = manager.get_prompt_settings()

    terminal = ProcessTerminal(default_width=editor_settings.default_width)
    editor = LineEditor(
        terminal,
        lambda: make_prompt(prompt_settings),
        history=History(editor_settings.history_size),
        max_line_length=editor_settings.max_line_length,
    )
    sys.exit(Shell(editor).run())


if __name__ == "__main__":
    main()
