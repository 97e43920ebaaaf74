"""Prompt rendering: ``[<cwd>] $ `` with optional colors."""

from __future__ import annotations

import os

from msh.shell.settings import PromptSettings
from msh.shell.style import C_PATH, C_PROMPT, RESET


def make_prompt(settings: PromptSettings | None = None, cwd: str | None = None) -> str:
    """Build the prompt for the current working directory.

    Called on every repaint, so directory changes show up immediately.
    """
    settings = settings or PromptSettings()
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = "?"
    if not settings.color:
        return f"[{cwd}] {settings.symbol} "
    return f"{C_PATH}[{cwd}]{RESET} {C_PROMPT}{settings.symbol}{RESET} "
