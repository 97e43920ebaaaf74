"""msh-shell: minimal interactive shell built on msh.line."""

from msh.shell.args import parse_arguments
from msh.shell.builtins import BUILTINS, ShellState
from msh.shell.prompt import make_prompt
from msh.shell.repl import Shell
from msh.shell.runner import run_external
from msh.shell.settings import (
    EditorSettings,
    PromptSettings,
    SettingsManager,
    deep_merge_settings,
)

__all__ = [
    # Parsing
    "parse_arguments",
    # Builtins
    "BUILTINS",
    "ShellState",
    # REPL
    "Shell",
    "make_prompt",
    "run_external",
    # Settings
    "EditorSettings",
    "PromptSettings",
    "SettingsManager",
    "deep_merge_settings",
]
