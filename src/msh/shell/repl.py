"""The read-parse-dispatch loop."""

from __future__ import annotations

import logging

from msh.line.editor import LineEditor
from msh.shell.args import parse_arguments
from msh.shell.builtins import BUILTINS, ShellState
from msh.shell.runner import run_external

logger = logging.getLogger(__name__)


class Shell:
    """Reads lines with a :class:`LineEditor` and runs them."""

    def __init__(self, editor: LineEditor, state: ShellState | None = None) -> None:
        self._editor = editor
        self.state = state if state is not None else ShellState()
        self.last_status = 0

    @property
    def editor(self) -> LineEditor:
        return self._editor

    def run(self) -> int:
        """Loop until ``exit`` or end of input on an empty line."""
        while self.state.running:
            line = self._editor.read_line()
            if not line and self._editor.at_eof:
                logger.debug("End of input, leaving")
                break
            self.execute(line)
        return self.last_status

    def execute(self, line: str) -> None:
        argv = parse_arguments(line)
        if not argv:
            return
        builtin = BUILTINS.get(argv[0])
        if builtin is not None:
            builtin(self.state, argv)
            self.last_status = 0
        else:
            self.last_status = run_external(argv)
        if self._editor.at_eof:
            self.state.running = False
