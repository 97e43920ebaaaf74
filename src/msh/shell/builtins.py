"""Builtin commands: help, exit, type, cd, ps, args."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from msh.shell.style import BOLD, ITALIC, PS_IDLE, PS_RUNNING, PS_SLEEPING, RESET, error_text

PROC_ROOT = Path("/proc")


@dataclass
class ShellState:
    """State shared by builtins across commands."""

    running: bool = True
    last_cd_location: str | None = None
    proc_root: Path = PROC_ROOT


Builtin = Callable[[ShellState, list[str]], None]


def _error(message: str) -> None:
    print(error_text(message), file=sys.stderr)


# ---------------------------------------------------------------------------
# exit / help / type / args
# ---------------------------------------------------------------------------


def cmd_exit(state: ShellState, argv: list[str]) -> None:
    print("bye!")
    state.running = False


def cmd_help(state: ShellState, argv: list[str]) -> None:
    print(f"{BOLD}msh{RESET}, available commands:")
    print(f"  {ITALIC}help{RESET} - see this list of available commands")
    print(f"  {ITALIC}exit{RESET} - exit the shell")
    print(f"  {ITALIC}type{RESET} - see if a command is external or a builtin")
    print(f"    {ITALIC}cd{RESET} - change working directory")
    print(f"    {ITALIC}ps{RESET} - list running processes")
    print(f"  {ITALIC}args{RESET} - show how a line is split into arguments")
    print(f"{BOLD}line editing:{RESET}")
    print("* left/right arrows, backspace and delete")
    print("* up/down arrows walk the command history")
    print("* single and double quoted arguments")


def cmd_type(state: ShellState, argv: list[str]) -> None:
    if len(argv) == 1:
        _error("name a command!")
        return
    if len(argv) > 2:
        _error("too many arguments!")
        return
    print("builtin" if argv[1] in BUILTINS else "external")


def cmd_args(state: ShellState, argv: list[str]) -> None:
    print(f"{len(argv)} args:")
    for arg in argv:
        print(arg)


# ---------------------------------------------------------------------------
# cd
# ---------------------------------------------------------------------------


def cmd_cd(state: ShellState, argv: list[str]) -> None:
    if len(argv) > 2:
        _error("too many arguments!")
        return

    home = os.environ.get("HOME") or os.path.expanduser("~")
    if len(argv) == 1 or argv[1] == "~":
        target = home
    elif argv[1] == "-":
        if state.last_cd_location is None:
            return
        target = state.last_cd_location
    else:
        target = argv[1]

    previous = os.getcwd()
    try:
        os.chdir(target)
    except OSError:
        _error(f'cd: The directory "{target}" does not exist')
        return
    state.last_cd_location = previous


# ---------------------------------------------------------------------------
# ps
# ---------------------------------------------------------------------------

_STATE_COLORS = {
    "R": PS_RUNNING,
    "I": PS_IDLE,
    "S": PS_SLEEPING,
}


def read_process_status(status_path: Path) -> tuple[str, str, str, str] | None:
    """Return ``(pid, ppid, name, state)`` from a ``/proc/<pid>/status`` file."""
    try:
        content = status_path.read_text(errors="replace")
    except OSError:
        return None
    fields: dict[str, str] = {}
    for line in content.splitlines():
        key, sep, value = line.partition(":")
        if sep:
            fields[key] = value.strip()
    try:
        return fields["Pid"], fields["PPid"], fields["Name"], fields["State"]
    except KeyError:
        return None


def list_processes(proc_root: Path = PROC_ROOT) -> list[tuple[str, str, str, str]]:
    rows: list[tuple[str, str, str, str]] = []
    try:
        entries = sorted(
            (p for p in proc_root.iterdir() if p.name.isdigit()),
            key=lambda p: int(p.name),
        )
    except OSError:
        return rows
    for entry in entries:
        row = read_process_status(entry / "status")
        if row is not None:
            rows.append(row)
    return rows


def format_process_table(rows: list[tuple[str, str, str, str]]) -> list[str]:
    """Align a ``PID PPID NAME STATE`` table; the state column is colored."""
    table = [("PID", "PPID", "NAME", "STATE"), *rows]
    w0, w1, w2, w3 = (max(len(row[i]) for row in table) for i in range(4))
    lines: list[str] = []
    for i, (pid, ppid, name, st) in enumerate(table):
        color = RESET if i == 0 else _STATE_COLORS.get(st[:1], RESET)
        lines.append(f"{pid:>{w0}}  {ppid:>{w1}}  {name:<{w2}}  {color}{st:<{w3}}{RESET}")
    return lines


def cmd_ps(state: ShellState, argv: list[str]) -> None:
    for line in format_process_table(list_processes(state.proc_root)):
        print(line)


BUILTINS: dict[str, Builtin] = {
    "help": cmd_help,
    "exit": cmd_exit,
    "type": cmd_type,
    "cd": cmd_cd,
    "ps": cmd_ps,
    "args": cmd_args,
}
