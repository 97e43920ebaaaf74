"""Launching external programs."""

from __future__ import annotations

import logging
import subprocess
import sys

from msh.shell.style import error_text

logger = logging.getLogger(__name__)

EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


def run_external(argv: list[str]) -> int:
    """Run *argv* with the shell's stdio and wait for it to finish."""
    logger.debug("Running %s", argv)
    sys.stdout.flush()
    try:
        proc = subprocess.run(argv)
    except FileNotFoundError as e:
        print(error_text(f"Error: {e.strerror}: {argv[0]}"), file=sys.stderr)
        return EXIT_NOT_FOUND
    except PermissionError as e:
        print(error_text(f"Error: {e.strerror}: {argv[0]}"), file=sys.stderr)
        return EXIT_NOT_EXECUTABLE
    except OSError as e:
        print(error_text(f"Error: {e}"), file=sys.stderr)
        return EXIT_NOT_EXECUTABLE
    return proc.returncode
