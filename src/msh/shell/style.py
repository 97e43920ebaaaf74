"""SGR color codes used by the shell's own output."""

from __future__ import annotations

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"

FG_RED = "\x1b[38;2;255;0;0m"

# #6C8197
C_PATH = "\x1b[38;2;108;129;151m"
# #ECC667
C_PROMPT = "\x1b[38;2;236;198;103m"

# ps states
# #B4F8C8
PS_RUNNING = "\x1b[38;2;180;248;200m"
# #A0E7E5
PS_IDLE = "\x1b[38;2;160;231;229m"
# #FFAEBC
PS_SLEEPING = "\x1b[38;2;255;174;188m"


def error_text(message: str) -> str:
    return f"{FG_RED}{message}{RESET}"
