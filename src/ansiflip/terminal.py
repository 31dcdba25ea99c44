import os
import sys
from typing import TextIO

CLEAR_SCREEN = "\033[H\033[2J"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


def grid_width_for_terminal(columns: int) -> int:
    """Number of grid pixels that fit in ``columns`` character cells."""
    return max(1, columns // 2)


def clear_screen(out: TextIO) -> None:
    out.write(CLEAR_SCREEN)
    out.flush()
