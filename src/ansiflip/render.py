from typing import TextIO

import numpy as np

from ansiflip.errors import OutOfRangeColor
from ansiflip.grid import Grid

RESET = "\033[0m"
# Each pixel is painted as two blank cells so it looks roughly square
PIXEL = "  "
MIN_CODE = 0
MAX_CODE = 255


def code_to_escape_sequence(value: int) -> str:
    """Return the escape sequence setting the background to palette entry ``value``."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Colour code must be an integer, got {value!r}")
    if not MIN_CODE <= value <= MAX_CODE:
        raise OutOfRangeColor(value)
    return f"\033[48;5;{value}m"


def _check_range(grid: Grid) -> None:
    cells = grid.cells
    bad = np.argwhere((cells < MIN_CODE) | (cells > MAX_CODE))
    if len(bad):
        row, column = (int(i) for i in bad[0])
        raise OutOfRangeColor(int(cells[row, column]), row=row, column=column)


def format_grid(grid) -> str:
    """Render a grid to a string of escape sequences, one line per row.

    The whole grid is validated first, so an out-of-range cell raises
    OutOfRangeColor without producing any partial output.
    """
    grid = Grid.from_rows(grid)
    _check_range(grid)
    lines = []
    for row in grid:
        parts = [code_to_escape_sequence(value) + PIXEL for value in row]
        parts.append(RESET)
        lines.append("".join(parts) + "\n")
    lines.append("\n")
    return "".join(lines)


def render_grid(grid, out: TextIO) -> None:
    out.write(format_grid(grid))
