"""
Geometric transforms on colour grids.

Each function returns a new Grid and leaves its input untouched.
"""
from collections.abc import Callable, Iterable

import numpy as np

from ansiflip.grid import Grid


def rotate_clockwise(grid) -> Grid:
    """Rotate 90° clockwise. An R×C grid becomes C×R."""
    return Grid(np.rot90(Grid.from_rows(grid).cells, k=-1))


def rotate_counterclockwise(grid) -> Grid:
    """Rotate 90° counterclockwise. An R×C grid becomes C×R."""
    return Grid(np.rot90(Grid.from_rows(grid).cells, k=1))


def mirror_horizontal(grid) -> Grid:
    """Mirror left-right (reverse the columns)."""
    return Grid(np.fliplr(Grid.from_rows(grid).cells))


def mirror_vertical(grid) -> Grid:
    """Mirror top-bottom (reverse the rows)."""
    return Grid(np.flipud(Grid.from_rows(grid).cells))


TRANSFORMS: dict[str, Callable[..., Grid]] = {
    "cw": rotate_clockwise,
    "ccw": rotate_counterclockwise,
    "mirror-h": mirror_horizontal,
    "mirror-v": mirror_vertical,
}


def apply_transforms(grid, names: Iterable[str]) -> Grid:
    grid = Grid.from_rows(grid)
    for name in names:
        grid = TRANSFORMS[name](grid)
    return grid
