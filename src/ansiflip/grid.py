from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np

from ansiflip.errors import InvalidGridShape, OutOfRangeColor

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Grid:
    """Immutable rectangular 2D array of colour codes.

    Cells are stored in a read-only int64 array of shape (rows, cols).
    Palette range is checked by the renderer; values that do not fit
    in int64 raise OutOfRangeColor here.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray):
        cells = np.asarray(cells)
        if cells.ndim != 2 or cells.shape[0] == 0 or cells.shape[1] == 0:
            raise InvalidGridShape(f"Grid must be a non-empty 2D array, got shape {cells.shape}")
        if cells.dtype.kind not in "iub":
            raise TypeError(f"Grid cells must be integers, got {cells.dtype}")
        if cells.dtype.kind == "u" and cells.max() > INT64_MAX:
            raise OutOfRangeColor(int(cells.max()))
        cells = np.array(cells, dtype=np.int64)
        cells.flags.writeable = False
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Grid | np.ndarray | Sequence[Sequence[int]]) -> Grid:
        """Build a grid from a sequence of equal-length rows."""
        if isinstance(rows, Grid):
            return rows
        if isinstance(rows, np.ndarray):
            return cls(rows)
        rows = [list(row) for row in rows]
        if not rows:
            raise InvalidGridShape("Grid must have at least one row")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGridShape(f"Row {i} has {len(row)} cells, expected {width}")
            for j, value in enumerate(row):
                if isinstance(value, (int, np.integer)) and not INT64_MIN <= value <= INT64_MAX:
                    raise OutOfRangeColor(int(value), row=i, column=j)
        return cls(np.array(rows))

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def tolist(self) -> list[list[int]]:
        return self._cells.tolist()

    def __iter__(self) -> Iterator[list[int]]:
        return iter(self.tolist())

    def __getitem__(self, index: tuple[int, int]) -> int:
        return int(self._cells[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.tolist()!r})"
