class GridError(ValueError):
    """Base class for invalid grid data."""


class InvalidGridShape(GridError):
    """Grid rows are missing or of differing lengths."""


class OutOfRangeColor(GridError):
    """A cell holds a value outside the 256-colour palette."""

    def __init__(self, value: int, row: int | None = None, column: int | None = None):
        self.value = value
        self.row = row
        self.column = column
        where = f" at row {row}, column {column}" if row is not None else ""
        super().__init__(f"Colour code {value}{where} is outside the range 0-255")


class LoadError(Exception):
    """The image could not be read or decoded."""
