import pytest
from PIL import Image

from ansiflip.grid import Grid

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def tall_grid():
    """A 3x2 grid with distinct cells, handy for catching transposed-shape bugs."""
    return Grid.from_rows([[1, 2], [3, 4], [5, 6]])


@pytest.fixture
def stripes_png(tmp_path):
    """A 3x2 PNG: top row red/green/blue, bottom row transparent."""
    img = Image.new("RGBA", (3, 2), (0, 0, 0, 0))
    pixels = img.load()
    for x, colour in enumerate((RED, GREEN, BLUE)):
        pixels[x, 0] = colour + (255,)
    path = tmp_path / "stripes.png"
    img.save(path)
    return path
