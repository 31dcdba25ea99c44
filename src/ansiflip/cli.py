import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from ansiflip.converter import load_image_as_grid
from ansiflip.errors import LoadError, OutOfRangeColor
from ansiflip.grid import Grid
from ansiflip.render import render_grid
from ansiflip.terminal import clear_screen, get_terminal_size, grid_width_for_terminal
from ansiflip.transforms import (
    TRANSFORMS,
    apply_transforms,
    mirror_horizontal,
    mirror_vertical,
    rotate_clockwise,
    rotate_counterclockwise,
)

MENU = """
MENU:
1. Rotate clockwise
2. Rotate counterclockwise
3. Mirror horizontal
4. Mirror vertical
5. Quit
Select an option: """

MENU_ACTIONS = {
    "1": rotate_clockwise,
    "2": rotate_counterclockwise,
    "3": mirror_horizontal,
    "4": mirror_vertical,
}
QUIT = "5"


def run_session(
    grid: Grid,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
    clear: bool = True,
) -> Grid:
    """Show the grid and menu until the user quits. Returns the final grid."""
    read_line = read_line or input
    out = out or sys.stdout
    while True:
        if clear:
            clear_screen(out)
        out.write("Current image:\n")
        render_grid(grid, out)
        out.write(MENU)
        out.flush()

        try:
            choice = read_line().strip()
        except (EOFError, KeyboardInterrupt):
            out.write("\n")
            return grid

        if choice in MENU_ACTIONS:
            grid = MENU_ACTIONS[choice](grid)
        elif choice == QUIT:
            if clear:
                clear_screen(out)
            out.write("Goodbye!\n")
            return grid
        else:
            out.write("Invalid option. Press Enter to continue...\n")
            out.flush()
            try:
                read_line()
            except (EOFError, KeyboardInterrupt):
                out.write("\n")
                return grid


def main(argv=None):
    parser = argparse.ArgumentParser(description="Rotate and mirror an image in the terminal")
    parser.add_argument("image", nargs="?", default="image.png", help="Path to input image (default: image.png)")
    parser.add_argument(
        "-s", "--size", type=int, default=None, help="Grid width in pixels (default: fit terminal width)"
    )
    parser.add_argument(
        "-t",
        "--transform",
        action="append",
        choices=list(TRANSFORMS),
        default=None,
        help="Apply a transform, print the result and exit. May be repeated; applied in order.",
    )
    parser.add_argument("--no-clear", action="store_true", default=False, help="Don't clear the console between repaints")
    args = parser.parse_args(argv)

    if args.size is not None and args.size < 1:
        parser.error("--size must be at least 1")
    width = args.size if args.size is not None else grid_width_for_terminal(get_terminal_size()[0])

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    try:
        grid = load_image_as_grid(image_path, width=width)
    except LoadError as e:
        print(f"Error loading image: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.transform:
            render_grid(apply_transforms(grid, args.transform), sys.stdout)
        else:
            run_session(grid, clear=not args.no_clear)
    except OutOfRangeColor as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
