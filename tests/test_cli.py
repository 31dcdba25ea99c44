import io

import pytest

from ansiflip.cli import main, run_session
from ansiflip.grid import Grid
from ansiflip.render import format_grid
from ansiflip.terminal import CLEAR_SCREEN


def scripted(*lines):
    """Return a read_line callable that replays lines, then raises EOFError."""
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_session_rotates_then_quits():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    out = io.StringIO()
    result = run_session(grid, read_line=scripted("1", "5"), out=out)
    assert result.tolist() == [[3, 1], [4, 2]]
    text = out.getvalue()
    assert text.count("Current image:") == 2
    assert format_grid([[3, 1], [4, 2]]) in text
    assert text.endswith(CLEAR_SCREEN + "Goodbye!\n")


@pytest.mark.parametrize(
    "choice,expected",
    [("1", [[3, 1], [4, 2]]), ("2", [[2, 4], [1, 3]]), ("3", [[2, 1], [4, 3]]), ("4", [[3, 4], [1, 2]])],
)
def test_session_menu_options(choice, expected):
    result = run_session(Grid.from_rows([[1, 2], [3, 4]]), read_line=scripted(choice, "5"), out=io.StringIO())
    assert result.tolist() == expected


def test_session_invalid_option_waits_for_enter():
    out = io.StringIO()
    grid = Grid.from_rows([[7]])
    result = run_session(grid, read_line=scripted("9", "", "5"), out=out, clear=False)
    assert result == grid
    text = out.getvalue()
    assert "Invalid option. Press Enter to continue..." in text
    assert CLEAR_SCREEN not in text


def test_session_ends_on_eof():
    grid = Grid.from_rows([[1, 2]])
    result = run_session(grid, read_line=scripted("3"), out=io.StringIO())
    assert result.tolist() == [[2, 1]]


def test_session_menu_text():
    out = io.StringIO()
    run_session(Grid.from_rows([[1]]), read_line=scripted("5"), out=out)
    for label in ("Rotate clockwise", "Rotate counterclockwise", "Mirror horizontal", "Mirror vertical", "Quit"):
        assert label in out.getvalue()


def test_main_scripted_transforms(stripes_png, capsys):
    main([str(stripes_png), "-t", "cw", "-t", "mirror-h"])
    out = capsys.readouterr().out
    # stripes is 2x3: [[196, 46, 21], [15, 15, 15]]; cw -> [[15,196],[15,46],[15,21]]; mirror-h swaps columns
    assert out == format_grid([[196, 15], [46, 15], [21, 15]])


def test_main_size_downscales(stripes_png, capsys):
    main([str(stripes_png), "-s", "1", "-t", "mirror-v"])
    out = capsys.readouterr().out
    assert out.count("\033[48;5;") == 1


def test_main_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.png")])
    assert excinfo.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_main_bad_image(tmp_path, capsys):
    path = tmp_path / "bad.png"
    path.write_bytes(b"garbage")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    assert "Error loading image" in capsys.readouterr().err


def test_main_rejects_unknown_transform(stripes_png):
    with pytest.raises(SystemExit) as excinfo:
        main([str(stripes_png), "-t", "spin"])
    assert excinfo.value.code == 2


def test_main_rejects_zero_size(stripes_png):
    with pytest.raises(SystemExit) as excinfo:
        main([str(stripes_png), "-s", "0"])
    assert excinfo.value.code == 2


def test_main_interactive(stripes_png, monkeypatch, capsys):
    answers = iter(["4", "5"])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    main([str(stripes_png), "--no-clear"])
    out = capsys.readouterr().out
    assert format_grid([[15, 15, 15], [196, 46, 21]]) in out
    assert out.endswith("Goodbye!\n")
