"""Tests for saving and overlay-loading canvases."""

import os
import stat
from pathlib import Path

import pytest

from terminal_paint.core.canvas import Canvas
from terminal_paint.io.reader import (
    CanvasFormatError,
    decode_token,
    deserialize,
    load_canvas,
    overlay,
    parse,
)
from terminal_paint.io.writer import save_canvas, serialize


def _patterned(width: int, height: int) -> Canvas:
    """Canvas where every cell differs from the default."""
    canvas = Canvas(width, height)
    for x, y, _ in canvas.cells():
        canvas.paint(x, y, chr(ord('A') + (x + y) % 26), (x * 3 + y) % 8)
    return canvas


class TestSerialize:
    """Tests for the save format."""

    def test_example(self, example_canvas: Canvas, example_text: str) -> None:
        assert serialize(example_canvas) == example_text

    def test_blank_canvas(self) -> None:
        assert serialize(Canvas(2, 1)) == "2 1\n7,32 7,32\n"

    def test_one_line_per_row(self) -> None:
        text = serialize(Canvas(4, 6))
        lines = text.splitlines()
        assert len(lines) == 7
        assert all(len(line.split()) == 4 for line in lines[1:])


class TestParse:
    """Tests for parsing saved text into a temporary grid."""

    def test_example(self, example_text: str) -> None:
        grid = parse(example_text)
        assert (grid.width, grid.height) == (3, 2)
        assert grid.get(0, 0).char == '#'
        assert grid.get(0, 0).color == 1
        assert grid.get(2, 1).char == '*'
        assert grid.get(2, 1).color == 3

    def test_out_of_range_values_coerced(self) -> None:
        assert decode_token("9,300") == (' ', 7)
        assert decode_token("-1,-5") == (' ', 7)
        assert decode_token("0,0") == ('\x00', 0)
        assert decode_token("7,255") == ('\xff', 7)

    def test_coerced_token_in_file(self) -> None:
        grid = parse("1 1\n9,300\n")
        assert grid.get(0, 0).char == ' '
        assert grid.get(0, 0).code == 32
        assert grid.get(0, 0).color == 7

    @pytest.mark.parametrize("text", [
        "",
        "\n",
        "3\n",
        "a b\n",
        "3 x\n",
        "0 2\n",
        "2 -1\n",
        "1001 1\n",
        "1 1001\n",
    ])
    def test_bad_header(self, text: str) -> None:
        with pytest.raises(CanvasFormatError):
            parse(text)

    def test_header_extra_tokens_ignored(self) -> None:
        grid = parse("1 1 extra\n2,65\n")
        assert grid.get(0, 0).char == 'A'

    def test_truncated_row(self) -> None:
        with pytest.raises(CanvasFormatError):
            parse("3 2\n1,35 7,32 7,32\n7,32 7,32\n")

    def test_missing_row(self) -> None:
        with pytest.raises(CanvasFormatError):
            parse("3 2\n1,35 7,32 7,32\n")

    @pytest.mark.parametrize("token", ["1;35", "1,", ",35", "a,b", "1,35,2", "1.0,35"])
    def test_bad_token(self, token: str) -> None:
        with pytest.raises(CanvasFormatError):
            parse(f"2 1\n7,32 {token}\n")

    def test_extra_tokens_and_lines_ignored(self) -> None:
        grid = parse("2 1\n1,65 2,66 3,67\n4,68 4,68\n")
        assert [cell.char for cell in next(grid.rows())] == ['A', 'B']

    def test_crlf_line_endings(self) -> None:
        grid = parse("1 1\r\n2,65\r\n")
        assert grid.get(0, 0).char == 'A'

    def test_oversized_number_in_token(self) -> None:
        with pytest.raises(CanvasFormatError):
            parse("2 1\n7,32 1," + "9" * 5000 + "\n")

    def test_oversized_number_in_header(self) -> None:
        with pytest.raises(CanvasFormatError):
            parse("9" * 5000 + " 1\n7,32\n")

    @pytest.mark.parametrize("token", ["١,65", "7,٣٢", "７,65"])
    def test_non_ascii_digits_rejected(self, token: str) -> None:
        with pytest.raises(CanvasFormatError):
            parse(f"1 1\n{token}\n")


class TestOverlay:
    """Tests for merging a loaded grid into the live canvas."""

    def test_round_trip(self) -> None:
        original = _patterned(6, 4)
        target = Canvas(6, 4)
        result = deserialize(serialize(original), target)
        assert result.loaded
        assert target.snapshot() == original.snapshot()

    def test_example_onto_blank(self, example_text: str) -> None:
        target = Canvas(3, 2)
        deserialize(example_text, target)
        assert target.get(0, 0).char == '#'
        assert target.get(0, 0).color == 1
        assert target.get(2, 1).char == '*'
        assert target.get(2, 1).color == 3
        painted = [(x, y) for x, y, cell in target.cells() if not cell.is_default()]
        assert painted == [(0, 0), (2, 1)]

    def test_smaller_file_touches_only_overlap(self) -> None:
        target = _patterned(5, 5)
        before = target.snapshot()
        text = "2 2\n0,46 0,46\n0,46 0,46\n"

        result = deserialize(text, target)

        assert (result.copied_width, result.copied_height) == (2, 2)
        for x, y, cell in target.cells():
            if x < 2 and y < 2:
                assert (cell.char, cell.color) == ('.', 0)
            else:
                assert (cell.char, cell.color) == before[y * 5 + x]

    def test_larger_file_clipped(self) -> None:
        source = _patterned(10, 10)
        target = Canvas(5, 5)

        result = deserialize(serialize(source), target)

        assert (result.file_width, result.file_height) == (10, 10)
        assert (result.copied_width, result.copied_height) == (5, 5)
        for x, y, cell in target.cells():
            assert (cell.char, cell.color) == (source.get(x, y).char, source.get(x, y).color)

    def test_overlay_copies_values(self) -> None:
        source = Canvas(1, 1)
        source.paint(0, 0, 'Q', 2)
        target = Canvas(2, 2)
        overlay(source, target)
        source.paint(0, 0, 'R', 3)
        assert target.get(0, 0).char == 'Q'

    def test_truncated_row_leaves_canvas_unchanged(self) -> None:
        target = _patterned(3, 2)
        before = target.snapshot()

        result = deserialize("3 2\n1,35 7,32 7,32\n7,32 7,32\n", target)

        assert not result.loaded
        assert result.error
        assert target.snapshot() == before

    def test_bad_header_leaves_canvas_unchanged(self) -> None:
        target = _patterned(3, 2)
        before = target.snapshot()
        result = deserialize("3 0\n", target)
        assert not result.ok
        assert target.snapshot() == before

    def test_oversized_number_leaves_canvas_unchanged(self) -> None:
        target = _patterned(2, 1)
        before = target.snapshot()
        result = deserialize("2 1\n7,32 1," + "9" * 5000 + "\n", target)
        assert not result.ok
        assert target.snapshot() == before


class TestFiles:
    """Tests for save_canvas / load_canvas on disk."""

    def test_save_and_load(self, tmp_path: Path, example_canvas: Canvas, example_text: str) -> None:
        path = tmp_path / "art.txt"

        saved = save_canvas(example_canvas, path)
        assert saved.ok
        assert path.read_text() == example_text

        target = Canvas(3, 2)
        loaded = load_canvas(target, path)
        assert loaded.ok
        assert loaded.path == path
        assert target.snapshot() == example_canvas.snapshot()
        assert "art.txt" in loaded.message

    def test_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        canvas = Canvas(2, 2)
        result = save_canvas(canvas)
        assert result.ok
        assert (tmp_path / "paint_save.txt").exists()
        assert load_canvas(Canvas(2, 2)).ok

    def test_save_overwrites(self, tmp_path: Path, example_canvas: Canvas) -> None:
        path = tmp_path / "art.txt"
        path.write_text("old contents")
        assert save_canvas(example_canvas, path).ok
        assert path.read_text().startswith("3 2\n")

    def test_save_failure_keeps_existing_file(
        self, tmp_path: Path, example_canvas: Canvas, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "art.txt"
        path.write_text("old contents")

        def fail_replace(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(os, "replace", fail_replace)
        result = save_canvas(example_canvas, path)

        assert not result.ok
        assert result.message == "Save failed: No space left on device"
        assert path.read_text() == "old contents"
        assert [p.name for p in tmp_path.iterdir()] == ["art.txt"]

    def test_save_into_missing_directory(self, tmp_path: Path, example_canvas: Canvas) -> None:
        path = tmp_path / "missing_dir" / "art.txt"
        result = save_canvas(example_canvas, path)
        assert not result.ok
        assert "Save failed" in result.message
        assert not path.exists()

    @pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
    def test_save_keeps_file_mode(self, tmp_path: Path, example_canvas: Canvas) -> None:
        path = tmp_path / "art.txt"
        path.write_text("old contents")
        path.chmod(0o644)
        assert save_canvas(example_canvas, path).ok
        assert stat.S_IMODE(path.stat().st_mode) == 0o644

        path.chmod(0o640)
        assert save_canvas(example_canvas, path).ok
        assert stat.S_IMODE(path.stat().st_mode) == 0o640

    @pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
    def test_new_file_gets_umask_default(self, tmp_path: Path, example_canvas: Canvas) -> None:
        old_umask = os.umask(0o022)
        try:
            assert save_canvas(example_canvas, tmp_path / "art.txt").ok
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE((tmp_path / "art.txt").stat().st_mode) == 0o644

    def test_save_leaves_no_temp_files(self, tmp_path: Path, example_canvas: Canvas) -> None:
        save_canvas(example_canvas, tmp_path / "art.txt")
        assert [p.name for p in tmp_path.iterdir()] == ["art.txt"]

    def test_load_missing_file(self, tmp_path: Path) -> None:
        canvas = _patterned(3, 3)
        before = canvas.snapshot()
        result = load_canvas(canvas, tmp_path / "nope.txt")
        assert not result.ok
        assert "Load failed" in result.message
        assert canvas.snapshot() == before

    def test_load_rejected_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("2 2\n7,32 7,32\n")
        canvas = _patterned(3, 3)
        before = canvas.snapshot()
        result = load_canvas(canvas, path)
        assert not result.ok
        assert result.path == path
        assert canvas.snapshot() == before

    def test_load_non_ascii_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bin.txt"
        path.write_bytes(b"\xff\xfe\x00")
        assert not load_canvas(Canvas(2, 2), path).ok

    def test_load_oversized_number(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.txt"
        path.write_text("1 1\n" + "1" * 5000 + ",65\n")
        canvas = _patterned(2, 2)
        before = canvas.snapshot()
        result = load_canvas(canvas, path)
        assert not result.ok
        assert "Load failed" in result.message
        assert canvas.snapshot() == before
