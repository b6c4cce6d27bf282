"""Load canvases from the text file format.

Loading never replaces the live canvas. The file is parsed in full into
a temporary canvas first; only when every row parses is the overlapping
top-left region copied onto the live canvas. Anything outside that
region is left alone on both sides.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from terminal_paint.core.canvas import Canvas
from terminal_paint.core.color import coerce_color
from terminal_paint.core.constants import (
    DEFAULT_SAVE_FILE,
    MAX_CANVAS_HEIGHT,
    MAX_CANVAS_WIDTH,
    SPACE_CODE,
)

logger = logging.getLogger(__name__)

_INT = r'[+-]?[0-9]+'
_HEADER_VALUE = re.compile(rf'^{_INT}$')
_TOKEN = re.compile(rf'^({_INT}),({_INT})$')


class CanvasFormatError(ValueError):
    """Raised when saved canvas text cannot be parsed."""


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        # past the interpreter's digit limit
        raise CanvasFormatError(f"number too long: {text[:20]}...") from None


@dataclass
class LoadResult:
    """Result of a load operation."""
    loaded: bool
    path: Path | None = None
    file_width: int = 0
    file_height: int = 0
    copied_width: int = 0
    copied_height: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.loaded

    @property
    def message(self) -> str:
        """Short text for the status line."""
        name = self.path.name if self.path else "canvas"
        if self.loaded:
            return f"Loaded: {name} ({self.file_width}x{self.file_height})"
        return f"Load failed: {self.error}"


def _parse_header(line: str) -> tuple[int, int]:
    parts = line.split()
    if len(parts) < 2 or not all(_HEADER_VALUE.match(p) for p in parts[:2]):
        raise CanvasFormatError(f"malformed header: {line!r}")
    width, height = _to_int(parts[0]), _to_int(parts[1])
    if not 0 < width <= MAX_CANVAS_WIDTH or not 0 < height <= MAX_CANVAS_HEIGHT:
        raise CanvasFormatError(f"canvas size out of range: {width}x{height}")
    return width, height


def decode_token(token: str) -> tuple[str, int]:
    """
    Decode one "color,code" token into (char, color).

    Out-of-range colors become white (7) and out-of-range codes
    become a space; neither is an error.
    """
    match = _TOKEN.match(token)
    if match is None:
        raise CanvasFormatError(f"bad cell token: {token!r}")
    color, code = _to_int(match.group(1)), _to_int(match.group(2))
    if not 0 <= code <= 255:
        code = SPACE_CODE
    return chr(code), coerce_color(color)


def parse(text: str) -> Canvas:
    """
    Parse saved canvas text into a new canvas of the declared size.

    Tokens past the declared width on a row, and lines past the
    declared height, are ignored.

    Raises:
        CanvasFormatError: header missing or out of range, a row
            missing or short, or a token that is not "int,int"
    """
    lines = text.splitlines()
    if not lines:
        raise CanvasFormatError("empty file")

    width, height = _parse_header(lines[0])
    if len(lines) - 1 < height:
        raise CanvasFormatError(f"expected {height} rows, found {len(lines) - 1}")

    grid = Canvas(width, height)
    for y in range(height):
        tokens = lines[y + 1].split()
        if len(tokens) < width:
            raise CanvasFormatError(
                f"row {y} has {len(tokens)} cells, expected {width}"
            )
        for x, token in enumerate(tokens[:width]):
            char, color = decode_token(token)
            grid.paint(x, y, char, color)
    return grid


def overlay(source: Canvas, target: Canvas) -> tuple[int, int]:
    """
    Copy the top-left overlap of source onto target, cell by cell.

    Returns:
        (width, height) of the copied region
    """
    copy_width = min(source.width, target.width)
    copy_height = min(source.height, target.height)
    for y in range(copy_height):
        for x in range(copy_width):
            target.get(x, y).assign(source.get(x, y))
    return copy_width, copy_height


def deserialize(text: str, canvas: Canvas) -> LoadResult:
    """
    Overlay saved canvas text onto an existing canvas.

    All or nothing: when parsing fails the canvas is untouched and
    the result carries the reason.
    """
    try:
        grid = parse(text)
    except CanvasFormatError as e:
        return LoadResult(loaded=False, error=str(e))

    copied_width, copied_height = overlay(grid, canvas)
    return LoadResult(
        loaded=True,
        file_width=grid.width,
        file_height=grid.height,
        copied_width=copied_width,
        copied_height=copied_height,
    )


def load_canvas(canvas: Canvas, path: str | Path | None = None) -> LoadResult:
    """
    Load a saved canvas from disk onto an existing canvas.

    Unreadable or malformed files leave the canvas unchanged. Callers
    should redraw the whole canvas only when the result is ok.

    Args:
        canvas: Live canvas to overlay onto
        path: Source file (default: paint_save.txt in the working directory)

    Returns:
        LoadResult describing the outcome
    """
    path = Path(path) if path is not None else Path(DEFAULT_SAVE_FILE)

    try:
        text = path.read_text(encoding="ascii")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        logger.warning("could not read %s: %s", path, reason)
        return LoadResult(loaded=False, path=path, error=reason)

    result = deserialize(text, canvas)
    result.path = path
    if result.loaded:
        logger.info(
            "loaded %dx%d canvas from %s (copied %dx%d)",
            result.file_width, result.file_height, path,
            result.copied_width, result.copied_height,
        )
    else:
        logger.warning("rejected %s: %s", path, result.error)
    return result
