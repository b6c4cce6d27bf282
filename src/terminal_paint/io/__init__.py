"""File I/O for saved canvases."""

from terminal_paint.io.reader import (
    CanvasFormatError,
    LoadResult,
    deserialize,
    load_canvas,
    overlay,
    parse,
)
from terminal_paint.io.writer import SaveResult, save_canvas, serialize

__all__ = [
    "CanvasFormatError",
    "LoadResult",
    "SaveResult",
    "serialize",
    "parse",
    "overlay",
    "deserialize",
    "save_canvas",
    "load_canvas",
]
