"""
terminal-paint: paint colored characters in your terminal

Move a cursor over a character grid, paint glyphs in eight colors, and
save the result to a plain text file that can be loaded back on top of
any canvas.

Quick Start:
    >>> import terminal_paint as paint
    >>> canvas = paint.Canvas(3, 2)
    >>> canvas.paint(0, 0, '#', 1)
    True
    >>> print(paint.serialize(canvas), end="")
    3 2
    1,35 7,32 7,32
    7,32 7,32 7,32
"""

import logging

__version__ = "0.1.0"

# Core types
from terminal_paint.core.cell import Cell
from terminal_paint.core.canvas import Canvas, TerminalTooSmallError
from terminal_paint.core.state import Brush, CursorState, Eraser, ToolState
from terminal_paint.edit.session import PaintSession

# Persistence
from terminal_paint.io.reader import CanvasFormatError, LoadResult, deserialize, load_canvas
from terminal_paint.io.writer import SaveResult, save_canvas, serialize

# Rendering
from terminal_paint.render.terminal import Renderer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Canvas",
    "TerminalTooSmallError",
    "Brush",
    "Eraser",
    "CursorState",
    "ToolState",
    "PaintSession",
    # I/O
    "serialize",
    "deserialize",
    "save_canvas",
    "load_canvas",
    "SaveResult",
    "LoadResult",
    "CanvasFormatError",
    # Rendering
    "Renderer",
]
