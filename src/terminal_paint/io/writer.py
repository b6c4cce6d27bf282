"""Save canvases to the text file format."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from terminal_paint.core.canvas import Canvas
from terminal_paint.core.constants import DEFAULT_SAVE_FILE

logger = logging.getLogger(__name__)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@dataclass
class SaveResult:
    """Result of a save operation."""
    path: Path
    saved: bool
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.saved

    @property
    def message(self) -> str:
        """Short text for the status line."""
        if self.saved:
            return f"Saved: {self.path.name}"
        return f"Save failed: {self.error}"


def serialize(canvas: Canvas) -> str:
    """
    Encode a canvas as text.

    Format:
    - Line 1: "width height"
    - One line per row: "color,code color,code ..." with one token
      per cell, left to right, code being the character's code point

    Every line, including the last, ends with a newline.
    """
    lines = [f"{canvas.width} {canvas.height}"]
    for row in canvas.rows():
        lines.append(' '.join(f"{cell.color},{cell.code}" for cell in row))
    return '\n'.join(lines) + '\n'


def save_canvas(canvas: Canvas, path: str | Path | None = None) -> SaveResult:
    """
    Save a canvas to disk.

    The text is written to a temporary file next to the destination
    and moved into place, so an existing file is never left half
    written. The file keeps its permissions; a new file gets the
    umask default. Errors are reported through the result, not raised.

    Args:
        canvas: Canvas to save
        path: Destination file (default: paint_save.txt in the working directory)

    Returns:
        SaveResult describing the outcome
    """
    path = Path(path) if path is not None else Path(DEFAULT_SAVE_FILE)
    data = serialize(canvas)

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="ascii",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(data)
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, _default_file_mode())
        os.replace(tmp_name, path)
    except OSError as e:
        logger.warning("could not save canvas to %s: %s", path, e)
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        return SaveResult(path=path, saved=False, error=e.strerror or str(e))

    logger.info("saved %dx%d canvas to %s", canvas.width, canvas.height, path)
    return SaveResult(path=path, saved=True)
