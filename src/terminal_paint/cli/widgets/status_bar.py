"""Status lines shown above and below the canvas."""

from __future__ import annotations

from terminal_paint.core.color import color_name
from terminal_paint.core.constants import BOLD, DEFAULT_SAVE_FILE, RESET
from terminal_paint.edit.session import PaintSession

CONTROLS = (
    "Movement: Arrow keys  |  Paint: Space  |  Pen: Enter  |  "
    "Tools: B/C/E/X  |  Colors: 0-7  |  File: S/L  |  Quit: Q"
)


def _fit(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[:max(0, width - 1)] + "…"


class StatusBar:
    """Builds the two top status lines and the bottom help line."""

    def __init__(self, save_file: str = DEFAULT_SAVE_FILE) -> None:
        self.save_file = save_file
        self.message: str | None = None

    def set_message(self, text: str | None) -> None:
        """Show a one-off message (e.g. save/load outcome) on the help line."""
        self.message = text

    def top_lines(self, session: PaintSession, width: int) -> list[str]:
        tools = session.tools
        brush = "ERASER" if tools.is_eraser else f"'{tools.glyph}'"
        title = (
            f"Terminal Paint  |  Brush: {brush}  |  Color: {color_name(tools.color)}  |  "
            f"Pen: {'DOWN' if session.cursor.pen_down else 'UP'}  |  "
            f"Canvas: {session.canvas.width}x{session.canvas.height}"
        )
        position = f"Position: ({session.cursor.x},{session.cursor.y})  |  {CONTROLS}"
        return [
            f"{BOLD}{_fit(title, width)}{RESET}",
            _fit(position, width),
        ]

    def bottom_line(self, width: int) -> str:
        if self.message:
            text = self.message
        else:
            text = (
                "Tips: Enter toggles pen mode for continuous painting. "
                f"Files save to '{self.save_file}'. Use 0-7 for quick color selection."
            )
        return _fit(text, width)
