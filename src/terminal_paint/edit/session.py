"""PaintSession - the editing context passed to every operation."""

from __future__ import annotations

from dataclasses import dataclass, field

from terminal_paint.core.canvas import Canvas
from terminal_paint.core.state import CursorState, ToolState


@dataclass
class PaintSession:
    """Canvas, cursor and tool state for one editing session.

    All editing goes through this object so the core can be driven
    without a terminal. Methods only mutate state; redrawing is the
    caller's job.
    """
    canvas: Canvas
    cursor: CursorState = field(default_factory=CursorState)
    tools: ToolState = field(default_factory=ToolState)

    @classmethod
    def create(cls, canvas: Canvas) -> PaintSession:
        """Start a session with the cursor centered on the canvas."""
        return cls(canvas=canvas, cursor=CursorState.centered(canvas))

    def paint_at_cursor(self) -> bool:
        """Paint the current tool glyph and color under the cursor."""
        return self.canvas.paint(
            self.cursor.x, self.cursor.y, self.tools.glyph, self.tools.color
        )

    def move_cursor(self, dx: int, dy: int) -> bool:
        """Move the cursor, painting at the new spot when the pen is down.

        Returns True if the cursor moved.
        """
        moved = self.cursor.move(dx, dy, self.canvas)
        if moved and self.cursor.pen_down:
            self.paint_at_cursor()
        return moved

    def toggle_pen(self) -> bool:
        """Flip pen mode. Returns the new pen state."""
        self.cursor.pen_down = not self.cursor.pen_down
        return self.cursor.pen_down

    def cycle_brush(self) -> None:
        self.tools.next_brush()

    def select_eraser(self) -> None:
        self.tools.use_eraser()

    def cycle_color(self) -> None:
        self.tools.next_color()

    def select_color(self, index: int) -> None:
        self.tools.set_color(index)

    def clear_canvas(self) -> None:
        """Blank the whole canvas using the current color."""
        self.canvas.clear(self.tools.color)
