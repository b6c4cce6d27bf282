"""Render a whole canvas to a string, for printing outside the editor."""

from terminal_paint.core.canvas import Canvas
from terminal_paint.core.color import cell_sgr
from terminal_paint.core.constants import CSI, RESET


class TextRenderer:
    """
    Render a Canvas to text, with or without color.

    In color mode SGR codes are only emitted when the color changes,
    and each line ends with a reset so colors never bleed past it.
    Plain mode drops trailing blanks.
    """

    def __init__(self, color: bool = True):
        self.color = color

    def render(self, canvas: Canvas) -> str:
        """Render canvas to a string, one line per row."""
        lines: list[str] = []

        for row in canvas.rows():
            if not self.color:
                lines.append(''.join(cell.display_char for cell in row).rstrip())
                continue

            parts: list[str] = []
            last_color: int | None = None
            for cell in row:
                if cell.color != last_color:
                    parts.append(f"{CSI}{cell_sgr(cell.color)}m")
                    last_color = cell.color
                parts.append(cell.display_char)
            parts.append(RESET)
            lines.append(''.join(parts))

        result = '\n'.join(lines)
        if not self.color:
            result = result.rstrip('\n')
        return result


def render_canvas(canvas: Canvas, color: bool = True) -> str:
    """Render a canvas with default options."""
    return TextRenderer(color=color).render(canvas)
