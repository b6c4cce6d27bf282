"""Color palette for the paint surface."""

from enum import IntEnum

from terminal_paint.core.constants import COLOR_COUNT, DEFAULT_COLOR


class PaletteColor(IntEnum):
    """
    The eight paintable colors.

    Values are the color indices stored in cells and in saved files,
    matching the standard ANSI color order.
    """
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @property
    def sgr_fg(self) -> str:
        """SGR foreground code for this color (30-37)."""
        return str(30 + self.value)

    @property
    def sgr_bg(self) -> str:
        """SGR background code for this color (40-47)."""
        return str(40 + self.value)


def is_valid_color(index: int) -> bool:
    """Check if index is a paintable color index (0-7)."""
    return 0 <= index < COLOR_COUNT


def coerce_color(index: int) -> int:
    """Return index if valid, otherwise the default color (white)."""
    return index if is_valid_color(index) else DEFAULT_COLOR


def color_name(index: int) -> str:
    """Human-readable name for a color index."""
    return PaletteColor(coerce_color(index)).name


def cell_sgr(color: int, reverse: bool = False) -> str:
    """
    Build the SGR parameter string for a cell.

    Cells are drawn in their color over a black background. Reverse
    video swaps the two, which is how the cursor is highlighted.
    """
    fg = PaletteColor(coerce_color(color)).sgr_fg
    parts = ['7', fg, PaletteColor.BLACK.sgr_bg] if reverse else [fg, PaletteColor.BLACK.sgr_bg]
    return ';'.join(parts)
