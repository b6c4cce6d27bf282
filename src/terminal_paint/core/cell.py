"""Cell - atomic unit of the paint canvas."""

from dataclasses import dataclass

from terminal_paint.core.constants import DEFAULT_COLOR


@dataclass(slots=True)
class Cell:
    """
    A single character cell with its color index.

    Represents one position in the canvas grid. Cells are owned by
    their canvas and updated in place.
    """
    char: str = ' '
    color: int = DEFAULT_COLOR

    @property
    def code(self) -> int:
        """Numeric code of the character (space = 32)."""
        return ord(self.char)

    @property
    def display_char(self) -> str:
        """Character to put on screen; unset or control characters show as space."""
        if not self.char or not self.char.isprintable():
            return ' '
        return self.char

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, color=self.color)

    def assign(self, other: "Cell") -> None:
        """Take character and color from another cell."""
        self.char = other.char
        self.color = other.color

    def is_default(self) -> bool:
        """Check if this cell is blank space in the default color."""
        return self.char == ' ' and self.color == DEFAULT_COLOR
