"""Edit module - the editing session driven by the painter."""

from terminal_paint.edit.session import PaintSession

__all__ = ["PaintSession"]
