"""Widgets drawn around the canvas."""

from terminal_paint.cli.widgets.status_bar import StatusBar

__all__ = ["StatusBar"]
