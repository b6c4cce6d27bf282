"""The real terminal as a drawing target for the painter."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO

from terminal_paint.core.constants import (
    ALT_SCREEN_ENTER,
    ALT_SCREEN_EXIT,
    CLEAR_SCREEN,
    CSI,
    CURSOR_HIDE,
    CURSOR_SHOW,
    RESET,
)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """
    Escape-sequence output over a text stream (stdout by default).

    Nothing is flushed per write: a full redraw touches every cell, so
    callers flush once a frame is complete.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def size(self) -> TerminalSize:
        """Current dimensions, or 24x80 when the stream is not a terminal."""
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (OSError, ValueError):
            return TerminalSize(24, 80)
        return TerminalSize(size.lines, size.columns)

    def move_to(self, row: int, col: int) -> None:
        """Move the cursor (1-indexed)."""
        self.stream.write(f"{CSI}{row};{col}H")

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def clear(self) -> None:
        self.stream.write(CLEAR_SCREEN)

    def set_cursor_visible(self, visible: bool) -> None:
        self.stream.write(CURSOR_SHOW if visible else CURSOR_HIDE)
        self.stream.flush()

    @contextmanager
    def raw_input(self) -> Iterator[None]:
        """Put stdin in raw mode for single-key reads (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # no termios: keys arrive line-buffered
            yield
            return

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)

    @contextmanager
    def fullscreen(self) -> Iterator[None]:
        """Alternate screen with a hidden cursor; restored on exit."""
        self.stream.write(ALT_SCREEN_ENTER)
        self.set_cursor_visible(False)
        try:
            yield
        finally:
            self.stream.write(RESET)
            self.set_cursor_visible(True)
            self.stream.write(ALT_SCREEN_EXIT)
            self.stream.flush()

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        """Full-screen output plus raw key input."""
        with self.fullscreen():
            with self.raw_input():
                yield
