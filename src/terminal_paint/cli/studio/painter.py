"""Interactive terminal paint application.

Wires the key reader, the editing session, the renderer and the
status lines into a single blocking event loop.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from terminal_paint.cli.core.input import InputReader, Key, KeyEvent
from terminal_paint.cli.core.terminal import Terminal
from terminal_paint.cli.widgets.status_bar import StatusBar
from terminal_paint.core.canvas import Canvas
from terminal_paint.core.constants import (
    CLEAR_TO_EOL,
    DEFAULT_SAVE_FILE,
    STATUS_LINES_BOTTOM,
    STATUS_LINES_TOP,
)
from terminal_paint.edit.session import PaintSession
from terminal_paint.io.reader import load_canvas
from terminal_paint.io.writer import save_canvas
from terminal_paint.render.terminal import Renderer, Screen

logger = logging.getLogger(__name__)

MOVES: dict[Key, tuple[int, int]] = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}

COLOR_KEYS = "01234567"


class PainterApp:
    """Interactive character-grid painter.

    Layout:
        +------------------------------------------+
        | Status (tool, color, pen, canvas size)   |
        | Position + controls                      |
        +------------------------------------------+
        |                                          |
        |      Canvas                              |
        |                                          |
        +------------------------------------------+
        | Tips / last message                      |
        +------------------------------------------+

    Keyboard Controls:
        Arrow keys: Move cursor
        Space: Paint once
        Enter: Toggle pen (paint while moving)
        B: Next brush
        E: Eraser
        C: Next color
        0-7: Select color
        X: Clear canvas
        S / L: Save / load
        Q / Esc: Quit
    """

    def __init__(
        self,
        session: PaintSession,
        screen: Optional[Screen] = None,
        save_path: Optional[Path] = None,
        screen_lines: Optional[int] = None,
        screen_cols: Optional[int] = None,
    ) -> None:
        """Initialize the painter.

        Args:
            session: Editing session to drive
            screen: Drawing target (the real terminal by default)
            save_path: File used by save and load
            screen_lines: Terminal height; defaults to just fit the canvas
            screen_cols: Terminal width; defaults to the canvas width
        """
        self.session = session
        self.terminal = screen if isinstance(screen, Terminal) else Terminal()
        self.screen = screen if screen is not None else self.terminal
        self.save_path = save_path or Path(DEFAULT_SAVE_FILE)
        self.renderer = Renderer(session.canvas, session.cursor, self.screen)
        self.status = StatusBar(save_file=str(self.save_path))
        self.running = False
        if screen_lines is None:
            screen_lines = session.canvas.height + STATUS_LINES_TOP + STATUS_LINES_BOTTOM
        self._screen_lines = screen_lines
        self._screen_cols = screen_cols or session.canvas.width

    # -------------------------------------------------------------------------
    # Drawing
    # -------------------------------------------------------------------------

    def _write_line(self, row: int, text: str) -> None:
        self.screen.move_to(row + 1, 1)
        self.screen.write(text + CLEAR_TO_EOL)

    def draw_status(self) -> None:
        width = self._screen_cols
        for row, line in enumerate(self.status.top_lines(self.session, width)):
            self._write_line(row, line)
        self._write_line(self._screen_lines - 1, self.status.bottom_line(width))

    def refresh(self) -> None:
        """Finish a frame: status lines, cursor highlight, flush."""
        self.draw_status()
        self.renderer.set_cursor_highlight(True)
        self.renderer.flush()

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> None:
        """Apply one key press. The highlight is hidden first; refresh() shows it again."""
        self.renderer.set_cursor_highlight(False)
        self.status.set_message(None)

        session = self.session
        char = event.char

        if event.key in MOVES:
            dx, dy = MOVES[event.key]
            if session.move_cursor(dx, dy) and session.cursor.pen_down:
                self.renderer.draw_cell(session.cursor.x, session.cursor.y)
        elif char == ' ':
            if session.paint_at_cursor():
                self.renderer.draw_cell(session.cursor.x, session.cursor.y)
        elif event.key == Key.ENTER:
            session.toggle_pen()
        elif char in ('b', 'B'):
            session.cycle_brush()
        elif char in ('e', 'E'):
            session.select_eraser()
        elif char == 'c':
            session.cycle_color()
        elif char in ('x', 'X'):
            session.clear_canvas()
            self.renderer.draw_all()
        elif char is not None and char in COLOR_KEYS:
            session.select_color(int(char))
        elif char in ('s', 'S'):
            self.save()
        elif char in ('l', 'L'):
            self.load()
        elif char in ('q', 'Q') or event.key == Key.ESCAPE:
            self.running = False

    def save(self) -> None:
        result = save_canvas(self.session.canvas, self.save_path)
        self.status.set_message(result.message)

    def load(self) -> None:
        result = load_canvas(self.session.canvas, self.save_path)
        if result.loaded:
            self.renderer.draw_all()
        self.status.set_message(result.message)

    # -------------------------------------------------------------------------
    # Main Loop
    # -------------------------------------------------------------------------

    def run(self, reader: Optional[InputReader] = None) -> None:
        """Run the painter until the user quits."""
        self.running = True
        with self.terminal.managed_mode():
            reader = reader or InputReader()
            self.terminal.clear()
            self.renderer.draw_all()
            self.refresh()
            while self.running:
                self.handle_key(reader.read_blocking())
                self.refresh()


def run_painter(save_path: Optional[Path] = None) -> None:
    """Size a canvas to the terminal and launch the painter.

    Raises:
        TerminalTooSmallError: terminal below the minimum size
        MemoryError: the canvas could not be allocated
    """
    terminal = Terminal()
    size = terminal.size()
    canvas = Canvas.for_terminal(size.cols, size.rows)
    logger.info("starting painter with %dx%d canvas", canvas.width, canvas.height)
    app = PainterApp(
        PaintSession.create(canvas),
        screen=terminal,
        save_path=save_path,
        screen_lines=size.rows,
        screen_cols=size.cols,
    )
    app.run()
