"""Shared constants for the paint surface."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
BOLD = f"{CSI}1m"
CLEAR_SCREEN = f"{CSI}2J{CSI}H"
CLEAR_TO_EOL = f"{CSI}K"
CURSOR_HIDE = f"{CSI}?25l"
CURSOR_SHOW = f"{CSI}?25h"
ALT_SCREEN_ENTER = f"{CSI}?1049h"
ALT_SCREEN_EXIT = f"{CSI}?1049l"

# Canvas size limits (each dimension)
MAX_CANVAS_WIDTH = 1000
MAX_CANVAS_HEIGHT = 1000

# Smallest terminal that can host the editor
MIN_TERMINAL_COLS = 20
MIN_TERMINAL_LINES = 10

# Screen rows reserved for status display
STATUS_LINES_TOP = 2
STATUS_LINES_BOTTOM = 1

# Used by both save and load when no filename is given
DEFAULT_SAVE_FILE = "paint_save.txt"

# Brush glyphs, ordered by visual density
BRUSH_CHARS: tuple[str, ...] = ('#', '*', '@', '%', '+', 'o', 'x', '.', '~', '&')

COLOR_COUNT = 8
DEFAULT_COLOR = 7  # white

# Character code substituted for out-of-range codes in saved files
SPACE_CODE = 32
