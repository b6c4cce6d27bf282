"""Core TUI infrastructure - terminal I/O and input handling."""

from terminal_paint.cli.core.terminal import Terminal, TerminalSize
from terminal_paint.cli.core.input import InputReader, KeyEvent, Key, decode_keys

__all__ = [
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "decode_keys",
]
