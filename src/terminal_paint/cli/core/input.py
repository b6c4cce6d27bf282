"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


def decode_keys(data: str) -> list[KeyEvent]:
    """Decode a chunk of terminal input into key events.

    Unknown escape sequences come back as events with only ``raw`` set;
    unknown control characters are dropped.
    """
    events: list[KeyEvent] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch in InputReader.SIMPLE_KEYS:
            events.append(KeyEvent(key=InputReader.SIMPLE_KEYS[ch], raw=ch))
            i += 1
        elif ch == '\x1b':
            end = i + 1
            if end < len(data) and data[end] in '[O':
                # CSI / SS3: parameters up to a final letter or ~
                end += 1
                while end < len(data) and data[end] != '\x1b':
                    end += 1
                    if data[end - 1].isalpha() or data[end - 1] == '~':
                        break
            elif end < len(data) and data[end] != '\x1b':
                end += 1  # Alt+key
            seq = data[i + 1:end]
            if not seq:
                events.append(KeyEvent(key=Key.ESCAPE, raw=ch))
            else:
                events.append(KeyEvent(key=InputReader.SEQUENCES.get(seq), raw=ch + seq))
            i = end
        else:
            if ch.isprintable():
                events.append(KeyEvent(char=ch, raw=ch))
            i += 1
    return events


class InputReader:
    """
    Blocking keyboard reader for raw-mode terminals.

    Uses os.read() to bypass Python's I/O buffering and waits briefly
    after a lone ESC so split escape sequences are read whole.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._pending: list[KeyEvent] = []

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until input is available."""
        while not self._pending:
            if self._has_input(1.0):
                self._pending.extend(decode_keys(self._read_available()))
        return self._pending.pop(0)

    def _read_available(self) -> str:
        try:
            data = os.read(self._fd, 1024).decode('utf-8', errors='replace')
        except (OSError, BlockingIOError):
            return ""
        if data == '\x1b':
            data += self._read_escape_tail()
        return data

    def _read_escape_tail(self) -> str:
        """Collect the rest of an escape sequence that arrived split."""
        tail = ""
        deadline = time.monotonic() + 0.1
        while time.monotonic() < deadline:
            if not self._has_input(0.025):
                continue
            try:
                tail += os.read(self._fd, 1024).decode('utf-8', errors='replace')
            except (OSError, BlockingIOError):
                break
            if tail and (tail[-1].isalpha() or tail[-1] == '~'):
                break
        return tail

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False
