"""Single-keypress reader for the terminal game.

Arrow keys and WASD move; a few letters drive the session. Works on
macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from enum import StrEnum

from sokoban.models.board import Direction


class Action(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    RESTART = "restart"
    NEW = "new"
    HINT = "hint"
    SOLVE = "solve"
    ENTER = "enter"
    NONE = ""

    @property
    def direction(self) -> Direction | None:
        return _DIRECTIONS.get(self)


_DIRECTIONS: dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}

_KEY_MAP: dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "q": Action.QUIT,
    "\x03": Action.QUIT,  # Ctrl-C
    "r": Action.RESTART,
    "n": Action.NEW,
    "h": Action.HINT,
    "?": Action.HINT,
    "v": Action.SOLVE,
    "\r": Action.ENTER,
    "\n": Action.ENTER,
}

# Final byte of the ESC [ x arrow sequences.
_ARROW_MAP: dict[str, Action] = {
    "A": Action.UP,
    "B": Action.DOWN,
    "C": Action.RIGHT,
    "D": Action.LEFT,
}


def resolve(ch: str) -> Action:
    """Map one raw character to its action."""
    return _KEY_MAP.get(ch.lower() if ch.isalpha() else ch, Action.NONE)


# -- low-level readers --------------------------------------------------------


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None

        # os.read keeps the rest of an escape sequence visible to select().
        seq = os.read(fd, 1).decode("utf-8", errors="ignore")
        if seq == "\x1b":
            while len(seq) < 3 and select.select([fd], [], [], 0.05)[0]:
                seq += os.read(fd, 1).decode("utf-8", errors="ignore")
        return seq
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        # Windows arrow prefix; translate to the ANSI final byte.
        return "\x1b[" + {"H": "A", "P": "B", "M": "C", "K": "D"}.get(msvcrt.getwch(), "")
    return ch


_read = _read_windows if os.name == "nt" else _read_unix


def _decode(seq: str) -> Action:
    if seq.startswith("\x1b["):
        return _ARROW_MAP.get(seq[2:3], Action.NONE)
    if seq == "\x1b":
        return Action.QUIT  # bare Escape
    return resolve(seq[:1])


# -- public API ---------------------------------------------------------------


def get_key() -> Action:
    """Block until a key is pressed and return its action."""
    seq = _read(None)
    return _decode(seq or "")


def get_key_timeout(timeout: float) -> Action | None:
    """Like ``get_key`` but return ``None`` after *timeout* seconds idle."""
    seq = _read(timeout)
    if seq is None:
        return None
    return _decode(seq)
