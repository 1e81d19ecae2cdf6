"""
Keyboard input: raw key presses to player intents.
"""

from __future__ import annotations

import readchar

from game_controller import MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, MOVE_UP, Intent, Quit, Unknown

# Arrow keys and WASD
MOVE_KEYS: dict[str, Intent] = {
    readchar.key.UP: MOVE_UP,
    readchar.key.DOWN: MOVE_DOWN,
    readchar.key.LEFT: MOVE_LEFT,
    readchar.key.RIGHT: MOVE_RIGHT,
    "w": MOVE_UP,
    "s": MOVE_DOWN,
    "a": MOVE_LEFT,
    "d": MOVE_RIGHT,
}

# Ctrl-C reaches the session as KeyboardInterrupt, not as a key
QUIT_KEYS = frozenset({"x", "q"})


def decode_key(key: str) -> Intent:
    """Translate one key press (as returned by readchar.readkey) to an intent."""
    for candidate in (key, key.lower()):
        if candidate in MOVE_KEYS:
            return MOVE_KEYS[candidate]
        if candidate in QUIT_KEYS:
            return Quit()
    return Unknown(key)


def read_intent() -> Intent:
    """
    Block for one key press and decode it.

    readchar puts the terminal in raw, no-echo mode for the read and restores
    the previous mode on every exit path. Ctrl-C raises KeyboardInterrupt.
    """
    return decode_key(readchar.readkey())
