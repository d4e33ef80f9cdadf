"""Keyboard handling."""

from __future__ import annotations

LEFT_KEYS = {"KEY_LEFT"}
RIGHT_KEYS = {"KEY_RIGHT"}
QUIT_KEYS = {"KEY_ESCAPE", "\x1b"}


def handle_key(state, key) -> bool:
    """Apply one key press to ``state``; return True if the key did anything.

    ``key`` may be a terminal keystroke carrying a ``name`` or a plain key name.
    """
    name = getattr(key, "name", None) or str(key)
    if name in LEFT_KEYS:
        state.player.move(-1)
    elif name in RIGHT_KEYS:
        state.player.move(1)
    elif name in QUIT_KEYS:
        state.game_over = True
    else:
        return False
    return True


def process_input(state, terminal) -> bool:
    """Read at most one pending key without waiting and apply it."""
    key = terminal.inkey(timeout=0)
    if not key:
        return False
    return handle_key(state, key)