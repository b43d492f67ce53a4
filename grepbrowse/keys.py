"""Key bindings for the browsing state."""

from __future__ import annotations

import enum


class KeyAction(enum.Enum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    ACTIVATE = "activate"
    QUIT = "quit"


KEY_BINDINGS: dict[str, KeyAction] = {
    "j": KeyAction.MOVE_DOWN,
    "DOWN": KeyAction.MOVE_DOWN,
    "k": KeyAction.MOVE_UP,
    "UP": KeyAction.MOVE_UP,
    "PAGE_DOWN": KeyAction.PAGE_DOWN,
    "PAGE_UP": KeyAction.PAGE_UP,
    "ENTER": KeyAction.ACTIVATE,
    "q": KeyAction.QUIT,
    "ESC": KeyAction.QUIT,
}


def action_for_key(key: str) -> KeyAction | None:
    """Return the bound action, or ``None`` for keys the list ignores."""
    return KEY_BINDINGS.get(key)
