"""Interactive event loop for the match list.

Reads one key at a time, drives the selection engine, and hands control to
the editor on activation. The terminal is restored on every exit path.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from .input import read_key
from .keys import KeyAction, action_for_key
from .records import MatchRecord
from .render import RenderContext, list_area_rows, render_frame
from .selection import SelectionEngine
from .store import MatchStore
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


@dataclass
class BrowseSession:
    """Explicit state shared by the renderer and the event loop."""

    store: MatchStore
    selection: SelectionEngine
    theme: UITheme = DEFAULT_THEME
    status_message: str = ""
    dirty: bool = True
    last_size: tuple[int, int] = (0, 0)

    @classmethod
    def for_store(cls, store: MatchStore, theme: UITheme = DEFAULT_THEME) -> "BrowseSession":
        return cls(store=store, selection=SelectionEngine(store), theme=theme)

    def render_context(self, rows: int, columns: int) -> RenderContext:
        return RenderContext(
            store=self.store,
            cursor=self.selection.cursor,
            top=self.selection.top,
            rows=rows,
            columns=columns,
            theme=self.theme,
            status_message=self.status_message,
        )

    def close(self) -> None:
        self.store.clear()


def apply_action(
    session: BrowseSession,
    action: KeyAction,
    open_match: Callable[[MatchRecord], str | None],
) -> bool:
    """Apply one bound action; return ``True`` when the loop should stop."""
    selection = session.selection
    session.status_message = ""
    if action is KeyAction.QUIT:
        return True
    if action is KeyAction.MOVE_DOWN:
        selection.move_down()
    elif action is KeyAction.MOVE_UP:
        selection.move_up()
    elif action is KeyAction.PAGE_DOWN:
        selection.page_down()
    elif action is KeyAction.PAGE_UP:
        selection.page_up()
    elif action is KeyAction.ACTIVATE:
        error = open_match(selection.current())
        if error:
            session.status_message = error
    session.dirty = True
    return False


def run_event_loop(
    session: BrowseSession,
    terminal: TerminalController,
    stdin_fd: int,
    stdout_fd: int,
    open_match: Callable[[MatchRecord], str | None],
) -> None:
    """Run the browsing loop until quit, escape, or end of input.

    Each iteration re-derives the page size from the terminal, draws when the
    session is dirty, then blocks for the next key.
    """
    logger.info("entering interactive list with %d matches", len(session.store))
    try:
        with terminal.raw_mode():
            while True:
                term = shutil.get_terminal_size((80, 24))
                size = (term.lines, term.columns)
                if size != session.last_size:
                    session.last_size = size
                    session.dirty = True
                session.selection.page_size = list_area_rows(term.lines)
                if session.selection.scroll_into_view():
                    session.dirty = True

                if session.dirty:
                    render_frame(session.render_context(term.lines, term.columns), stdout_fd)
                    session.dirty = False

                key = read_key(stdin_fd)
                if key == "":
                    logger.info("input closed, leaving interactive list")
                    break
                action = action_for_key(key)
                if action is None:
                    continue
                if apply_action(session, action, open_match):
                    break
    finally:
        session.close()
    logger.info("interactive list closed")
