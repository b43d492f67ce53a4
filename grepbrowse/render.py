"""Rendering for the match list terminal view.

Projects the match store, cursor and viewport size into ANSI frames.
Row and footer builders are pure so frames can be checked without a tty.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .store import MatchStore
from .ui_theme import DEFAULT_THEME, UITheme

MENU_MARK = ">"
EXIT_HINT = "Hit 'q' to exit  "


@dataclass
class RenderContext:
    store: MatchStore
    cursor: int
    top: int
    rows: int
    columns: int
    theme: UITheme = DEFAULT_THEME
    status_message: str = ""


def list_area_rows(rows: int) -> int:
    """Rows available to list entries; the last terminal row is the footer."""
    return max(1, rows - 1)


def build_footer(match_count: int, width: int, left_text: str | None = None) -> str | None:
    """Return the footer text, or ``None`` when it does not fit ``width``.

    The left part defaults to the match count; the exit hint is right-aligned
    and the gap between is filled with blanks. No truncation is attempted.
    """
    left = left_text if left_text else f"{match_count} matches"
    gap = width - len(left) - len(EXIT_HINT)
    if gap < 0:
        return None
    return f"{left}{' ' * gap}{EXIT_HINT}"


def format_row(label: str, description: str, label_width: int, width: int, selected: bool) -> str:
    """Lay out one list row as plain text exactly ``width`` columns wide."""
    mark = MENU_MARK if selected else " " * len(MENU_MARK)
    text = f"{mark}{label.ljust(label_width)} {description}"
    return text[:width].ljust(width)


def build_frame_rows(context: RenderContext) -> list[str]:
    """Return styled list rows for the visible window, without the footer."""
    theme = context.theme
    width = max(0, context.columns)
    label_width = context.store.max_label_width()
    out: list[str] = []
    for row in range(list_area_rows(context.rows)):
        idx = context.top + row
        if idx >= len(context.store):
            out.append("")
            continue
        record = context.store[idx]
        selected = idx == context.cursor
        text = format_row(record.display_label, record.description, label_width, width, selected)
        style = theme.selected_row if selected else theme.row
        if style:
            text = f"{style}{text}{theme.reset}"
        out.append(text)
    return out


def build_frame(context: RenderContext) -> str:
    """Compose a full frame: clear, list rows, then the footer on the last row."""
    out: list[str] = ["\033[H\033[J"]
    out.append("\r\n".join(build_frame_rows(context)))
    footer = build_footer(len(context.store), context.columns, context.status_message or None)
    if footer is not None:
        theme = context.theme
        out.append(f"\033[{max(1, context.rows)};1H")
        out.append(f"{theme.footer}{footer}{theme.reset}")
    return "".join(out)


def render_frame(context: RenderContext, fd: int) -> None:
    os.write(fd, build_frame(context).encode("utf-8", errors="replace"))
