"""Editor launch helper for jumping to a match.

Runs ``$EDITOR +<line> <path>`` while temporarily leaving TUI mode.
Returns an error message string instead of raising for UI-friendly handling.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from collections.abc import Mapping
from typing import Callable

from .config import load_editor

logger = logging.getLogger(__name__)

EDITOR_ENV = "EDITOR"
DEFAULT_EDITOR = "vi"


def resolve_editor(environ: Mapping[str, str] | None = None) -> str:
    """Return the editor command: ``$EDITOR``, then config, then ``vi``."""
    env = os.environ if environ is None else environ
    editor = env.get(EDITOR_ENV, "").strip()
    if editor:
        return editor
    return load_editor() or DEFAULT_EDITOR


def editor_command(editor: str, file_path: str, line_number: int) -> list[str]:
    cmd = shlex.split(editor) or [DEFAULT_EDITOR]
    return [*cmd, f"+{line_number}", file_path]


def launch_editor(
    file_path: str,
    line_number: int,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
    editor: str | None = None,
) -> str | None:
    """Run the editor at ``file_path:line_number`` and block until it exits.

    The editor's exit status is not inspected. TUI mode is restored even when
    the editor cannot be started.
    """
    try:
        cmd = editor_command(editor or resolve_editor(), file_path, line_number)
    except ValueError as exc:
        return f"Cannot edit: invalid editor command ({exc})"

    logger.info("launching editor: %s", shlex.join(cmd))
    disable_tui_mode()
    try:
        subprocess.run(cmd, check=False)
    except OSError as exc:
        logger.warning("failed to launch editor %r: %s", cmd[0], exc)
        return f"Failed to launch editor: {exc}"
    finally:
        enable_tui_mode()
    return None
