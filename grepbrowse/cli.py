"""Command-line front door for grepbrowse.

Runs the search command, parses its output into a match store, and either
exits with the command's status (nothing parsed) or opens the interactive
list. Every fatal path restores the terminal before printing a diagnostic.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence

from .config import load_theme_name
from .editor import launch_editor
from .errors import GrepBrowseError
from .logs import configure_logging
from .loop import BrowseSession, run_event_loop
from .source import spawn_line_source
from .store import MatchStore, build_match_store, empty_result_message
from .terminal import TerminalController
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

PROG = "grepbrowse"
USAGE_EXIT_STATUS = 2
INTERRUPTED_EXIT_STATUS = 130
OPTIONS_WITH_VALUES = frozenset({"--theme"})


def _fail(message: str, status: int) -> SystemExit:
    print(message, file=sys.stderr)
    return SystemExit(status)


def build_parser() -> argparse.ArgumentParser:
    """Parser for grepbrowse's own options; the search command is split off first."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        allow_abbrev=False,
        usage=f"{PROG} [--theme NAME] [--no-color] <program> [ args ... ]",
        description="Browse grep -n style matches and open them in $EDITOR.",
        epilog="Everything from <program> onward is run unchanged as the search command.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colors in the match list.")
    return parser


def split_command(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split ``argv`` into grepbrowse options and the search command.

    Options end at the first argument not starting with ``-`` or at a ``--``,
    which is dropped. The command and its arguments are returned verbatim.
    """
    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "--":
            return list(argv[:idx]), list(argv[idx + 1 :])
        if arg == "-" or not arg.startswith("-"):
            break
        idx += 2 if arg in OPTIONS_WITH_VALUES else 1
    return list(argv[:idx]), list(argv[idx:])


def collect_matches(argv: Sequence[str]) -> tuple[MatchStore, int]:
    """Run ``argv`` to completion and return the parsed store and exit status."""
    with spawn_line_source(argv) as source:
        store = build_match_store(source.stdout)
        status = source.wait()
    logger.info("collected %d matches", len(store))
    return store, status


def browse(store: MatchStore, theme: UITheme) -> None:
    """Open the interactive list over a non-empty store."""
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd):
        raise _fail("Error: standard input is not a terminal", 1)
    terminal = TerminalController(stdin_fd, stdout_fd)
    session = BrowseSession.for_store(store, theme)
    run_event_loop(
        session,
        terminal,
        stdin_fd,
        stdout_fd,
        open_match=lambda record: launch_editor(
            record.file_path,
            record.line_number,
            terminal.disable_tui_mode,
            terminal.enable_tui_mode,
        ),
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments, collect matches, and run the browser.

    Exits ``2`` without a command. When nothing parses, the search command's
    own exit status is propagated after an explanatory diagnostic. A command
    that cannot be executed at all exits ``127`` with an error instead.
    """
    own_args, command = split_command(sys.argv[1:] if argv is None else argv)
    args = build_parser().parse_args(own_args)
    if not command:
        raise _fail(f"Usage: {PROG} <program> [ args ... ]", USAGE_EXIT_STATUS)

    configure_logging()
    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)

    try:
        store, status = collect_matches(command)
        if not store:
            message = empty_result_message(status)
            if message is not None:
                print(message, file=sys.stderr)
            raise SystemExit(status)
        browse(store, theme)
    except GrepBrowseError as exc:
        logger.error("%s", exc)
        raise _fail(f"Error: {exc}", exc.exit_status) from exc
    except MemoryError as exc:
        raise _fail("Error: out of memory", 1) from exc
    except KeyboardInterrupt:
        raise SystemExit(INTERRUPTED_EXIT_STATUS) from None


if __name__ == "__main__":
    main()
