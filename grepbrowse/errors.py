"""Exception types raised by grepbrowse components."""

from __future__ import annotations


class GrepBrowseError(Exception):
    """Base class for errors the CLI turns into a diagnostic and exit status."""

    exit_status = 1


class LineSourceError(GrepBrowseError):
    """The search command could not be started."""

    exit_status = 127


class SelectionError(GrepBrowseError):
    """Internal invariant violation in the selection engine."""
