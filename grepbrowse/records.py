"""Match record data model produced by the line parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ParseOutcome(enum.Enum):
    """Result of reading one line from the line source."""

    PARSED = "parsed"
    MALFORMED = "malformed"
    END_OF_STREAM = "end_of_stream"


def base_name(path: str) -> str:
    """Return the last path component the way ``basename(3)`` does.

    Trailing slashes are ignored, an empty path is ``.`` and a path made only
    of slashes is ``/``.
    """
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def format_display_label(file_path: str, line_number: int) -> str:
    return f"{base_name(file_path)} [{line_number}]"


@dataclass(frozen=True)
class MatchRecord:
    """One ``path:line:text`` search hit.

    ``display_label`` is derived once at construction and never recomputed.
    """

    file_path: str
    line_number: int
    description: str
    display_label: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if self.line_number < 0:
            raise ValueError(f"line_number must be non-negative, got {self.line_number}")
        object.__setattr__(self, "display_label", format_display_label(self.file_path, self.line_number))
