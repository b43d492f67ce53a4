"""Tolerant line parser for ``path:line:text`` search output.

Reads the line source one byte at a time through a small state machine.
Each field is filled into a bounded buffer, so oversized input is dropped
rather than buffered, and malformed lines are skipped without raising.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterator
from typing import BinaryIO

from .records import MatchRecord, ParseOutcome

logger = logging.getLogger(__name__)

SEPARATOR = ord(":")
NEWLINE = ord("\n")
TAB = ord("\t")
TAB_STOP = 4
TAB_REPLACEMENT = " "
NONPRINT_REPLACEMENT = "."

# Buffer sizes include one slot for the terminator.
FILE_PATH_CAPACITY = 256
LINE_NUMBER_CAPACITY = 32
DESCRIPTION_CAPACITY = 256

_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class _Field(enum.IntEnum):
    FILE_PATH = 0
    LINE_NUMBER = 1
    DESCRIPTION = 2


class BoundedField:
    """Append-only text buffer that silently drops characters past capacity.

    ``capacity`` counts the terminator slot, so at most ``capacity - 1``
    characters are kept.
    """

    __slots__ = ("capacity", "_available", "_chars")

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._available = capacity
        self._chars: list[str] = []

    def append(self, ch: str, count: int = 1) -> None:
        for _ in range(count):
            if not self._available:
                return
            self._available -= 1
            if not self._available:
                # Last slot is the terminator.
                return
            self._chars.append(ch)

    def value(self) -> str:
        return "".join(self._chars)


def is_printable(code: int) -> bool:
    """Return whether ``code`` is in the C-locale ``isprint`` range."""
    return 0x20 <= code <= 0x7E


def parse_line_number(text: str) -> int:
    """Convert a numeric field with ``atoi`` leniency.

    Leading whitespace and trailing garbage are ignored; text without a
    leading integer yields ``0``. Negative values clamp to ``0``.
    """
    match = _ATOI_RE.match(text)
    if match is None:
        return 0
    return max(0, int(match.group(1)))


def parse_next_match(stream: BinaryIO) -> tuple[ParseOutcome, MatchRecord | None]:
    """Read one newline-terminated record from ``stream``.

    Only the first two separators switch fields; later ones are literal
    description text. A line ending before the description field is
    ``MALFORMED``. A trailing partial line without newline is discarded and
    reported as ``END_OF_STREAM``.
    """
    fields = (
        BoundedField(FILE_PATH_CAPACITY),
        BoundedField(LINE_NUMBER_CAPACITY),
        BoundedField(DESCRIPTION_CAPACITY),
    )
    state = _Field.FILE_PATH
    while True:
        byte = stream.read(1)
        if not byte:
            return ParseOutcome.END_OF_STREAM, None
        code = byte[0]
        if code == NEWLINE:
            break
        if code == SEPARATOR and state is not _Field.DESCRIPTION:
            state = _Field(state + 1)
            continue
        buffer = fields[state]
        if code == TAB:
            buffer.append(TAB_REPLACEMENT, TAB_STOP)
        elif code == SEPARATOR or is_printable(code):
            buffer.append(chr(code))
        else:
            buffer.append(NONPRINT_REPLACEMENT)

    if state is not _Field.DESCRIPTION:
        return ParseOutcome.MALFORMED, None
    record = MatchRecord(
        file_path=fields[_Field.FILE_PATH].value(),
        line_number=parse_line_number(fields[_Field.LINE_NUMBER].value()),
        description=fields[_Field.DESCRIPTION].value(),
    )
    return ParseOutcome.PARSED, record


def iter_parse_results(stream: BinaryIO) -> Iterator[tuple[ParseOutcome, MatchRecord | None]]:
    """Yield parse results until the stream is exhausted.

    The final item is always ``(END_OF_STREAM, None)``.
    """
    while True:
        outcome, record = parse_next_match(stream)
        yield outcome, record
        if outcome is ParseOutcome.END_OF_STREAM:
            return


def iter_matches(stream: BinaryIO) -> Iterator[MatchRecord]:
    """Yield only successfully parsed records, in stream order."""
    parsed = 0
    malformed = 0
    for outcome, record in iter_parse_results(stream):
        if outcome is ParseOutcome.PARSED and record is not None:
            parsed += 1
            yield record
        elif outcome is ParseOutcome.MALFORMED:
            malformed += 1
    logger.debug("parsed %d records, skipped %d malformed lines", parsed, malformed)
