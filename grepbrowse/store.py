"""Ordered match storage and the empty-result exit policy."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from .parser import iter_matches
from .records import MatchRecord

NO_PARSEABLE_RECORDS_MESSAGE = "Unable to parse matches. (Did you forget to specify the '-n' option to grep?)"
NO_MATCHES_MESSAGE = "No matches."


class MatchStore:
    """Append-only sequence of match records in parse order.

    The store is filled during parsing and sealed before the interactive
    phase; appending to a sealed store raises ``RuntimeError``.
    """

    def __init__(self, records: list[MatchRecord] | None = None) -> None:
        self._records: list[MatchRecord] = list(records or [])
        self._sealed = False

    def append(self, record: MatchRecord) -> None:
        if self._sealed:
            raise RuntimeError("match store is read-only after parsing")
        self._records.append(record)

    def seal(self) -> None:
        self._sealed = True

    def clear(self) -> None:
        """Release all records at shutdown."""
        self._records = []

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> MatchRecord:
        return self._records[index]

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def max_label_width(self) -> int:
        return max((len(record.display_label) for record in self._records), default=0)


def build_match_store(stream: BinaryIO) -> MatchStore:
    """Drain ``stream`` through the parser and return a sealed store."""
    store = MatchStore()
    for record in iter_matches(stream):
        store.append(record)
    store.seal()
    return store


def empty_result_message(exit_status: int) -> str | None:
    """Pick the diagnostic for an empty store from the source's exit status.

    Status 0 means the command ran but its output was not in the expected
    format; status 1 is the conventional "nothing found". Other statuses
    are failures the command already reported itself.
    """
    if exit_status == 0:
        return NO_PARSEABLE_RECORDS_MESSAGE
    if exit_status == 1:
        return NO_MATCHES_MESSAGE
    return None
