"""Regression tests for raw-key decoding.

Covers ESC timing, arrow and paging sequences, and Enter normalization.
"""

from __future__ import annotations

import os
import time
import unittest

from grepbrowse import input as input_mod
from grepbrowse.keys import action_for_key


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_keys(self, payload: bytes, count: int = 1) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        started = time.monotonic()
        (key,) = self._read_keys(b"\x1b")
        elapsed = time.monotonic() - started

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences(self) -> None:
        self.assertEqual(self._read_keys(b"\x1b[A"), ["UP"])
        self.assertEqual(self._read_keys(b"\x1b[B"), ["DOWN"])
        self.assertEqual(self._read_keys(b"\x1bOB"), ["DOWN"])

    def test_page_keys(self) -> None:
        self.assertEqual(self._read_keys(b"\x1b[6~"), ["PAGE_DOWN"])
        self.assertEqual(self._read_keys(b"\x1b[5~"), ["PAGE_UP"])

    def test_incomplete_page_sequence_is_not_escape(self) -> None:
        self.assertEqual(self._read_keys(b"\x1b[6"), [input_mod.UNKNOWN_KEY])

    def test_double_escape_yields_two_escapes(self) -> None:
        self.assertEqual(self._read_keys(b"\x1b\x1b", count=2), ["ESC", "ESC"])

    def test_unrecognized_sequences_are_consumed_and_unbound(self) -> None:
        sequences = {
            "delete": b"\x1b[3~",
            "insert": b"\x1b[2~",
            "home_vt": b"\x1b[1~",
            "f5": b"\x1b[15~",
            "f1": b"\x1bOP",
            "alt_x": b"\x1bx",
            "shift_up": b"\x1b[1;2A",
        }
        for name, payload in sequences.items():
            with self.subTest(key=name):
                first, rest = self._read_keys(payload, count=2)

                self.assertEqual(first, input_mod.UNKNOWN_KEY)
                self.assertIsNone(action_for_key(first))
                self.assertEqual(rest, "")

    def test_carriage_return_and_line_feed_are_enter(self) -> None:
        self.assertEqual(self._read_keys(b"\r\n", count=2), ["ENTER", "ENTER"])

    def test_plain_characters_pass_through(self) -> None:
        self.assertEqual(self._read_keys(b"jk", count=2), ["j", "k"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(self._read_keys(b"", count=1), [""])


if __name__ == "__main__":
    unittest.main()
