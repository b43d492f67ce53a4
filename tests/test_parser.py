"""Line parser behavior tests.

Covers field splitting, malformed-line tolerance, bounded fields, and
character substitution for ``path:line:text`` records.
"""

from __future__ import annotations

import io
import unittest

from grepbrowse import parser
from grepbrowse.records import ParseOutcome


def _parse_all(data: bytes):
    return list(parser.iter_parse_results(io.BytesIO(data)))


def _records(data: bytes):
    return list(parser.iter_matches(io.BytesIO(data)))


class ParseNextMatchTests(unittest.TestCase):
    def test_well_formed_line_yields_one_parsed_record(self) -> None:
        results = _parse_all(b"path:42:some text\n")

        self.assertEqual(len(results), 2)
        outcome, record = results[0]
        self.assertIs(outcome, ParseOutcome.PARSED)
        self.assertEqual(record.file_path, "path")
        self.assertEqual(record.line_number, 42)
        self.assertEqual(record.description, "some text")
        self.assertEqual(results[1], (ParseOutcome.END_OF_STREAM, None))

    def test_line_with_too_few_separators_is_malformed(self) -> None:
        for line in (b"no separators\n", b"path:12\n", b"\n"):
            with self.subTest(line=line):
                outcome, record = parser.parse_next_match(io.BytesIO(line))
                self.assertIs(outcome, ParseOutcome.MALFORMED)
                self.assertIsNone(record)

    def test_mixed_input_counts_only_well_formed_lines(self) -> None:
        data = b"a.c:1:one\ngarbage\nb.c:2:two\nc.c:3\nd.c:4:four\n"

        records = _records(data)

        self.assertEqual([r.file_path for r in records], ["a.c", "b.c", "d.c"])
        self.assertEqual([r.line_number for r in records], [1, 2, 4])

    def test_extra_separators_stay_in_description(self) -> None:
        outcome, record = parser.parse_next_match(io.BytesIO(b"path:7:a:b:c\n"))

        self.assertIs(outcome, ParseOutcome.PARSED)
        self.assertEqual(record.line_number, 7)
        self.assertEqual(record.description, "a:b:c")

    def test_empty_description_is_still_parsed(self) -> None:
        outcome, record = parser.parse_next_match(io.BytesIO(b"x.py:3:\n"))

        self.assertIs(outcome, ParseOutcome.PARSED)
        self.assertEqual(record.description, "")

    def test_partial_line_at_end_of_stream_is_not_emitted(self) -> None:
        results = _parse_all(b"a.txt:1:alpha\nb.txt:2:beta")

        self.assertEqual(results[0][0], ParseOutcome.PARSED)
        self.assertEqual(results[1], (ParseOutcome.END_OF_STREAM, None))
        self.assertEqual(len(results), 2)

    def test_empty_stream_is_end_of_stream(self) -> None:
        self.assertEqual(parser.parse_next_match(io.BytesIO(b"")), (ParseOutcome.END_OF_STREAM, None))

    def test_parser_resumes_after_malformed_line(self) -> None:
        stream = io.BytesIO(b"broken\nok.c:9:fine\n")

        first = parser.parse_next_match(stream)
        second = parser.parse_next_match(stream)

        self.assertIs(first[0], ParseOutcome.MALFORMED)
        self.assertIs(second[0], ParseOutcome.PARSED)
        self.assertEqual(second[1].file_path, "ok.c")


class BoundedFieldTests(unittest.TestCase):
    def test_long_description_is_truncated_to_capacity_minus_terminator(self) -> None:
        data = b"f.c:1:" + b"x" * 1000 + b"\n"

        (record,) = _records(data)

        self.assertEqual(record.description, "x" * (parser.DESCRIPTION_CAPACITY - 1))
        self.assertEqual(record.file_path, "f.c")
        self.assertEqual(record.line_number, 1)

    def test_long_path_does_not_spill_into_other_fields(self) -> None:
        data = b"p" * 600 + b":5:text\n"

        (record,) = _records(data)

        self.assertEqual(len(record.file_path), parser.FILE_PATH_CAPACITY - 1)
        self.assertEqual(record.line_number, 5)
        self.assertEqual(record.description, "text")

    def test_truncated_line_is_followed_by_next_record(self) -> None:
        data = b"a.c:1:" + b"y" * 700 + b"\nb.c:2:next\n"

        records = _records(data)

        self.assertEqual(len(records), 2)
        self.assertEqual(records[1].description, "next")

    def test_bounded_field_keeps_capacity_minus_one(self) -> None:
        field = parser.BoundedField(4)
        for ch in "abcdef":
            field.append(ch)

        self.assertEqual(field.value(), "abc")


class CharacterSubstitutionTests(unittest.TestCase):
    def test_tab_expands_to_tab_stop_spaces(self) -> None:
        (record,) = _records(b"t.c:1:a\tb\n")

        self.assertEqual(record.description, "a" + " " * parser.TAB_STOP + "b")

    def test_tab_expansion_counts_against_capacity(self) -> None:
        data = b"t.c:1:" + b"z" * 253 + b"\t\n"

        (record,) = _records(data)

        self.assertEqual(record.description, "z" * 253 + "  ")

    def test_non_printable_bytes_become_placeholder(self) -> None:
        (record,) = _records(b"t.c:1:a\x01b\rc\x7f\xc3\xa9\n")

        self.assertEqual(record.description, "a.b.c...")

    def test_non_printable_in_path_is_replaced(self) -> None:
        (record,) = _records(b"we\x1bird.c:2:x\n")

        self.assertEqual(record.file_path, "we.ird.c")


class ParseLineNumberTests(unittest.TestCase):
    def test_atoi_style_conversion(self) -> None:
        cases = {
            "42": 42,
            "  17": 17,
            "+8": 8,
            "12abc": 12,
            "abc": 0,
            "": 0,
            "-5": 0,
            "  ": 0,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parser.parse_line_number(text), expected)

    def test_non_numeric_line_field_parses_as_zero(self) -> None:
        (record,) = _records(b"f.c:abc:text\n")

        self.assertEqual(record.line_number, 0)
        self.assertEqual(record.description, "text")


if __name__ == "__main__":
    unittest.main()
