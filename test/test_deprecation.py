#!/usr/bin/env python3

from datetime import datetime, timezone
from email.message import Message
import unittest

from http_deprecation import Deprecation, HeaderSet, deprecation, parse_deprecation_link
from http_deprecation.headers import BAD_DATE_SYNTAX, HEADER_VALUE_ENCODING, SINGLE_HEADER_REPEAT
from http_deprecation.headers.link import DEPRECATION_LINK_REPEATS
from http_deprecation.message import (
    DEPRECATED,
    DEPRECATED_FROM,
    DEPRECATED_SINCE,
    DEPRECATION_LINK,
)
from http_deprecation.speak import NoteCollector

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
DEP_URL = "https://developer.example.com/deprecation"
DEP_LINK = f'<{DEP_URL}>; rel="deprecation"; type="text/html"'
ALT_LINK = '<https://example.com>; rel="alternate"'


class FakeResponse:
    "Something with a headers attribute, like most client responses."

    def __init__(self, headers):
        self.headers = headers


class TestDeprecation(unittest.TestCase):
    def test_no_deprecation_header(self):
        self.assertIsNone(deprecation([]))
        self.assertIsNone(deprecation([("Content-Type", "text/html")]))

    def test_no_deprecation_header_with_link(self):
        self.assertIsNone(deprecation([("Link", DEP_LINK)]))

    def test_flag(self):
        self.assertEqual(
            deprecation([("Deprecation", "true")]),
            Deprecation(timestamp=None, deprecation_link=None),
        )

    def test_date(self):
        result = deprecation([("Deprecation", "Thu, 01 Jan 1970 00:00:00 +0000")])
        self.assertEqual(result.timestamp, EPOCH)
        self.assertIsNone(result.deprecation_link)

    def test_two_digit_year(self):
        result = deprecation([("Deprecation", "Sat, 01 Jan 55 00:00:00 +0000")])
        self.assertEqual(result.timestamp, datetime(1955, 1, 1, tzinfo=timezone.utc))

    def test_iso_date(self):
        # ISO 8601 isn't a valid date here, but the resource is still deprecated
        result = deprecation([("Deprecation", "2021-01-01T10:00:13Z")])
        self.assertEqual(result, Deprecation(None, None))

    def test_garbage(self):
        for value in ["yes", "1", "True", "TRUE", "", "@1688169599"]:
            self.assertEqual(deprecation([("Deprecation", value)]), Deprecation(), value)

    def test_link(self):
        result = deprecation([("Deprecation", "true"), ("Link", DEP_LINK)])
        self.assertEqual(result, Deprecation(None, DEP_URL))

    def test_multiple_links(self):
        result = deprecation(
            [("Deprecation", "true"), ("Link", ALT_LINK), ("Link", DEP_LINK)]
        )
        self.assertEqual(result, Deprecation(None, DEP_URL))

    def test_multiple_links_reversed(self):
        result = deprecation(
            [("Link", DEP_LINK), ("Link", ALT_LINK), ("Deprecation", "true")]
        )
        self.assertEqual(result, Deprecation(None, DEP_URL))

    def test_no_matching_link(self):
        result = deprecation(
            [("Deprecation", "Thu, 01 Jan 1970 00:00:00 +0000"), ("Link", ALT_LINK)]
        )
        self.assertEqual(result, Deprecation(EPOCH, None))

    def test_combined_link_field(self):
        result = deprecation([("Deprecation", "true"), ("Link", f"{ALT_LINK}, {DEP_LINK}")])
        self.assertEqual(result.deprecation_link, DEP_URL)

    def test_link_with_unterminated_quote(self):
        value = '<https://example.com/dep>; rel="deprecation"; title="unterminated'
        self.assertEqual(parse_deprecation_link(value), "https://example.com/dep")
        result = deprecation([("Deprecation", "true"), ("Link", value)])
        self.assertEqual(result.deprecation_link, "https://example.com/dep")

    def test_link_with_comma_in_unquoted_param(self):
        value = '<https://example.com/dep>; type=text/html,x; rel="deprecation"'
        self.assertEqual(parse_deprecation_link(value), "https://example.com/dep")
        notes = NoteCollector()
        result = deprecation([("Deprecation", "true"), ("Link", value)], notes)
        self.assertEqual(result.deprecation_link, "https://example.com/dep")
        self.assertNotIn(DEPRECATION_LINK_REPEATS.__name__, notes.note_classes)

    def test_first_deprecation_link_wins(self):
        notes = NoteCollector()
        result = deprecation(
            [
                ("Deprecation", "true"),
                ("Link", '<https://example.com/first>; rel="deprecation"'),
                ("Link", '<https://example.com/second>; rel="deprecation"'),
            ],
            notes,
        )
        self.assertEqual(result.deprecation_link, "https://example.com/first")
        self.assertIn("DEPRECATION_LINK_REPEATS", notes.note_classes)

    def test_malformed_link_is_skipped(self):
        result = deprecation(
            [
                ("Deprecation", "true"),
                ("Link", "garbage"),
                ("Link", '<https://example.com/x>; rel="deprecation";;'),
                ("Link", DEP_LINK),
            ]
        )
        self.assertEqual(result.deprecation_link, "https://example.com/x")

    def test_case_insensitive_names(self):
        result = deprecation([("deprecation", "true"), ("LINK", DEP_LINK)])
        self.assertEqual(result, Deprecation(None, DEP_URL))

    def test_first_deprecation_header_wins(self):
        notes = NoteCollector()
        result = deprecation(
            [("Deprecation", "Thu, 01 Jan 1970 00:00:00 +0000"), ("Deprecation", "true")],
            notes,
        )
        self.assertEqual(result.timestamp, EPOCH)
        self.assertIn(SINGLE_HEADER_REPEAT.__name__, notes.note_classes)

    def test_bytes_headers(self):
        result = deprecation(
            [(b"Deprecation", b"Thu, 01 Jan 1970 00:00:00 +0000"), (b"Link", DEP_LINK.encode("ascii"))]
        )
        self.assertEqual(result, Deprecation(EPOCH, DEP_URL))

    def test_non_ascii_value(self):
        notes = NoteCollector()
        result = deprecation([(b"Deprecation", "d\xe9j\xe0".encode("utf-8"))], notes)
        self.assertEqual(result, Deprecation())
        self.assertIn(HEADER_VALUE_ENCODING.__name__, notes.note_classes)
        self.assertIn(BAD_DATE_SYNTAX.__name__, notes.note_classes)

    def test_result_is_immutable(self):
        result = deprecation([("Deprecation", "true")])
        with self.assertRaises(AttributeError):
            result.deprecation_link = "https://example.com/"

    def test_to_dict(self):
        result = deprecation([("Deprecation", "Thu, 01 Jan 1970 00:00:00 GMT"), ("Link", DEP_LINK)])
        self.assertEqual(
            result.to_dict(),
            {"timestamp": "Thu, 01 Jan 1970 00:00:00 +0000", "deprecation_link": DEP_URL},
        )
        self.assertEqual(Deprecation().to_dict(), {"timestamp": None, "deprecation_link": None})


class TestResponseShapes(unittest.TestCase):
    def test_mapping(self):
        result = deprecation({"Deprecation": "true", "Link": [ALT_LINK, DEP_LINK]})
        self.assertEqual(result, Deprecation(None, DEP_URL))

    def test_email_message(self):
        msg = Message()
        msg["Deprecation"] = "true"
        msg["Link"] = ALT_LINK
        msg["Link"] = DEP_LINK
        self.assertEqual(deprecation(msg), Deprecation(None, DEP_URL))

    def test_headers_attribute(self):
        response = FakeResponse([("Deprecation", "true"), ("Link", DEP_LINK)])
        self.assertEqual(deprecation(response), Deprecation(None, DEP_URL))

    def test_header_set(self):
        headers = HeaderSet([("Deprecation", "true")])
        self.assertIs(HeaderSet.from_response(headers), headers)
        self.assertIs(HeaderSet.from_response(FakeResponse(headers)), headers)
        self.assertEqual(deprecation(headers), Deprecation())

    def test_multi_items(self):
        class MultiHeaders:
            def multi_items(self):
                return [("Deprecation", "true"), ("Link", ALT_LINK), ("Link", DEP_LINK)]

            def items(self):
                raise AssertionError("items() shouldn't be used")

        self.assertEqual(deprecation(FakeResponse(MultiHeaders())), Deprecation(None, DEP_URL))

    def test_get_all_source(self):
        class LookupHeaders:
            "Only supports name lookups."

            fields = {"deprecation": ["true"], "link": [ALT_LINK, DEP_LINK]}

            def get_all(self, name):
                return self.fields.get(name.lower(), [])

        headers = HeaderSet.from_response(LookupHeaders())
        self.assertEqual(
            headers.fields,
            [("Deprecation", "true"), ("Link", ALT_LINK), ("Link", DEP_LINK)],
        )
        self.assertEqual(deprecation(LookupHeaders()), Deprecation(None, DEP_URL))


class TestDeprecationNotes(unittest.TestCase):
    def check_notes(self, headers, expected, now=None):
        notes = NoteCollector()
        deprecation(headers, notes, now)
        self.assertEqual(set(notes.note_classes), {n.__name__ for n in expected})
        for note in notes.notes:
            note.vars.setdefault("field_name", "Deprecation")
            self.assertTrue(note.show_summary())
            self.assertTrue(note.show_text())

    def test_flag_notes(self):
        self.check_notes([("Deprecation", "true")], [DEPRECATED])

    def test_past_date_notes(self):
        self.check_notes(
            [("Deprecation", "Thu, 01 Jan 1970 00:00:00 +0000"), ("Link", DEP_LINK)],
            [DEPRECATED_SINCE, DEPRECATION_LINK],
        )

    def test_future_date_notes(self):
        self.check_notes(
            [("Deprecation", "Fri, 01 Jan 2100 00:00:00 +0000")],
            [DEPRECATED_FROM],
            now=datetime(2024, 1, 1),
        )

    def test_bad_date_notes(self):
        self.check_notes([("Deprecation", "2021-01-01T10:00:13Z")], [BAD_DATE_SYNTAX, DEPRECATED])

    def test_repeated_link_notes(self):
        self.check_notes(
            [("Deprecation", "true"), ("Link", DEP_LINK), ("Link", DEP_LINK)],
            [DEPRECATED, DEPRECATION_LINK, DEPRECATION_LINK_REPEATS],
        )

    def test_no_notes_when_not_deprecated(self):
        self.check_notes([("Link", "garbage")], [])


if __name__ == "__main__":
    unittest.main()
