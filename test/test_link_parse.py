#!/usr/bin/env python3

import unittest

from http_deprecation import parse_deprecation_link

URL = "https://developer.example.com/deprecation"


class TestLinkParse(unittest.TestCase):
    def test_deprecation_link(self):
        link = f'<{URL}>; rel="deprecation"; type="text/html"'
        self.assertEqual(parse_deprecation_link(link), URL)

    def test_different_order(self):
        link = f'<{URL}>;  type="text/html"; rel="deprecation";'
        self.assertEqual(parse_deprecation_link(link), URL)

    def test_only_rel(self):
        self.assertEqual(parse_deprecation_link(f'<{URL}>; rel="deprecation"'), URL)

    def test_other_relation(self):
        self.assertIsNone(parse_deprecation_link('<https://example.com>; rel="alternate"'))

    def test_no_params(self):
        self.assertIsNone(parse_deprecation_link(f"<{URL}>"))

    def test_empty(self):
        self.assertIsNone(parse_deprecation_link(""))

    def test_unbracketed_target(self):
        self.assertIsNone(parse_deprecation_link(f'{URL}; rel="deprecation"'))
        self.assertIsNone(parse_deprecation_link(f'<{URL}; rel="deprecation"'))

    def test_relation_must_be_quoted(self):
        self.assertIsNone(parse_deprecation_link(f"<{URL}>; rel=deprecation"))
        self.assertIsNone(parse_deprecation_link(f"<{URL}>; rel='deprecation'"))

    def test_relation_is_case_sensitive(self):
        self.assertIsNone(parse_deprecation_link(f'<{URL}>; REL="deprecation"'))
        self.assertIsNone(parse_deprecation_link(f'<{URL}>; rel="Deprecation"'))

    def test_spaces_around_equals(self):
        self.assertIsNone(parse_deprecation_link(f'<{URL}>; rel = "deprecation"'))

    def test_malformed_param_stops_search(self):
        for link in [
            f'<{URL}>; crossorigin; rel="deprecation"',
            f'<{URL}>; ; rel="deprecation"',
            f'<{URL}>; title="a=b"; rel="deprecation"',
            f'<{URL}>; =text/html; rel="deprecation"',
            f'<{URL}>; type=; rel="deprecation"',
        ]:
            self.assertIsNone(parse_deprecation_link(link), link)

    def test_malformed_param_after_match(self):
        link = f'<{URL}>; rel="deprecation"; crossorigin'
        self.assertEqual(parse_deprecation_link(link), URL)

    def test_trailing_semicolon(self):
        self.assertIsNone(parse_deprecation_link(f"<{URL}>;"))
        self.assertIsNone(parse_deprecation_link('<https://example.com>; rel="alternate";'))

    def test_empty_target(self):
        self.assertEqual(parse_deprecation_link('<>; rel="deprecation"'), "")

    def test_relative_target(self):
        self.assertEqual(parse_deprecation_link('</docs/deprecation>; rel="deprecation"'), "/docs/deprecation")


if __name__ == "__main__":
    unittest.main()
