#!/usr/bin/env python3

import unittest

from http_deprecation.speak import Note, NoteCollector, categories, levels


class LINKY_NOTE(Note):
    category = categories.DEPRECATION
    level = levels.INFO
    summary = "See %(deprecation_link)s."
    text = "See [the notice](%(deprecation_link)s) for `%(field_name)s`."


class TestNotes(unittest.TestCase):
    def test_show_summary(self):
        note = LINKY_NOTE("deprecation", {"deprecation_link": "https://example.com/<x>"})
        self.assertEqual("See https://example.com/<x>.", note.show_summary())

    def test_show_text_escapes_vars(self):
        note = LINKY_NOTE(
            "deprecation", {"deprecation_link": "https://example.com/", "field_name": "<b>Link</b>"}
        )
        html = note.show_text()
        self.assertIn('<a href="https://example.com/">the notice</a>', html)
        self.assertNotIn("<b>Link</b>", html)
        self.assertTrue(html.startswith("<p>"))

    def test_equality(self):
        self.assertEqual(LINKY_NOTE("a", {"x": 1}), LINKY_NOTE("a", {"x": 1}))
        self.assertNotEqual(LINKY_NOTE("a", {"x": 1}), LINKY_NOTE("b", {"x": 1}))

    def test_collector(self):
        collector = NoteCollector()
        collector("header-link", LINKY_NOTE, deprecation_link="https://example.com/")
        self.assertEqual(["LINKY_NOTE"], collector.note_classes)
        self.assertEqual("header-link", collector.notes[0].subject)
        self.assertEqual({"deprecation_link": "https://example.com/"}, collector.notes[0].vars)


if __name__ == "__main__":
    unittest.main()
