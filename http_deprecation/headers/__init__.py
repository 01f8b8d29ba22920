"""
Header handlers.

Each header we understand has a module here, named after the lower-cased
field name with dashes turned into underscores, holding a HttpHeader
subclass of the same name. HeaderProcessor finds them and runs the field
values of a HeaderSet through them.
"""

from functools import partial
import re
import sys
from typing import Any, Dict, Iterable, List, Optional, Type, Union, TYPE_CHECKING
import unittest

from http_deprecation.speak import Note, NoteCollector, null_add_note
from http_deprecation.syntax import rfc7230
from http_deprecation.type import AddNoteMethodType

from ._utils import RE_FLAGS, parse_date
from ._notes import *

if TYPE_CHECKING:
    from http_deprecation.message import HeaderSet  # pylint: disable=cyclic-import


class HttpHeader:
    """A HTTP Header handler."""

    canonical_name: str = None
    description: str = None
    reference: str = None
    syntax: Union[str, rfc7230.list_rule, bool] = None  # Verbose regular expression to match.
    list_header: bool = None  # Can be split into values on commas.

    def __init__(self, wire_name: str) -> None:
        self.wire_name = wire_name.strip()
        self.norm_name = self.wire_name.lower()
        if self.canonical_name is None:
            self.canonical_name = self.wire_name
        self.value: Any = []

    def parse(  # pylint: disable=no-self-use
        self, field_value: str, add_note: AddNoteMethodType
    ) -> Any:
        """
        Given a string value and an add_note function, parse and return the result."""
        return field_value

    def evaluate(self, add_note: AddNoteMethodType) -> None:
        """
        Called once header processing is done; typically used to evaluate an entire
        header's values.
        """

    def handle_input(self, field_value: str, add_note: AddNoteMethodType) -> None:
        """
        Basic input processing on a new field value.
        """

        # split before processing if a list header
        if self.list_header:
            values = self.split_list_header(field_value)
        else:
            values = [field_value]
        for value in values:
            # check field value syntax
            if self.syntax:
                element_syntax = (
                    self.syntax.element
                    if isinstance(self.syntax, rfc7230.list_rule)
                    else self.syntax
                )
                if not re.match(rf"^\s*(?:{element_syntax})\s*$", value, RE_FLAGS):
                    add_note(BAD_SYNTAX, ref_uri=self.reference)
            try:
                parsed_value = self.parse(value.strip(), add_note)
            except ValueError:
                continue  # we assume that the parser made a note of the problem.
            self.value.append(parsed_value)

    @staticmethod
    def split_list_header(field_value: str) -> List[str]:
        """
        Split a header field value on commas. needs to conform to the #rule.

        Commas inside quoted strings and inside <...> don't split.
        """
        return [
            f.strip()
            for f in re.findall(
                r'((?:[^",<]|%s|<[^>]*>)+)(?=%s|\s*$)'
                % (rfc7230.quoted_string, r"(?:\s*(?:,\s*)+)"),
                field_value,
                RE_FLAGS,
            )
            if f.strip()
        ]

    def finish(self, add_note: AddNoteMethodType) -> None:
        """
        Called when all field values are available.
        """
        if not self.list_header:
            if not self.value:
                self.value = None
            elif len(self.value) == 1:
                self.value = self.value[0]
            else:
                add_note(SINGLE_HEADER_REPEAT)
                self.value = self.value[0]
        self.evaluate(add_note)


class UnknownHttpHeader(HttpHeader):
    """A HTTP header that we don't recognise."""

    list_header = True

    def parse(self, field_value: str, add_note: AddNoteMethodType) -> Any:
        return field_value


class HeaderProcessor:
    """
    Parses the named headers out of a HeaderSet.
    """

    def __init__(self, add_note: AddNoteMethodType = None) -> None:
        self.add_note = add_note or null_add_note
        self._header_handlers: Dict[str, HttpHeader] = {}

    def process(self, headers: "HeaderSet", names: Iterable[str]) -> Dict[str, Any]:
        """
        Run every occurrence of each of names in headers through its handler.

        Returns a dict of parsed values, keyed by the lower-cased field name.
        Headers that aren't present are left out.
        """
        parsed_headers = {}  # type: Dict[str, Any]
        for name in names:
            field_values = headers.get_all(name)
            if not field_values:
                continue
            handler = self.get_header_handler(name)
            field_add_note = partial(
                self.add_note,
                f"header-{handler.norm_name}",
                field_name=handler.canonical_name,
            )
            for field_value in field_values:
                handler.handle_input(field_value, field_add_note)
            handler.finish(field_add_note)
            parsed_headers[handler.norm_name] = handler.value
        return parsed_headers

    def get_header_handler(self, header_name: str) -> HttpHeader:
        """
        If a header handler has already been instantiated for header_name, return it;
        otherwise, instantiate and return a new one.
        """
        norm_name = header_name.lower()
        if norm_name in self._header_handlers:
            return self._header_handlers[norm_name]
        handler = self.find_header_handler(header_name)(header_name)
        self._header_handlers[norm_name] = handler
        return handler

    @staticmethod
    def find_header_handler(header_name: str, default: bool = True) -> Optional[Type[HttpHeader]]:
        """
        Return a header handler class for the given field name.

        If default is true, return a dummy if one isn't found; otherwise, None.
        """
        name_token = HeaderProcessor.name_token(header_name)
        hdr_module = HeaderProcessor.find_header_module(name_token)
        if hdr_module and hasattr(hdr_module, name_token):
            return getattr(hdr_module, name_token)  # type: ignore
        if default:
            return UnknownHttpHeader
        return None

    @staticmethod
    def find_header_module(header_name: str) -> Any:
        """
        Return a module for the given field name, or None if it can't be found.
        """
        name_token = HeaderProcessor.name_token(header_name)
        if not name_token or name_token[0] == "_":  # these are special
            return None
        try:
            module_name = f"http_deprecation.headers.{name_token}"
            __import__(module_name)
            return sys.modules[module_name]
        except (ImportError, KeyError, TypeError):
            return None

    @staticmethod
    def name_token(header_name: str) -> str:
        """
        Return a tokenised, python-friendly name for a header.
        """
        return header_name.strip().replace("-", "_").lower()


class HeaderTest(unittest.TestCase):
    """
    Testing machinery for headers.
    """

    name: str = None
    inputs: List[Union[str, bytes]] = []
    expected_out: Any = []
    expected_err: List[Type[Note]] = []

    def test_header(self) -> Any:
        "Test the header."
        if not self.name:
            return self.skipTest("")
        from http_deprecation.message import HeaderSet  # pylint: disable=import-outside-toplevel

        collector = NoteCollector()
        headers = HeaderSet([(self.name, inp) for inp in self.inputs], collector)
        parsed_headers = HeaderProcessor(collector).process(headers, [self.name])
        out = parsed_headers.get(self.name.lower(), "HEADER HANDLER NOT FOUND")
        self.assertEqual(self.expected_out, out)
        diff = {n.__name__ for n in self.expected_err}.symmetric_difference(
            set(collector.note_classes)
        )
        for note in collector.notes:  # check formatting
            note.vars.update({"field_name": self.name})
            self.assertTrue(note.text % note.vars)
            self.assertTrue(note.summary % note.vars)
        self.assertEqual(len(diff), 0, f"Mismatched notes: {diff}")
        return None
