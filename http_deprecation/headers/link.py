#!/usr/bin/env python

import logging
from typing import Optional

from http_deprecation import headers
from http_deprecation.speak import Note, categories, levels
from http_deprecation.syntax import rfc8288
from http_deprecation.type import AddNoteMethodType

log = logging.getLogger(__name__)

DEPRECATION_REL_VALUE = f'"{rfc8288.DEPRECATION_REL}"'


class LinkParamError(ValueError):
    "A link-param that isn't a key=value pair."


def _find_deprecation_link(field_value: str) -> Optional[str]:
    parts = [p.strip() for p in field_value.split(";")]
    target = parts[0]
    if len(target) < 2 or target[0] != "<" or target[-1] != ">":
        return None
    for param in parts[1:]:
        pieces = param.split("=")
        if len(pieces) != 2 or not all(pieces):
            raise LinkParamError(param)
        key, value = pieces
        if key == "rel" and value == DEPRECATION_REL_VALUE:
            return target[1:-1]
    return None


def parse_deprecation_link(field_value: str) -> Optional[str]:
    """
    Return the target URL of a single Link field value if it has the
    relation type "deprecation"; otherwise None.

    The value looks like '<https://example.com/>; rel="deprecation"'. The
    relation has to be given exactly as rel="deprecation" (quoted), but can
    be in any position among the parameters. A parameter that isn't a
    key=value pair stops the search.
    """
    try:
        return _find_deprecation_link(field_value)
    except LinkParamError:
        return None


class link(headers.HttpHeader):
    canonical_name = "Link"
    description = """\
The `Link` header field allows structured links to be described. A link with the `deprecation`
relation type points to human-readable information about the deprecation of the resource."""
    reference = "%s#header.link" % rfc8288.SPEC_URL
    syntax = rfc8288.Link
    list_header = True

    def handle_input(self, field_value: str, add_note: AddNoteMethodType) -> None:
        seen = len(self.value)
        headers.HttpHeader.handle_input(self, field_value, add_note)
        if any(v is not None for v in self.value[seen:]):
            return
        # a value that doesn't split cleanly on commas can still be a link
        whole_link = parse_deprecation_link(field_value.strip())
        if whole_link is not None:
            log.debug("Found deprecation link in unsplit value %r", field_value)
            self.value.append(whole_link)

    def parse(self, field_value: str, add_note: AddNoteMethodType) -> Optional[str]:
        try:
            return _find_deprecation_link(field_value)
        except LinkParamError as why:
            log.debug("Link parameter %r isn't a key=value pair; skipping %r", str(why), field_value)
            add_note(LINK_PARAM_MALFORMED, param=str(why))
            return None

    def evaluate(self, add_note: AddNoteMethodType) -> None:
        found = [v for v in self.value if v is not None]
        if len(found) > 1:
            add_note(DEPRECATION_LINK_REPEATS, link=found[0])


class LINK_PARAM_MALFORMED(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "A parameter on the %(field_name)s header isn't a key=value pair."
    text = """\
Parameters on the `Link` header take the form `name=value`, separated by semicolons. The parameter
`%(param)s` doesn't, so the rest of that link was not examined for a `deprecation` relation.

Check for a stray or trailing semicolon, or an `=` inside an unquoted value."""


class DEPRECATION_LINK_REPEATS(Note):
    category = categories.DEPRECATION
    level = levels.WARN
    summary = "There is more than one deprecation link."
    text = """\
More than one `Link` in this response has the `deprecation` relation type. Only the first
(`%(link)s`) is used; other clients may choose differently."""


class DeprecationLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://developer.example.com/deprecation>; rel="deprecation"; type="text/html"']
    expected_out = ["https://developer.example.com/deprecation"]
    expected_err = []  # type: ignore


class ReorderedDeprecationLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://developer.example.com/deprecation>; type="text/html"; rel="deprecation"']
    expected_out = ["https://developer.example.com/deprecation"]
    expected_err = []  # type: ignore


class TrailingSemicolonLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://developer.example.com/deprecation>;  type="text/html"; rel="deprecation";']
    expected_out = ["https://developer.example.com/deprecation"]
    expected_err = [headers.BAD_SYNTAX]


class AlternateLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://example.com>; rel="alternate"']
    expected_out = [None]
    expected_err = []  # type: ignore


class UnquotedRelationLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ["<https://example.com/deprecation>; rel=deprecation"]
    expected_out = [None]
    expected_err = []  # type: ignore


class CombinedLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://example.com/a,b>; rel="alternate", <https://example.com/dep>; rel="deprecation"']
    expected_out = [None, "https://example.com/dep"]
    expected_err = []  # type: ignore


class BareParamLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://example.com/dep>; crossorigin; rel="deprecation"']
    expected_out = [None]
    expected_err = [LINK_PARAM_MALFORMED]


class RepeatedDeprecationLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = [
        '<https://example.com/first>; rel="deprecation"',
        '<https://example.com/second>; rel="deprecation"',
    ]
    expected_out = ["https://example.com/first", "https://example.com/second"]
    expected_err = [DEPRECATION_LINK_REPEATS]


class UnbracketedLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['https://example.com/dep; rel="deprecation"']
    expected_out = [None]
    expected_err = [headers.BAD_SYNTAX]


class CommaInParamLinkTest(headers.HeaderTest):
    name = "Link"
    inputs = ['<https://example.com/dep>; type=text/html,x; rel="deprecation"']
    expected_out = [None, None, "https://example.com/dep"]
    expected_err = [headers.BAD_SYNTAX]
