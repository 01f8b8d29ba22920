"""
Common header-related Notes.
"""

from http_deprecation.speak import Note, categories, levels


class SINGLE_HEADER_REPEAT(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "Only one %(field_name)s header is allowed in a response."
    text = """\
This header is designed to only occur once in a message. When it occurs more than once, a receiver
needs to choose the one to use, which can lead to interoperability problems, since different
implementations may make different choices.

This check uses the first instance of the header that is present; other implementations may
behave differently."""


class BAD_SYNTAX(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's syntax isn't valid."
    text = """\
The value for this header doesn't conform to its specified syntax; see [its
definition](%(ref_uri)s) for more information."""


class BAD_DATE_SYNTAX(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's value isn't a valid date."
    text = """\
Dates in this header use the date-time format of [RFC 5322](https://tools.ietf.org/html/rfc5322#section-3.3);
for example, `Thu, 01 Jan 1970 00:00:00 +0000`. Other formats, such as ISO 8601
(`1970-01-01T00:00:00Z`), aren't recognised.

The date has been ignored."""


class DATE_OBSOLETE(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s header's value uses an obsolete format."
    text = """\
RFC 5322 keeps two-digit years and named time zones (like `GMT` or `PST`) only for compatibility.
Use a four-digit year and a numeric offset such as `+0000`. See [the
specification](https://tools.ietf.org/html/rfc5322#section-4.3) for more information."""


class HEADER_NAME_ENCODING(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's name contains non-ASCII characters."
    text = """\
HTTP header field-names can only contain ASCII characters. Non-ASCII characters have been removed
from this header name."""


class HEADER_VALUE_ENCODING(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s header's value contains non-ASCII characters."
    text = """\
HTTP headers use the ISO-8859-1 character set, but in most cases are pure ASCII (a subset of this
encoding).

This header has non-ASCII characters, which have been interpreted as being encoded in
ISO-8859-1. If another encoding is used (e.g., UTF-8), the results may be unpredictable."""
