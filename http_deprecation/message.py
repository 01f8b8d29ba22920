"""
Deprecation information from a whole response.

deprecation() takes a response (or just its headers) and returns a
Deprecation record, or None when the response isn't marked as deprecated.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime
from functools import partial
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from http_deprecation.headers import HeaderProcessor
from http_deprecation.headers._utils import decode_field, note_encoding
from http_deprecation.speak import Note, categories, levels, null_add_note
from http_deprecation.type import AddNoteMethodType, HeaderSource, HeaderTupleIterType

log = logging.getLogger(__name__)

DEPRECATION = "Deprecation"
LINK = "Link"


class HeaderSet:
    """
    An ordered list of response header fields, with case-insensitive lookup.

    Names and values can be given as str or bytes; bytes are decoded as
    ASCII, falling back to ISO-8859-1 (with a note) when that fails.
    """

    def __init__(
        self, fields: HeaderTupleIterType = (), add_note: AddNoteMethodType = None
    ) -> None:
        add_note = add_note or null_add_note
        self.fields = []  # type: List[Tuple[str, str]]
        for offset, (name, value) in enumerate(fields, 1):
            subject = f"offset-{offset}"
            if isinstance(name, bytes):
                name, bad_name = decode_field(name, note_name=True)
                if bad_name:
                    note_encoding(partial(add_note, subject), name, True)
            if isinstance(value, bytes):
                value, bad_value = decode_field(value)
                if bad_value:
                    note_encoding(partial(add_note, subject), name, False)
            self.fields.append((str(name).strip(), str(value).strip()))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.fields!r}>"

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def get(self, name: str) -> Optional[str]:
        "Return the first value of the named header, or None if it isn't present."
        norm_name = name.lower()
        for field_name, field_value in self.fields:
            if field_name.lower() == norm_name:
                return field_value
        return None

    def get_all(self, name: str) -> List[str]:
        "Return every value of the named header, in the order received."
        norm_name = name.lower()
        return [v for (n, v) in self.fields if n.lower() == norm_name]

    @classmethod
    def from_response(
        cls,
        response: Any,
        add_note: AddNoteMethodType = None,
        names: Iterable[str] = (DEPRECATION, LINK),
    ) -> "HeaderSet":
        """
        Make a HeaderSet out of whatever a HTTP client hands back.

        Accepts a HeaderSet; a list of (name, value) tuples (e.g., thor's raw
        headers); anything with multi_items() (httpx) or items() (mappings,
        email.message.Message, multidicts); any other HeaderSource, of which
        only the headers in names are copied; or an object with one of those
        as its headers attribute (most response objects).
        """
        if isinstance(response, HeaderSet):
            return response
        source = getattr(response, "headers", response)
        if isinstance(source, HeaderSet):
            return source
        if hasattr(source, "multi_items"):
            pairs = source.multi_items()
        elif hasattr(source, "items"):
            pairs = source.items()
        elif hasattr(source, "get_all"):
            pairs = _source_pairs(source, names)
        else:
            pairs = source
        return cls(_flatten(pairs), add_note)


def _source_pairs(source: HeaderSource, names: Iterable[str]) -> List[Tuple[str, str]]:
    # get_all() returns None for a missing header in email.message.Message
    return [(name, value) for name in names for value in source.get_all(name) or []]


def _flatten(pairs: Any) -> Iterator[Tuple[Any, Any]]:
    "Expand {name: [value, value]} style entries into one tuple per value."
    for name, value in pairs:
        if isinstance(value, (list, tuple)):
            for item in value:
                yield name, item
        else:
            yield name, value


@dataclass(frozen=True)
class Deprecation:
    """
    A response's deprecation information.

    timestamp is when the resource was (or will be) deprecated; it is None
    when the Deprecation header was just "true", or when its date couldn't
    be understood.

    deprecation_link is the target of the Link header with the relation
    type "deprecation", if there is one.
    """

    timestamp: Optional[datetime] = None
    deprecation_link: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "timestamp": format_datetime(self.timestamp) if self.timestamp else None,
            "deprecation_link": self.deprecation_link,
        }


def deprecation(
    response: Any, add_note: AddNoteMethodType = None, now: datetime = None
) -> Optional[Deprecation]:
    """
    Return the Deprecation information for response, or None if it doesn't
    have a Deprecation header.

    response can be anything HeaderSet.from_response() understands. Problems
    with the header values never raise; they leave the corresponding field
    as None and, if add_note is given, are reported through it.

    now is only used to tell past and future deprecation dates apart in
    the notes.
    """
    add_note = add_note or null_add_note
    headers = HeaderSet.from_response(response, add_note)
    if headers.get(DEPRECATION) is None:
        return None

    parsed_headers = HeaderProcessor(add_note).process(headers, [DEPRECATION, LINK])
    timestamp = parsed_headers.get(DEPRECATION.lower())
    deprecation_link = next(
        (link for link in parsed_headers.get(LINK.lower(), []) if link is not None), None
    )
    result = Deprecation(timestamp=timestamp, deprecation_link=deprecation_link)
    log.debug("Deprecation found: %r", result)
    _note_result(result, partial(add_note, "deprecation"), now)
    return result


def _note_result(
    result: Deprecation, add_note: AddNoteMethodType, now: Optional[datetime]
) -> None:
    if result.timestamp is None:
        add_note(DEPRECATED)
    else:
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        date_str = format_datetime(result.timestamp)
        if result.timestamp <= now:
            add_note(DEPRECATED_SINCE, deprecation_date=date_str)
        else:
            add_note(DEPRECATED_FROM, deprecation_date=date_str)
    if result.deprecation_link is not None:
        add_note(DEPRECATION_LINK, deprecation_link=result.deprecation_link)


class DEPRECATED(Note):
    category = categories.DEPRECATION
    level = levels.WARN
    summary = "This resource is deprecated."
    text = """\
The `Deprecation` header says that this resource is deprecated, but doesn't say since when.

Deprecated resources are still available, but may be removed in the future; clients should
migrate away from them."""


class DEPRECATED_SINCE(Note):
    category = categories.DEPRECATION
    level = levels.WARN
    summary = "This resource has been deprecated since %(deprecation_date)s."
    text = """\
The `Deprecation` header says that this resource was deprecated on %(deprecation_date)s.

Deprecated resources are still available, but may be removed in the future; clients should
migrate away from them."""


class DEPRECATED_FROM(Note):
    category = categories.DEPRECATION
    level = levels.INFO
    summary = "This resource will be deprecated on %(deprecation_date)s."
    text = """\
The `Deprecation` header gives a date in the future (%(deprecation_date)s); from then on, the
resource will be deprecated.

Clients should plan to migrate away from it before then."""


class DEPRECATION_LINK(Note):
    category = categories.DEPRECATION
    level = levels.INFO
    summary = "More information about the deprecation is at %(deprecation_link)s."
    text = """\
A `Link` header with the `deprecation` relation type points to
[more information](%(deprecation_link)s) about this resource's deprecation."""
