from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
import logging
import re
from typing import Tuple

from http_deprecation.syntax import rfc5322
from http_deprecation.type import AddNoteMethodType
from ._notes import BAD_DATE_SYNTAX, DATE_OBSOLETE, HEADER_NAME_ENCODING, HEADER_VALUE_ENCODING

RE_FLAGS = re.VERBOSE | re.IGNORECASE

log = logging.getLogger(__name__)

TWO_DIGIT_YEAR = r"^(?: %s , )? %s %s %s" % (
    rfc5322.day_of_week,
    rfc5322.day,
    rfc5322.month,
    rfc5322.obs_year,
)


def parse_date(value: str, add_note: AddNoteMethodType) -> datetime:
    """
    Parse a RFC5322 date-time into an aware datetime. Raises ValueError if it's bad.

    A zone of -0000 ("no information"), or a military zone, is taken to be
    UTC. Two-digit years 00-49 are 20xx and 50-99 are 19xx.
    """
    if not re.match(r"^%s$" % rfc5322.date_time, value, RE_FLAGS):
        add_note(BAD_DATE_SYNTAX)
        raise ValueError(f"not a RFC5322 date-time: {value!r}")
    if not re.match(r"^%s$" % rfc5322.current_date_time, value, RE_FLAGS):
        add_note(DATE_OBSOLETE)
    try:
        date_value = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError) as why:
        # out-of-range fields, e.g. "32 Jan" or "25:00"
        add_note(BAD_DATE_SYNTAX)
        raise ValueError(f"not a valid date: {value!r}") from why
    if re.match(TWO_DIGIT_YEAR, value, RE_FLAGS):
        # email.utils puts 50-68 in 20xx; RFC5322 section 4.3 doesn't
        short_year = date_value.year % 100
        date_value = date_value.replace(year=(2000 if short_year < 50 else 1900) + short_year)
    if date_value.tzinfo is None:
        date_value = date_value.replace(tzinfo=timezone.utc)
    return date_value


def decode_field(instr: bytes, note_name: bool = False) -> Tuple[str, bool]:
    """
    Decode a raw header name or value. Returns the string and whether the
    strict ASCII decode failed.
    """
    try:
        return instr.decode("ascii", "strict"), False
    except UnicodeError:
        if note_name:
            return instr.decode("ascii", "ignore"), True
        return instr.decode("iso-8859-1", "replace"), True


def note_encoding(add_note: AddNoteMethodType, field_name: str, is_name: bool) -> None:
    "Note that a header's name or value had to be decoded leniently."
    log.debug("non-ASCII bytes in %s header %s", field_name, "name" if is_name else "value")
    if is_name:
        add_note(HEADER_NAME_ENCODING, field_name=field_name)
    else:
        add_note(HEADER_VALUE_ENCODING, field_name=field_name)
