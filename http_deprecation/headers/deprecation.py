#!/usr/bin/env python

from datetime import datetime, timedelta, timezone
import logging
from typing import Optional

from http_deprecation import headers
from http_deprecation.type import AddNoteMethodType

log = logging.getLogger(__name__)

SPEC_URL = "https://www.rfc-editor.org/rfc/rfc9745"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class deprecation(headers.HttpHeader):
    canonical_name = "Deprecation"
    description = """\
The `Deprecation` header signals that the resource is, or will be, deprecated. Its value is either
`true`, or the date from which the resource is deprecated. A `Link` with the `deprecation`
relation type can point to more information."""
    reference = "%s#name-the-deprecation-http-respon" % SPEC_URL
    syntax = False  # checked by parse_date
    list_header = False

    def parse(self, field_value: str, add_note: AddNoteMethodType) -> Optional[datetime]:
        if field_value == "true":
            return None
        try:
            return headers.parse_date(field_value, add_note)
        except ValueError as why:
            # the header is still a deprecation signal; only the date is lost.
            log.debug("Ignoring Deprecation date: %s", why)
            return None


class FlagDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["true"]
    expected_out = None
    expected_err = []  # type: ignore


class DateDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Thu, 01 Jan 1970 00:00:00 +0000"]
    expected_out = EPOCH
    expected_err = []  # type: ignore


class NoDayNameDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["1 Jan 1970 00:00 +0000"]
    expected_out = EPOCH
    expected_err = []  # type: ignore


class OffsetDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Mon, 01 Jan 2024 12:00:00 -0500"]
    expected_out = datetime(2024, 1, 1, 12, tzinfo=timezone(timedelta(hours=-5)))
    expected_err = []  # type: ignore


class UnknownZoneDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Thu, 01 Jan 1970 00:00:00 -0000"]
    expected_out = EPOCH
    expected_err = []  # type: ignore


class IsoDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["2021-01-01T10:00:13Z"]
    expected_out = None
    expected_err = [headers.BAD_DATE_SYNTAX]


class CapitalisedFlagDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["True"]
    expected_out = None
    expected_err = [headers.BAD_DATE_SYNTAX]


class OutOfRangeDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Fri, 32 Jan 2021 00:00:00 +0000"]
    expected_out = None
    expected_err = [headers.BAD_DATE_SYNTAX]


class GmtDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Thu, 01 Jan 1970 00:00:00 GMT"]
    expected_out = EPOCH
    expected_err = [headers.DATE_OBSOLETE]


class TwoDigitYearDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Thu, 01 Jan 70 00:00:00 +0000"]
    expected_out = EPOCH
    expected_err = [headers.DATE_OBSOLETE]


class MidCenturyTwoDigitYearDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Sat, 01 Jan 55 00:00:00 +0000"]
    expected_out = datetime(1955, 1, 1, tzinfo=timezone.utc)
    expected_err = [headers.DATE_OBSOLETE]


class RecentTwoDigitYearDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Sat, 01 Jan 49 00:00:00 +0000"]
    expected_out = datetime(2049, 1, 1, tzinfo=timezone.utc)
    expected_err = [headers.DATE_OBSOLETE]


class MilitaryZoneDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Thu, 01 Jan 1970 00:00:00 Z"]
    expected_out = EPOCH
    expected_err = [headers.DATE_OBSOLETE]


class OtherMilitaryZoneDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["Thu, 01 Jan 1970 00:00:00 a"]
    expected_out = EPOCH
    expected_err = [headers.DATE_OBSOLETE]


class RepeatedDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = ["true", "Thu, 01 Jan 1970 00:00:00 +0000"]
    expected_out = None
    expected_err = [headers.SINGLE_HEADER_REPEAT]


class BlankDeprecationTest(headers.HeaderTest):
    name = "Deprecation"
    inputs = [""]
    expected_out = None
    expected_err = [headers.BAD_DATE_SYNTAX]
