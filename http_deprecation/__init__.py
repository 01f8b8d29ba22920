"""
Deprecation signals in HTTP responses.

deprecation() looks at a response's Deprecation and Link headers and tells
you whether the server has deprecated the resource, since when, and where
to read more about it.
"""

__version__ = "0.3.0"

from http_deprecation.headers.link import parse_deprecation_link
from http_deprecation.message import Deprecation, HeaderSet, deprecation

__all__ = [
    "Deprecation",
    "HeaderSet",
    "deprecation",
    "parse_deprecation_link",
]
