"""
Regex for RFC7230

The field-value building blocks from the collected ABNF in RFC7230:

  <http://httpwg.org/specs/rfc7230.html#collected.abnf>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc5234 import ALPHA, DIGIT, HTAB, SP, VCHAR

SPEC_URL = "http://httpwg.org/specs/rfc7230"


# OWS = *( SP / HTAB )

OWS = rf"(?: {SP} | {HTAB} )*"

# obs-text = %x80-FF

obs_text = r"[\x80-\xff]"

# tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*" / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~" / DIGIT / ALPHA

tchar = rf"(?: ! | \# | \$ | % | & | ' | \* | \+ | \- | \. | \^ | _ | ` | \| | \~ | {DIGIT} | {ALPHA} )"

# token = 1*tchar

token = rf"{tchar}+"

# qdtext = HTAB / SP / "!" / %x23-5B ; '#'-'['
#  / %x5D-7E ; ']'-'~'
#  / obs-text

qdtext = r"[\t !\x23-\x5b\x5d-\x7e\x80-\xff]"

# quoted-pair = "\" ( HTAB / SP / VCHAR / obs-text )

quoted_pair = rf"(?: \\ (?: {HTAB} | {SP} | {VCHAR} | {obs_text} ) )"

# quoted-string = DQUOTE *( qdtext / quoted-pair ) DQUOTE

quoted_string = rf"(?: \" (?: {qdtext} | {quoted_pair} )* \" )"


class list_rule:
    """
    Given a piece of ABNF, wrap it in the "list rule"
    as per RFC7230, Section 7.

    <http://httpwg.org/specs/rfc7230.html#abnf.extension>

    Only the optional form (#element) is needed here.
    """

    def __init__(self, element: str) -> None:
        self.element = element

    def __str__(self) -> str:
        # #element => [ element *( OWS "," OWS element ) ]
        return rf"(?: {self.element} (?: {OWS} , {OWS} {self.element} )* )?"
