"""
Regex for RFC8288

These regex are derived from the ABNF in RFC8288, Section 3.

  <https://httpwg.org/specs/rfc8288.html#header.link>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc7230 import list_rule, OWS, quoted_string, token

SPEC_URL = "https://httpwg.org/specs/rfc8288.html"

# BWS = OWS

BWS = OWS

# URI-Reference; targets aren't validated, so anything up to the closing
# angle bracket will do.

URI_Reference = r"[^<>\s]*"

# link-param = token BWS [ "=" BWS ( token / quoted-string ) ]

link_param = rf"(?: {token} {BWS} (?: = {BWS} (?: {token} | {quoted_string} ) )? )"

# link-value = "<" URI-Reference ">" *( OWS ";" OWS link-param )

link_value = rf"(?: < {URI_Reference} > (?: {OWS} ; {OWS} {link_param} )* )"

# Link = #link-value

Link = list_rule(link_value)

# relation-type  = reg-rel-type / ext-rel-type; "deprecation" is registered
# by RFC9745.

DEPRECATION_REL = "deprecation"
