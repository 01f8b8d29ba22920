"""
Regex for ABNF

These regex are directly derived from the core ABNF in RFC5234:

  https://tools.ietf.org/html/rfc5234#appendix-B.1

They should be processed with re.VERBOSE.
"""


# ALPHA          =  %x41-5A / %x61-7A   ; A-Z / a-z

ALPHA = r"[\x41-\x5A\x61-\x7A]"

# DIGIT          =  %x30-39
#                     ; 0-9

DIGIT = r"[\x30-\x39]"

# HTAB           =  %x09
#                     ; horizontal tab

HTAB = r"[\x09]"

# SP             =  %x20

SP = r"[\x20]"

# VCHAR          =  %x21-7E
#                     ; visible (printing) characters

VCHAR = r"[\x21-\x7E]"

# WSP            =  SP / HTAB
#                     ; white space

WSP = rf"(?: {SP} | {HTAB} )"
