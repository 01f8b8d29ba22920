"""
Regular expressions derived from the ABNF of the specifications that define
the headers we look at.

Each module follows the collected ABNF of one RFC; the rules are meant to be
combined with re.VERBOSE.
"""
