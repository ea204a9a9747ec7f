"""Lexical matchers for SGF data.

This is intended for use with SGF FF[4]; see http://www.red-bean.com/sgf/

Nothing in this module is Go-specific.

Each matcher is a compiled pattern for one level of the grammar:

  VALUE_RE         -- one bracketed PropValue; group 1 is the raw value
  PROPERTY_RE      -- PropIdent followed by one or more PropValues; group 1 is
                      the identifier-plus-values text
  NODE_RE          -- ';' followed by one or more Properties; group 1 is the
                      node body (the text after the semicolon)
  TREE_BOUNDARY_RE -- '(' followed by one or more Nodes; group 1 is the node
                      sequence text, group 2 is the '(' or ')' which follows
                      it (matched by lookahead, so it is not consumed)

Matching is done with scan() and scan_all(), which take an explicit offset and
return the offset to continue from; nothing remembers the last match.

"""

import re
from typing import Iterator, NamedTuple, Optional, Tuple

# SGF whitespace: space, tab, newline and carriage return only.
_ws = r"[ \t\n\r]*"
# A raw value runs up to the first ']' not preceded by an escaping backslash.
_value_body = r"(?: [^\\\]] | \\. )*"
_property_body = r"[A-Za-z]+ (?: %s \[ %s \] )+" % (_ws, _value_body)
_node_body = r"(?: %s %s )+" % (_ws, _property_body)
_sequence_body = r"(?: %s ; %s )+" % (_ws, _node_body)

_flags = re.VERBOSE | re.DOTALL

VALUE_RE = re.compile(r"%s \[ ( %s ) \]" % (_ws, _value_body), _flags)
PROPERTY_RE = re.compile(r"%s ( %s )" % (_ws, _property_body), _flags)
NODE_RE = re.compile(r"%s ; ( %s )" % (_ws, _node_body), _flags)
TREE_BOUNDARY_RE = re.compile(r"\( ( %s ) (?= %s ( [()] ) )" % (_sequence_body, _ws), _flags)
CLOSING_RUN_RE = re.compile(r"(?: %s \) )+" % _ws, _flags)


class Scan_match(NamedTuple):
    """One successful match found by scan().

    text   -- the complete matched text
    groups -- tuple of the pattern's captured groups
    end    -- offset just past the match; the next scan starts here

    """

    text: str
    groups: Tuple[Optional[str], ...]
    end: int


def scan(pattern: re.Pattern, s: str, offset: int = 0) -> Optional[Scan_match]:
    """Find the next match of 'pattern' in 's' at or after 'offset'.

    Characters before the match are skipped.

    Returns a Scan_match, or None if there are no further matches.

    """
    m = pattern.search(s, offset)
    if m is None:
        return None
    return Scan_match(m.group(0), m.groups(), m.end())


def scan_all(pattern: re.Pattern, s: str, offset: int = 0) -> Iterator[Scan_match]:
    """Yield successive matches of 'pattern' in 's', left to right."""
    while True:
        match = scan(pattern, s, offset)
        if match is None:
            return
        yield match
        offset = match.end


def match_at(pattern: re.Pattern, s: str, offset: int) -> Optional[Scan_match]:
    """Like scan(), but the match must start exactly at 'offset'."""
    m = pattern.match(s, offset)
    if m is None:
        return None
    return Scan_match(m.group(0), m.groups(), m.end())
