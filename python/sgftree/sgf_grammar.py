"""Parse SGF data into a Collection.

This is intended for use with SGF FF[4]; see http://www.red-bean.com/sgf/

Nothing in this module is Go-specific, and no property values are interpreted:
see sgf_tree for the representation of the results.

The parse works from the outside in. parse_collection() makes a single left to
right pass over the tree boundaries in the data: each boundary is an opening
paren followed by a run of nodes. The character following that run decides
where the next run goes: after '(' it is a variation of the run just read;
after ')' it is a sibling, once the closing parens have been accounted for.
The node runs are split into nodes by parse_properties(), and node bodies
into properties by parse_properties_text().

Malformed data isn't reported: the pass simply stops finding boundaries, and
the result holds whatever was read up to that point.

"""

import logging
from typing import List, NamedTuple, Tuple

from sgftree.sgf_lexer import (
    CLOSING_RUN_RE,
    NODE_RE,
    PROPERTY_RE,
    TREE_BOUNDARY_RE,
    VALUE_RE,
    Scan_match,
    match_at,
    scan_all,
)
from sgftree.sgf_tree import Collection, Game_tree, Node, Property

logger = logging.getLogger(__name__)


class Split_identifier(NamedTuple):
    identifier: str
    remainder: str


def split_property_identifier(s: str) -> Split_identifier:
    """Split the text of a property into its PropIdent and its values.

    s -- identifier-plus-values text, eg 'AB[dd][pp]'

    The identifier is two characters if the second character is an upper-case
    letter from B to Y, and one character otherwise. So 'SZ[19]' gives 'S':
    a trailing Z is never taken as part of the identifier.

    The remainder starts at the first '['; any further letters of a longer
    identifier are dropped.

    """
    length = 2 if len(s) > 1 and "A" < s[1] < "Z" else 1
    bracket = s.find("[", length)
    if bracket < 0:
        return Split_identifier(s[:length], "")
    return Split_identifier(s[:length], s[bracket:])


def parse_property_values(s: str) -> List[str]:
    """Return the raw values of each bracketed PropValue in 's', in order.

    Anything between the bracket groups is skipped.

    """
    return [match.groups[0] for match in scan_all(VALUE_RE, s)]


def parse_property(s: str) -> Property:
    """Parse the identifier-plus-values text of a single property."""
    identifier, remainder = split_property_identifier(s)
    return Property(identifier, tuple(parse_property_values(remainder)))


def parse_properties_text(s: str) -> Tuple[Property, ...]:
    """Parse the body of a single node (the text after its ';').

    Returns a tuple of Properties, in order. Repeated identifiers are kept as
    separate Properties.

    """
    return tuple(parse_property(match.groups[0]) for match in scan_all(PROPERTY_RE, s))


def parse_properties(s: str) -> List[Node]:
    """Parse a run of nodes, eg ';B[pq];W[dd]'.

    Returns a list of Nodes, in order.

    """
    return [Node(parse_properties_text(match.groups[0])) for match in scan_all(NODE_RE, s)]


class _Open_tree:
    """A GameTree which may still acquire children."""

    __slots__ = ("sequence", "children")

    def __init__(self, sequence):
        self.sequence = sequence
        self.children = []


class _Fold_state(NamedTuple):
    """State carried from one tree boundary to the next.

    roots        -- list of _Open_trees at the top level
    open_trees   -- list of _Open_trees not yet closed, outermost first
    continuation -- True if the previous node run was followed by '('
    end          -- offset just past the previous node run

    The lists belong to a single parse_collection() call, and only grow at
    the end (open_trees also shrinks from the end).

    """

    roots: List[_Open_tree]
    open_trees: List[_Open_tree]
    continuation: bool
    end: int


def _initial_state() -> _Fold_state:
    return _Fold_state(roots=[], open_trees=[], continuation=False, end=0)


def _closing_count(s, offset):
    closing = match_at(CLOSING_RUN_RE, s, offset)
    if closing is None:
        return 0, offset
    return closing.text.count(")"), closing.end


def _fold_boundary(state: _Fold_state, s: str, boundary: Scan_match) -> _Fold_state:
    """Place the node run from 'boundary' in the tree, returning the new state."""
    sequence_text, following = boundary.groups
    tree = _Open_tree(parse_properties(sequence_text))
    open_trees = state.open_trees
    if not state.continuation:
        # The previous run was followed by ')': close the trees it ended.
        closed, _ = _closing_count(s, state.end)
        del open_trees[max(0, len(open_trees) - closed):]
    if open_trees:
        open_trees[-1].children.append(tree)
    else:
        state.roots.append(tree)
    open_trees.append(tree)
    return state._replace(continuation=(following == "("), end=boundary.end)


def _build_game_tree(root: _Open_tree) -> Game_tree:
    """Convert an _Open_tree and its descendants to Game_trees."""
    pending = [root]
    ordered = []
    while pending:
        tree = pending.pop()
        ordered.append(tree)
        pending.extend(tree.children)
    built = {}
    # Children always come after their parent in 'ordered'.
    for tree in reversed(ordered):
        children = tuple(built.pop(id(child)) for child in tree.children)
        built[id(tree)] = Game_tree(tuple(tree.sequence), children)
    return built[id(root)]


def parse_collection(s: str) -> Collection:
    """Read an SGF collection from a string, returning the parse trees.

    s -- string

    Returns a Collection (a nonempty sequence of Game_trees).

    Raises ValueError if no games were found in the data.

    Ignores non-SGF data before the first game and between games. If the data
    is malformed or truncated, returns the games (and parts of games) read
    before the problem, without reporting an error.

    Any run of variations following a node sequence become children of that
    sequence's Game_tree, in order.

    """
    state = _initial_state()
    for boundary in scan_all(TREE_BOUNDARY_RE, s):
        state = _fold_boundary(state, s, boundary)
    if not state.roots:
        raise ValueError("no SGF data found")
    closed, tail = _closing_count(s, state.end)
    if closed < len(state.open_trees) or s[tail:].strip(" \t\n\r"):
        logger.debug("SGF data not fully parsed: stopped at offset %d of %d", tail, len(s))
    logger.debug("parsed %d game trees", len(state.roots))
    return Collection(tuple(_build_game_tree(root) for root in state.roots))


def parse_sgf_game(s: str) -> Game_tree:
    """Read a single SGF game from a string, returning the parse tree.

    Returns the first Game_tree in the data; ignores everything following it.

    Raises ValueError if no games were found in the data.

    """
    return parse_collection(s)[0]
