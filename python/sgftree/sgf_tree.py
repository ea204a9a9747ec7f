"""The parsed representation of an SGF collection.

These classes are a direct representation of the SGF parse tree:

  Collection -- nonempty sequence of Game_trees
  Game_tree  -- nonempty sequence of Nodes, plus child Game_trees (variations)
  Node       -- sequence of Properties
  Property   -- PropIdent plus a nonempty tuple of raw values

A raw property value is a string containing a PropValue without its enclosing
brackets, but with backslashes and line endings left untouched. Compose values
are not split.

All of these are immutable once built; the parser is the only thing which
creates them.

"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class Property:
    identifier: str
    values: Tuple[str, ...]


@dataclass(frozen=True)
class Node:
    """A single SGF node.

    Properties are kept in file order. If a property appears more than once in
    a node (which FF[4] does not permit), each occurrence is kept as a
    separate Property.

    """

    properties: Tuple[Property, ...]

    def __len__(self):
        return len(self.properties)

    def __iter__(self):
        return iter(self.properties)

    def identifiers(self) -> List[str]:
        """Return the property identifiers, in file order."""
        return [prop.identifier for prop in self.properties]

    def has_property(self, identifier: str) -> bool:
        return any(prop.identifier == identifier for prop in self.properties)

    def get(self, identifier: str) -> Tuple[str, ...]:
        """Return the raw values of the first property with this identifier.

        Raises KeyError if there is no such property.

        """
        for prop in self.properties:
            if prop.identifier == identifier:
                return prop.values
        raise KeyError(identifier)

    def get_all(self, identifier: str) -> List[Property]:
        """Return every property with this identifier (possibly none)."""
        return [prop for prop in self.properties if prop.identifier == identifier]


@dataclass(frozen=True)
class Game_tree:
    """An SGF GameTree.

    Public attributes
      sequence -- nonempty tuple of Nodes
      children -- tuple of Game_trees

    The sequence represents the nodes before the variations; each child is
    one variation following the last node of the sequence.

    """

    sequence: Tuple[Node, ...]
    children: Tuple["Game_tree", ...] = ()

    def __post_init__(self):
        if not self.sequence:
            raise ValueError("empty sequence")


@dataclass(frozen=True)
class Collection:
    """An SGF Collection: the game trees found in one source, in order."""

    game_trees: Tuple[Game_tree, ...]

    def __post_init__(self):
        if not self.game_trees:
            raise ValueError("no SGF data found")

    def __len__(self):
        return len(self.game_trees)

    def __iter__(self):
        return iter(self.game_trees)

    def __getitem__(self, index):
        return self.game_trees[index]


def main_sequence_iter(game_tree: Game_tree) -> Iterator[Node]:
    """Provide the 'leftmost' complete sequence of a Game_tree.

    If the game has no variations, this provides the complete game. Otherwise,
    it chooses the first variation each time it has a choice.

    """
    while True:
        yield from game_tree.sequence
        if not game_tree.children:
            break
        game_tree = game_tree.children[0]


def iter_game_trees(game_tree: Game_tree) -> Iterator[Game_tree]:
    """Yield 'game_tree' and all its descendants, in pre-order."""
    to_visit = [game_tree]
    while to_visit:
        game_tree = to_visit.pop()
        yield game_tree
        to_visit.extend(reversed(game_tree.children))


def node_count(game_tree: Game_tree) -> int:
    """Return the number of nodes in 'game_tree', counting every variation."""
    return sum(len(tree.sequence) for tree in iter_game_trees(game_tree))


def variation_depth(game_tree: Game_tree) -> int:
    """Return how deeply variations are nested below 'game_tree'.

    A tree with no children has depth 0.

    """
    deepest = 0
    to_visit = [(game_tree, 0)]
    while to_visit:
        game_tree, depth = to_visit.pop()
        deepest = max(deepest, depth)
        to_visit.extend((child, depth + 1) for child in game_tree.children)
    return deepest
