"""Tests for the parse tree classes and traversal helpers."""

import dataclasses

import pytest

from sgftree.sgf_grammar import parse_collection, parse_sgf_game
from sgftree.sgf_tree import (
    Collection,
    Game_tree,
    Node,
    Property,
    iter_game_trees,
    main_sequence_iter,
    node_count,
    variation_depth,
)


@pytest.fixture()
def branching_game() -> Game_tree:
    return parse_sgf_game("(;A[1](;B[2];C[3](;X[9]))(;D[4]))")


class TestNode:
    def test_get_returns_first_occurrence(self) -> None:
        node = Node((Property("B", ("pq",)), Property("B", ("dd",))))
        assert node.get("B") == ("pq",)
        assert [prop.values for prop in node.get_all("B")] == [("pq",), ("dd",)]

    def test_get_missing_raises(self) -> None:
        node = Node((Property("B", ("pq",)),))
        with pytest.raises(KeyError):
            node.get("W")
        assert not node.has_property("W")
        assert node.has_property("B")

    def test_len_and_iteration(self) -> None:
        node = Node((Property("GM", ("1",)), Property("B", ("pq",))))
        assert len(node) == 2
        assert [prop.identifier for prop in node] == ["GM", "B"]
        assert node.identifiers() == ["GM", "B"]


class TestImmutability:
    def test_node_is_frozen(self) -> None:
        node = parse_sgf_game("(;B[pq])").sequence[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.properties = ()

    def test_game_tree_is_frozen(self, branching_game: Game_tree) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            branching_game.children = ()
        assert isinstance(branching_game.children, tuple)
        assert isinstance(branching_game.sequence, tuple)

    def test_collection_is_frozen(self) -> None:
        collection = parse_collection("(;B[pq])")
        with pytest.raises(dataclasses.FrozenInstanceError):
            collection.game_trees = ()

    def test_values_are_tuples(self) -> None:
        prop = parse_sgf_game("(;AB[aa][bb])").sequence[0].properties[0]
        assert prop.values == ("aa", "bb")


class TestInvariants:
    def test_empty_sequence_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty sequence"):
            Game_tree(())

    def test_empty_collection_rejected(self) -> None:
        with pytest.raises(ValueError, match="no SGF data"):
            Collection(())


class TestTraversal:
    def test_main_sequence_follows_first_variation(self, branching_game: Game_tree) -> None:
        assert [node.identifiers()[0] for node in main_sequence_iter(branching_game)] == ["A", "B", "C", "X"]

    def test_iter_game_trees_pre_order(self, branching_game: Game_tree) -> None:
        firsts = [tree.sequence[0].identifiers()[0] for tree in iter_game_trees(branching_game)]
        assert firsts == ["A", "B", "X", "D"]

    def test_node_count(self, branching_game: Game_tree) -> None:
        assert node_count(branching_game) == 5

    def test_variation_depth(self, branching_game: Game_tree) -> None:
        assert variation_depth(branching_game) == 2
        assert variation_depth(parse_sgf_game("(;A[1];B[2])")) == 0
