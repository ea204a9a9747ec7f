"""Parse SGF (Smart Game Format) data into an immutable tree."""

from sgftree.sgf_grammar import (
    Split_identifier,
    parse_collection,
    parse_properties,
    parse_properties_text,
    parse_property,
    parse_property_values,
    parse_sgf_game,
    split_property_identifier,
)
from sgftree.sgf_io import (
    decode_sgf_bytes,
    load_collection,
    load_collection_from_bytes,
    read_sgf_text,
)
from sgftree.sgf_tree import Collection, Game_tree, Node, Property, main_sequence_iter

__all__ = [
    "Collection",
    "Game_tree",
    "Node",
    "Property",
    "Split_identifier",
    "decode_sgf_bytes",
    "load_collection",
    "load_collection_from_bytes",
    "main_sequence_iter",
    "parse_collection",
    "parse_properties",
    "parse_properties_text",
    "parse_property",
    "parse_property_values",
    "parse_sgf_game",
    "read_sgf_text",
    "split_property_identifier",
]
