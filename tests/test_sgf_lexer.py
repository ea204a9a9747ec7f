"""Tests for the lexical matchers and the explicit-offset scanner."""

from sgftree.sgf_lexer import (
    NODE_RE,
    PROPERTY_RE,
    TREE_BOUNDARY_RE,
    VALUE_RE,
    Scan_match,
    match_at,
    scan,
    scan_all,
)


class TestScan:
    def test_returns_text_groups_and_end(self) -> None:
        match = scan(VALUE_RE, "  [pq]rest")
        assert match == Scan_match("  [pq]", ("pq",), 6)

    def test_starts_from_offset(self) -> None:
        match = scan(VALUE_RE, "[aa][bb]", 4)
        assert match is not None
        assert match.groups == ("bb",)

    def test_no_match_returns_none(self) -> None:
        assert scan(VALUE_RE, "no values here") is None

    def test_scan_all_advances_left_to_right(self) -> None:
        matches = list(scan_all(VALUE_RE, "[a] x [b]\n[c]"))
        assert [m.groups[0] for m in matches] == ["a", "b", "c"]
        assert [m.end for m in matches] == [3, 9, 13]

    def test_match_at_requires_exact_start(self) -> None:
        assert match_at(VALUE_RE, "x[a]", 0) is None
        assert match_at(VALUE_RE, "x[a]", 1).groups == ("a",)


class TestMatchers:
    def test_value_skips_leading_whitespace(self) -> None:
        assert scan(VALUE_RE, " \t\r\n[v]").groups == ("v",)

    def test_value_with_escaped_bracket(self) -> None:
        assert scan(VALUE_RE, "[foo\\]bar]").groups == ("foo\\]bar",)

    def test_property_includes_split_value_groups(self) -> None:
        match = scan(PROPERTY_RE, "AW[ja][oa]\n[pa]B[pq]")
        assert match.groups == ("AW[ja][oa]\n[pa]",)

    def test_property_needs_a_value(self) -> None:
        assert scan(PROPERTY_RE, "GM") is None

    def test_node_body(self) -> None:
        match = scan(NODE_RE, ";GM[1]FF[4];B[pq]")
        assert match.groups == ("GM[1]FF[4]",)

    def test_node_needs_a_property(self) -> None:
        assert scan(NODE_RE, ";;") is None

    def test_tree_boundary_captures_following_paren(self) -> None:
        match = scan(TREE_BOUNDARY_RE, "(;A[1];B[2]\n(;C[3]))")
        assert match.groups == (";A[1];B[2]", "(")
        # The following paren is left for the next scan.
        assert match.end == len("(;A[1];B[2]")

    def test_tree_boundary_closing(self) -> None:
        match = scan(TREE_BOUNDARY_RE, "(;C[3]))")
        assert match.groups == (";C[3]", ")")

    def test_tree_boundary_needs_following_paren(self) -> None:
        assert scan(TREE_BOUNDARY_RE, "(;A[1];B[2]") is None

    def test_paren_inside_value_is_not_a_boundary(self) -> None:
        match = scan(TREE_BOUNDARY_RE, "(;C[see (this)])")
        assert match.groups == (";C[see (this)]", ")")
