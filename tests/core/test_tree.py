"""Tests for the game-tree builder."""

import pytest

from kifu.core.errors import MultipleGamesError, SgfSyntaxError
from kifu.core.notation import parse_sgf_tree


class TestTreeShape:
    def test_single_node(self) -> None:
        tree = parse_sgf_tree("(;GM[1])")
        assert len(tree) == 1
        assert tree.root.parent is None
        assert tree.root.get("GM") == ("1",)

    def test_sequence_links(self) -> None:
        tree = parse_sgf_tree("(;SZ[9];B[ee];W[cc])")
        assert len(tree) == 3
        assert tree[0].children == (1,)
        assert tree[1].parent == 0
        assert tree[2].parent == 1
        assert tree[2].children == ()

    def test_multi_value_property(self) -> None:
        tree = parse_sgf_tree("(;AB[aa][bb]AW[cc])")
        assert tree.root.get("AB") == ("aa", "bb")
        assert tree.root.first("AW") == "cc"

    def test_repeated_property_appends(self) -> None:
        tree = parse_sgf_tree("(;C[one]C[two])")
        assert tree.root.get("C") == ("one", "two")

    def test_property_order_preserved(self) -> None:
        tree = parse_sgf_tree("(;PW[w]PB[b]SZ[9])")
        assert list(tree.root.properties) == ["PW", "PB", "SZ"]

    def test_missing_property(self) -> None:
        tree = parse_sgf_tree("(;GM[1])")
        assert tree.root.get("PB") == ()
        assert tree.root.first("PB") is None
        assert "PB" not in tree.root

    def test_tree_is_read_only(self) -> None:
        tree = parse_sgf_tree("(;GM[1])")
        with pytest.raises(TypeError):
            tree.root.properties["GM"] = ("2",)  # type: ignore[index]


class TestVariations:
    def test_variations_branch_from_last_node(self) -> None:
        tree = parse_sgf_tree("(;SZ[9];B[aa](;W[bb])(;W[cc];B[dd]))")
        branch = tree[1]
        assert len(branch.children) == 2
        first, second = (tree[idx] for idx in branch.children)
        assert first.first("W") == "bb"
        assert second.first("W") == "cc"
        assert tree[second.children[0]].first("B") == "dd"

    def test_main_line_takes_first_child(self) -> None:
        tree = parse_sgf_tree("(;SZ[9];B[aa](;W[bb];B[ee])(;W[cc];B[dd]))")
        values = [node.first("W") or node.first("B") for node in tree.main_line()]
        assert values == [None, "aa", "bb", "ee"]

    def test_nested_variations(self) -> None:
        tree = parse_sgf_tree("(;B[aa](;W[bb](;B[cc])(;B[dd]))(;W[ee]))")
        assert tree.variation_count() == 2
        assert [node.index for node in tree.main_line()] == [0, 1, 2]

    def test_root_may_start_with_variations(self) -> None:
        tree = parse_sgf_tree("(;GM[1](;B[aa])(;B[bb]))")
        assert len(tree.root.children) == 2

    def test_deep_nesting_without_recursion(self) -> None:
        depth = 3000
        text = "(;GM[1]" + "(;B[aa]" * depth + ")" * depth + ")"
        tree = parse_sgf_tree(text)
        assert len(tree) == depth + 1
        assert sum(1 for _ in tree.main_line()) == depth + 1


class TestTreeErrors:
    def test_unmatched_close(self) -> None:
        with pytest.raises(SgfSyntaxError, match="Unmatched"):
            parse_sgf_tree("(;GM[1]))")

    def test_node_before_open(self) -> None:
        with pytest.raises(SgfSyntaxError, match="Node outside") as excinfo:
            parse_sgf_tree(";GM[1]")
        assert excinfo.value.offset == 0
        assert excinfo.value.expected == "'('"

    def test_value_without_identifier(self) -> None:
        with pytest.raises(SgfSyntaxError, match="without identifier"):
            parse_sgf_tree("(;[aa])")

    def test_identifier_without_value(self) -> None:
        with pytest.raises(SgfSyntaxError, match="has no value"):
            parse_sgf_tree("(;B;W[aa])")

    def test_property_before_node(self) -> None:
        with pytest.raises(SgfSyntaxError, match="outside node"):
            parse_sgf_tree("(B[aa])")

    def test_empty_tree(self) -> None:
        with pytest.raises(SgfSyntaxError, match="Empty game tree"):
            parse_sgf_tree("()")

    def test_unclosed_tree(self) -> None:
        with pytest.raises(SgfSyntaxError, match="end of input"):
            parse_sgf_tree("(;B[aa]")

    def test_empty_input(self) -> None:
        with pytest.raises(SgfSyntaxError, match="No game tree"):
            parse_sgf_tree("   ")

    def test_multiple_games(self) -> None:
        with pytest.raises(MultipleGamesError):
            parse_sgf_tree("(;B[aa])(;W[bb])")
