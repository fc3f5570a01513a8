"""Unit tests for forest views: count, sort, filter, flatten."""

from threadtree.domain.tree import (
    count,
    filter_forest,
    flatten_for_render,
    sort_in_place,
)
from threadtree.domain.value import SortOrder
from tests.conftest import make_node


def ids(nodes):
    return [node.id for node in nodes]


class TestCount:
    """Tests for count."""

    def test_counts_every_depth(self):
        """Replies at every depth are counted."""
        forest = [
            make_node("a", replies=[make_node("b", replies=[make_node("c")])]),
            make_node("d"),
        ]

        assert count(forest) == 4

    def test_empty_forest(self):
        """An empty forest counts zero."""
        assert count([]) == 0


class TestSortInPlace:
    """Tests for sort_in_place."""

    def build_forest(self):
        return [
            make_node(
                "old",
                minutes=0,
                votes=1,
                replies=[
                    make_node("old-r1", minutes=1, votes=5),
                    make_node("old-r2", minutes=2, votes=9),
                ],
            ),
            make_node("mid", minutes=10, votes=7),
            make_node("new", minutes=20, votes=3),
        ]

    def test_newest_sorts_every_level_descending_by_creation(self):
        """Newest puts the latest sibling first at each level."""
        forest = self.build_forest()

        assert sort_in_place(forest, SortOrder.NEWEST)

        assert ids(forest) == ["new", "mid", "old"]
        assert ids(forest[2].replies) == ["old-r2", "old-r1"]

    def test_top_sorts_every_level_by_votes(self):
        """Top puts the most voted sibling first at each level."""
        forest = self.build_forest()

        sort_in_place(forest, SortOrder.TOP)

        assert ids(forest) == ["mid", "new", "old"]
        assert ids(forest[2].replies) == ["old-r2", "old-r1"]

    def test_oldest_after_top_restores_creation_order(self):
        """A later sort overwrites the earlier order completely."""
        forest = self.build_forest()

        sort_in_place(forest, SortOrder.TOP)
        sort_in_place(forest, SortOrder.OLDEST)

        assert ids(forest) == ["old", "mid", "new"]
        assert ids(forest[0].replies) == ["old-r1", "old-r2"]

    def test_sort_never_moves_nodes_between_levels(self):
        """Depth and parent are preserved by sorting."""
        forest = self.build_forest()

        sort_in_place(forest, SortOrder.TOP)

        old = next(node for node in forest if node.id == "old")
        assert sorted(ids(old.replies)) == ["old-r1", "old-r2"]
        assert count(forest) == 5

    def test_accepts_order_strings(self):
        """Order values may be given as plain strings."""
        forest = self.build_forest()

        assert sort_in_place(forest, "newest")
        assert ids(forest) == ["new", "mid", "old"]

    def test_unknown_order_is_a_no_op(self):
        """Unrecognised orders leave the forest as it was."""
        forest = self.build_forest()

        assert not sort_in_place(forest, "alphabetical")

        assert ids(forest) == ["old", "mid", "new"]

    def test_ties_keep_previous_relative_order(self):
        """Sorting is stable."""
        forest = [
            make_node("x", votes=1),
            make_node("y", votes=1),
            make_node("z", votes=2),
        ]

        sort_in_place(forest, SortOrder.TOP)

        assert ids(forest) == ["z", "x", "y"]


class TestFilterForest:
    """Tests for filter_forest."""

    def test_empty_query_returns_same_forest(self):
        """No query means no filtering and no copying."""
        forest = [make_node("a")]

        assert filter_forest(forest, "") is forest
        assert filter_forest(forest, "   ") is forest

    def test_deep_match_keeps_ancestor_chain_only(self):
        """A depth-3 match keeps its ancestors and drops unrelated siblings."""
        forest = [
            make_node(
                "root",
                "Top level",
                replies=[
                    make_node(
                        "child",
                        "A reply",
                        replies=[
                            make_node(
                                "grandchild",
                                "Nested",
                                replies=[make_node("target", "has FOO inside")],
                            ),
                            make_node("cousin", "unrelated"),
                        ],
                    ),
                    make_node("sibling", "nothing here"),
                ],
            ),
            make_node("other-root", "irrelevant"),
        ]

        result = filter_forest(forest, "foo")

        assert ids(result) == ["root"]
        assert ids(result[0].replies) == ["child"]
        assert ids(result[0].replies[0].replies) == ["grandchild"]
        assert ids(result[0].replies[0].replies[0].replies) == ["target"]

    def test_matching_node_drops_non_matching_replies(self):
        """Replies of a match survive only if they match themselves."""
        forest = [
            make_node(
                "a",
                "foo parent",
                replies=[make_node("b", "bar"), make_node("c", "more foo")],
            )
        ]

        result = filter_forest(forest, "FOO")

        assert ids(result) == ["a"]
        assert ids(result[0].replies) == ["c"]

    def test_filter_does_not_modify_stored_forest(self):
        """Filtering builds copies; the stored tree is untouched."""
        forest = [
            make_node("a", "foo", replies=[make_node("b", "bar")]),
            make_node("c", "baz"),
        ]

        result = filter_forest(forest, "foo")

        assert result[0] is not forest[0]
        assert ids(forest) == ["a", "c"]
        assert ids(forest[0].replies) == ["b"]

    def test_no_match_returns_empty_forest(self):
        """Nothing survives a query that matches nothing."""
        forest = [make_node("a", "hello", replies=[make_node("b", "world")])]

        assert filter_forest(forest, "xyz") == []


class TestFlattenForRender:
    """Tests for flatten_for_render."""

    def test_pre_order_rows_with_depth(self):
        """Rows follow pre-order and carry nesting depth."""
        forest = [
            make_node("a", replies=[make_node("b", replies=[make_node("c")])]),
            make_node("d"),
        ]

        rows = flatten_for_render(forest)

        assert [(row.node.id, row.depth) for row in rows] == [
            ("a", 0),
            ("b", 1),
            ("c", 2),
            ("d", 0),
        ]

    def test_collapsed_node_hides_its_replies_only(self):
        """A collapsed node is shown, its subtree is not, and nothing is deleted."""
        forest = [
            make_node(
                "a",
                collapsed=True,
                replies=[make_node("b", replies=[make_node("c")])],
            ),
            make_node("d"),
        ]

        rows = flatten_for_render(forest)

        assert [row.node.id for row in rows] == ["a", "d"]
        assert count(forest) == 4

    def test_rows_reference_stored_nodes(self):
        """Rows point at the stored nodes rather than copies."""
        forest = [make_node("a")]

        rows = flatten_for_render(forest)

        assert rows[0].node is forest[0]
