"""Tests for hierarchy traversal through queries.

The sample tree:

    UI
    └── CssLayout (outer)
        ├── CssLayout (first)
        │   ├── Button
        │   └── Panel
        │       └── Image
        └── CssLayout (second)
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from widgetquery import Query, QueryConfig, InvalidArgumentError, select
from widgetquery.toolkit import UI, CssLayout, VerticalLayout, Button, Panel, Image, Label


class SampleTree:
    def __init__(self):
        self.button = Button()
        self.image = Image()
        self.panel = Panel(self.image)
        self.first = CssLayout(self.button, self.panel)
        self.second = CssLayout()
        self.outer = CssLayout(self.first, self.second)
        self.ui = UI(self.outer)


@pytest.fixture
def tree():
    return SampleTree()


@pytest.fixture
def q_ui(tree):
    return select(tree.ui)


class TestChildren:
    """children() returns direct children."""

    def test_single_child(self, tree, q_ui):
        assert q_ui.children().one() is tree.outer

    def test_children_in_order(self, tree, q_ui):
        layout_children = q_ui.children().children()
        assert layout_children.get() == [tree.first, tree.second]

    def test_bottom_out(self, q_ui):
        assert not q_ui.children().children().children().children().children().exists()

    def test_leaf_has_no_children(self, tree):
        assert not select(tree.button).children().exists()

    def test_children_of_several(self, tree):
        result = select(tree.first, tree.outer).children()
        assert result.get() == [tree.button, tree.panel, tree.first, tree.second]


class TestDescendants:
    """descendants() is a depth-first pre-order walk."""

    def test_descendants(self, tree, q_ui):
        descendants = q_ui.descendants()
        assert descendants.size() == 6
        assert descendants.is_(Image).one() is tree.image

    def test_pre_order(self, tree, q_ui):
        assert q_ui.descendants().get() == [
            tree.outer,
            tree.first,
            tree.button,
            tree.panel,
            tree.image,
            tree.second,
        ]

    def test_descendants_of_grandchildren(self, q_ui):
        assert q_ui.children().children().descendants().size() == 3

    def test_root_not_included(self, tree, q_ui):
        assert tree.ui not in q_ui.descendants()

    def test_depth_limit(self, tree, q_ui):
        assert q_ui.descendants(1).get() == [tree.outer]
        assert q_ui.descendants(2).get() == [tree.outer, tree.first, tree.second]
        assert q_ui.descendants(3).size() == 5

    def test_depth_zero(self, q_ui):
        assert not q_ui.descendants(0).exists()

    def test_negative_depth(self, q_ui):
        with pytest.raises(InvalidArgumentError):
            q_ui.descendants(-1)

    def test_config_depth_default(self, tree):
        q = select(tree.ui, config=QueryConfig(max_descendant_depth=2))
        assert q.descendants().get() == [tree.outer, tree.first, tree.second]
        # An explicit depth overrides the configured one
        assert q.descendants(10).size() == 6

    def test_overlapping_roots(self, tree):
        """A component reachable from several members appears once."""
        result = select(tree.outer, tree.first).descendants()
        assert result.size() == 5
        assert result.get()[:3] == [tree.first, tree.button, tree.panel]

    def test_overlap_with_depth_limit(self):
        """A member's own subtree gets the full depth even if met deeper first."""
        c = Label("c")
        b = VerticalLayout(c)
        a = VerticalLayout(b)
        r = VerticalLayout(a)

        assert select(r, a).descendants(2).get() == [a, b, c]


class TestParent:
    """parent() returns distinct parents."""

    def test_parent(self, tree, q_ui):
        assert q_ui.children().parent().one() is tree.ui

    def test_parent_of_descendants_is_non_leaf_set(self, tree, q_ui):
        parents = q_ui.descendants().parent()
        assert parents.size() == 4
        assert parents == select(tree.ui, tree.outer, tree.first, tree.panel)

    def test_parent_of_root(self, q_ui):
        assert not q_ui.parent().exists()

    def test_parent_of_siblings_deduplicated(self, tree):
        assert select(tree.button, tree.panel).parent().one() is tree.first


class TestAncestors:
    """ancestors() walks parent chains to the root."""

    def test_ancestors(self, tree, q_ui):
        img = q_ui.children().children().children().children().is_(Image).one()
        ancestors = select(img).ancestors()

        assert ancestors.size() == 4
        p = img
        for c in ancestors:
            p = p.get_parent()
            assert p is c

    def test_ancestors_of_root(self, q_ui):
        assert not q_ui.ancestors().exists()

    def test_ancestors_deduplicated(self, tree):
        result = select(tree.image, tree.button).ancestors()
        assert result.get() == [tree.panel, tree.first, tree.outer, tree.ui]


class TestAncestor:
    """ancestor(depth) selects one level."""

    def test_ancestor_zero_is_parent(self, tree):
        assert select(tree.image).ancestor(0) == select(tree.image).parent()

    def test_ancestor_levels(self, tree):
        assert select(tree.image).ancestor(1).one() is tree.first
        assert select(tree.image).ancestor(3).one() is tree.ui

    def test_ancestor_beyond_root(self, tree):
        assert not select(tree.image).ancestor(10).exists()

    def test_ancestor_mixed_depths(self, tree):
        result = select(tree.image, tree.button).ancestor(1)
        assert result.get() == [tree.first, tree.outer]

    def test_negative_ancestor(self, tree):
        with pytest.raises(InvalidArgumentError):
            select(tree.image).ancestor(-1)


class TestMap:
    """map() with names and custom functions."""

    def test_map_by_name(self, tree, q_ui):
        assert q_ui.map('descendants') == q_ui.descendants()
        assert q_ui.map('children') == q_ui.children()

    def test_map_custom_function(self, tree, q_ui):
        def visible_children(components):
            return [c for c in Query(*components).children() if c.is_visible()]

        tree.second.set_visible(False)
        result = select(tree.outer).map(visible_children)
        assert result.get() == [tree.first]

    def test_map_unknown_name(self, q_ui):
        with pytest.raises(InvalidArgumentError):
            q_ui.map('siblings')

    def test_map_returns_plain_query(self, tree):
        fields = select(tree.ui).is_field()
        assert type(fields.map('parent')) is Query
