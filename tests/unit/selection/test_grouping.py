"""Unit tests for the grouped projection and the legend."""

from depscope.core.config import CATEGORY10
from depscope.core.graph import GraphModel
from depscope.core.types import Node, NodeAttribute
from depscope.selection.grouping import (
    GroupingProjector,
    build_legend,
    collation_key,
    sort_by_full_name,
)


class TestSorting:
    """Tests for full-name ordering."""

    def test_case_and_accent_insensitive(self):
        """Test that case and accents do not decide the primary order."""
        names = ["cherry", "Éclair", "Banana", "apple", "eclair"]
        nodes = [Node(id=str(i), full_name=name) for i, name in enumerate(names)]

        ordered = [n.full_name for n in sort_by_full_name(nodes)]

        assert ordered[:3] == ["apple", "Banana", "cherry"]
        assert set(ordered[3:]) == {"Éclair", "eclair"}

    def test_missing_full_name_sorts_first(self):
        """Test that nodes without a full name come first."""
        nodes = [Node(id="z", full_name="Zeta"), Node(id="y")]
        assert [n.id for n in sort_by_full_name(nodes)] == ["y", "z"]

    def test_equal_names_ordered_by_id(self):
        """Test that the id breaks ties between equal names."""
        nodes = [Node(id="2", full_name="Same"), Node(id="1", full_name="Same")]
        assert [n.id for n in sort_by_full_name(nodes)] == ["1", "2"]

    def test_collation_key_keeps_distinct_strings_distinct(self):
        """Test that folded-equal strings still get distinct keys."""
        assert collation_key("Account") != collation_key("account")
        assert collation_key("Account")[0] == collation_key("account")[0]


class TestGroupingProjector:
    """Tests for GroupingProjector.project."""

    def test_partitions_by_type(self, path_graph):
        """Test grouping by type with members sorted by full name."""
        groups = GroupingProjector().project(path_graph.iter_nodes())

        assert {value: [n.id for n in members] for value, members in groups.items()} == {
            "ApexClass": ["a", "d"],
            "ApexTrigger": ["b"],
            "CustomObject": ["c", "e"],
        }

    def test_every_node_in_exactly_one_group(self, path_graph):
        """Test that the groups partition the input and none is empty."""
        everything = list(path_graph.iter_nodes())
        groups = GroupingProjector(NodeAttribute.NAMESPACE_PREFIX).project(everything)

        flattened = [n for members in groups.values() for n in members]
        assert sorted(n.id for n in flattened) == sorted(n.id for n in everything)
        assert all(groups.values())

    def test_missing_attribute_groups_under_none(self, path_graph, nodes):
        """Test that nodes without the attribute share the None group."""
        groups = GroupingProjector(NodeAttribute.NAMESPACE_PREFIX).project([nodes["a"], nodes["d"]])
        assert groups == {None: [nodes["a"]], "crm": [nodes["d"]]}

    def test_empty_selection(self):
        """Test that an empty selection has no groups."""
        assert GroupingProjector().project([]) == {}

    def test_explicit_order_and_no_empty_groups(self, nodes):
        """Test that a pinned order is followed and unused groups are omitted."""
        projector = GroupingProjector(order=["CustomObject", "ApexTrigger", "ApexClass"])

        groups = projector.project([nodes["a"], nodes["c"]])

        assert list(groups) == ["CustomObject", "ApexClass"]

    def test_values_outside_order_follow(self, nodes):
        """Test that groups missing from the pinned order come last."""
        projector = GroupingProjector(order=["CustomObject"])
        groups = projector.project([nodes["a"], nodes["c"]])
        assert list(groups) == ["CustomObject", "ApexClass"]

    def test_key_override(self, nodes):
        """Test grouping by a key passed per call."""
        groups = GroupingProjector().project([nodes["d"]], group_key=NodeAttribute.NAMESPACE_PREFIX)
        assert list(groups) == ["crm"]


class TestBuildLegend:
    """Tests for build_legend."""

    def test_smallest_group_first(self, path_graph):
        """Test ascending counts with palette colors in legend order."""
        legend = build_legend(path_graph, NodeAttribute.TYPE)

        assert [(e.value, e.count) for e in legend] == [
            ("ApexTrigger", 1),
            ("ApexClass", 2),
            ("CustomObject", 2),
        ]
        assert [e.color for e in legend] == CATEGORY10[:3]

    def test_palette_cycles(self):
        """Test that colors repeat when groups outnumber the palette."""
        graph = GraphModel.from_parts([Node(id=str(i), type=f"T{i}") for i in range(3)])
        legend = build_legend(graph, NodeAttribute.TYPE, palette=["red", "blue"])
        assert [e.color for e in legend] == ["red", "blue", "red"]
