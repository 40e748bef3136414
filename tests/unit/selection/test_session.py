"""Unit tests for ExplorerSession, the event-level entry point."""

import logging
from unittest.mock import MagicMock

import pytest

from depscope.core.config import ContractPolicy, ExplorerConfig
from depscope.core.exceptions import ContractViolation, InvalidPatternError
from depscope.core.result import Err, Ok
from depscope.core.types import NodeAttribute, Point, Transform
from depscope.selection.search import SEARCHABLE_ATTRIBUTES
from depscope.selection.session import ExplorerSession


def ids(selection):
    return {node.id for node in selection}


@pytest.fixture
def session(path_graph):
    return ExplorerSession(path_graph)


class TestPathScenario:
    """End-to-end selection on the A-B-C-D-E path."""

    def test_box_then_expand_to_whole_path(self, session):
        """Test box-selecting B, then expanding one hop at a time until stable."""
        session.set_transform(Transform(x=100, y=100))
        session.pointer_down(105, 95)
        session.pointer_move(115, 105)
        assert ids(session.pointer_up(115, 105)) == {"b"}

        assert ids(session.expand()) == {"a", "b", "c"}
        assert ids(session.expand()) == {"a", "b", "c", "d"}
        assert ids(session.expand()) == {"a", "b", "c", "d", "e"}

        observer = MagicMock()
        session.subscribe(observer)
        assert ids(session.expand()) == {"a", "b", "c", "d", "e"}
        assert observer.call_args.args[0].selection == session.selection

    def test_expand_until_stable(self, session):
        """Test growing straight to the whole path."""
        session.select_ids(["b"])
        assert ids(session.expand_until_stable()) == {"a", "b", "c", "d", "e"}

    def test_box_select_helper(self, session):
        """Test a complete drag in one call."""
        hits = session.box_select(Point(35, 5), Point(25, -5))
        assert ids(hits) == {"d"}

    def test_escape_cancels_drag(self, session):
        """Test that Escape abandons the drag."""
        session.pointer_down(0, 0)
        assert session.escape() is True
        assert session.pointer_up(100, 100) is None
        assert session.selection == frozenset()


class TestSearch:
    """Tests for search submission and the attribute checkboxes."""

    def test_default_attributes_from_config(self, session):
        """Test that the configured attributes are searched by default."""
        assert session.enabled_attributes == frozenset({NodeAttribute.FULL_NAME})

        result = session.submit_search("^contact")

        assert isinstance(result, Ok)
        assert ids(result.unwrap()) == {"d", "e"}
        assert ids(session.selection) == {"d", "e"}

    def test_explicit_attributes(self, session):
        """Test searching attributes passed per call."""
        result = session.submit_search("trigger$", ["fileName"])
        assert ids(result.unwrap()) == {"b"}

    def test_invalid_pattern_leaves_selection(self, session, caplog):
        """Test that "(" returns an Err, logs a warning and keeps {a} selected."""
        session.select_ids(["a"])
        observer = MagicMock()
        session.subscribe(observer)

        with caplog.at_level(logging.WARNING, logger="depscope.selection.session"):
            result = session.submit_search("(")

        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidPatternError)
        assert ids(session.selection) == {"a"}
        observer.assert_not_called()
        assert "Invalid search pattern" in caplog.text

    def test_no_enabled_attributes(self, session):
        """Test that unchecking every attribute makes searches match nothing."""
        session.toggle_attribute(NodeAttribute.FULL_NAME)
        assert session.enabled_attributes == frozenset()

        result = session.submit_search(".*")

        assert result.unwrap() == frozenset()

    def test_toggle_all(self, session):
        """Test modifier-clicks switching between all and none."""
        assert session.toggle_attribute("type", modifier=True) == SEARCHABLE_ATTRIBUTES
        assert session.toggle_attribute("type", modifier=True) == frozenset()


class TestDirectManipulation:
    """Tests for clicks, id selection and contraction."""

    def test_click_node_toggles(self, session, nodes):
        """Test that clicking a node toggles it."""
        session.click_node(nodes["c"])
        session.click_node(nodes["e"])
        session.click_node(nodes["c"])
        assert ids(session.selection) == {"e"}

    def test_select_ids_unknown(self, session):
        """Test that an unknown id fails without touching the selection."""
        session.select_ids(["a"])
        with pytest.raises(ContractViolation):
            session.select_ids(["b", "ghost"])
        assert ids(session.selection) == {"a"}

    def test_clear(self, session):
        """Test clearing the selection."""
        session.select_ids(["a", "b"])
        session.clear()
        assert session.selection == frozenset()

    def test_contract_uses_configured_policy(self, path_graph):
        """Test that the configured contract policy reaches the store."""
        session = ExplorerSession(path_graph, ExplorerConfig(contract_policy=ContractPolicy.REWIND))
        session.select_ids(["c"])
        session.expand()
        assert ids(session.contract()) == {"c"}


class TestLegend:
    """Tests for the legend and group ordering."""

    def test_legend_and_colors(self, session):
        """Test legend order and color lookup."""
        assert [e.value for e in session.legend] == ["ApexTrigger", "ApexClass", "CustomObject"]
        assert session.color_for("ApexTrigger") == "#1f77b4"
        assert session.color_for("Layout") is None

    def test_groups_follow_legend_order(self, session, path_graph):
        """Test that panel groups come in legend order."""
        session.select_ids([n.id for n in path_graph.iter_nodes()])
        groups = session.store.last_change.groups
        assert list(groups) == ["ApexTrigger", "ApexClass", "CustomObject"]

    def test_group_key_from_config(self, path_graph):
        """Test grouping by the configured key."""
        session = ExplorerSession(path_graph, ExplorerConfig(group_by=NodeAttribute.NAMESPACE_PREFIX))
        session.select_ids(["c", "d"])
        # Legend order: the smaller "crm" group comes first
        assert list(session.store.last_change.groups) == ["crm", None]
