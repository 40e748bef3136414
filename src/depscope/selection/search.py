"""
Regular-expression search across node attributes.

A search is all-or-nothing: the pattern is compiled before any node is
looked at, so a malformed pattern fails without producing a partial result.
"""

import logging
import re
from typing import FrozenSet, Iterable

from ..core.exceptions import InvalidPatternError
from ..core.graph import GraphModel
from ..core.types import NodeAttribute, SelectionSet, parse_attribute

logger = logging.getLogger(__name__)

SEARCHABLE_ATTRIBUTES: FrozenSet[NodeAttribute] = frozenset(NodeAttribute)


def compile_pattern(pattern: str) -> re.Pattern:
    """
    Compile a user pattern case-insensitively.

    Raises:
        InvalidPatternError: If the pattern is not a valid regular expression.
    """
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def resolve_attributes(keys: Iterable[NodeAttribute | str]) -> FrozenSet[NodeAttribute]:
    """Intersect raw keys with the searchable attribute set; unknown keys drop out."""
    resolved = {parse_attribute(key) for key in keys}
    resolved.discard(None)
    return frozenset(resolved) & SEARCHABLE_ATTRIBUTES


def toggle_attribute(
    enabled: Iterable[NodeAttribute | str],
    clicked: NodeAttribute | str,
    modifier: bool = False,
) -> FrozenSet[NodeAttribute]:
    """
    Next set of enabled search attributes after a checkbox click.

    A plain click flips `clicked`. A modifier-click (ctrl/cmd) switches
    between all and none: everything is enabled unless everything already is.
    """
    current = resolve_attributes(enabled)
    if modifier:
        if current == SEARCHABLE_ATTRIBUTES:
            return frozenset()
        return SEARCHABLE_ATTRIBUTES

    key = parse_attribute(clicked)
    if key is None:
        return current
    if key in current:
        return current - {key}
    return current | {key}


class AttributeSearch:
    """Finds nodes whose enabled attributes match a regular expression."""

    def search(
        self,
        graph: GraphModel,
        pattern: str,
        attribute_keys: Iterable[NodeAttribute | str],
    ) -> SelectionSet:
        """
        Return every node where any enabled attribute contains a match.

        Matching is substring search (`re.search`), not a full match. An
        empty attribute set yields an empty result; it never means "all".

        Raises:
            InvalidPatternError: If `pattern` does not compile.
        """
        regex = compile_pattern(pattern)
        keys = resolve_attributes(attribute_keys)
        if not keys:
            logger.debug("Search with no enabled attributes, nothing to match")
            return frozenset()

        # Fixed order so results do not depend on set iteration
        ordered_keys = sorted(keys, key=lambda k: k.value)
        matches = []
        for node in graph.iter_nodes():
            for key in ordered_keys:
                value = node.attribute(key)
                if value is not None and regex.search(value):
                    matches.append(node)
                    break

        logger.debug(f"Pattern {pattern!r} over {[k.value for k in ordered_keys]} matched {len(matches)} nodes")
        return frozenset(matches)
