"""Immutable graph description built with chained ``with_*`` calls."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from dotgraph.attrs import EMPTY_ATTRS, AttrPairs, concat, freeze_attrs, merge_attrs
from dotgraph.errors import MalformedItemError
from dotgraph.items import Edge, Node

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Graph:
    """Ordered nodes and edges plus graph-level attributes.

    Every ``with_*`` method returns a new graph; the receiver is never
    changed. Nodes and edges keep the order they were added in, and
    duplicates are retained.
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    attrs: Mapping[str, str] = EMPTY_ATTRS

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", _checked(self.nodes, Node))
        object.__setattr__(self, "edges", _checked(self.edges, Edge))
        object.__setattr__(self, "attrs", freeze_attrs(self.attrs))

    def __hash__(self) -> int:
        return hash((self.nodes, self.edges, self.attrs))

    def with_nodes(self, nodes: Iterable[Node]) -> Graph:
        added = _checked(nodes, Node)
        logger.debug("Adding %d node(s) to graph with %d", len(added), len(self.nodes))
        return Graph(concat(self.nodes, added), self.edges, self.attrs)

    def with_edges(self, edges: Iterable[Edge]) -> Graph:
        added = _checked(edges, Edge)
        logger.debug("Adding %d edge(s) to graph with %d", len(added), len(self.edges))
        return Graph(self.nodes, concat(self.edges, added), self.attrs)

    def with_attrs(self, pairs: AttrPairs) -> Graph:
        return Graph(self.nodes, self.edges, merge_attrs(self.attrs, pairs))

    def find_node(self, name: str) -> Node | None:
        """Return the first node named ``name``, or ``None``."""
        for node in self.nodes:
            if node.name == name:
                return node
        logger.debug("No node named %r among %d node(s)", name, len(self.nodes))
        return None

    def attr(self, key: str) -> str | None:
        return self.attrs.get(key)


def _checked(items: Iterable[T], expected: type[T]) -> tuple[T, ...]:
    checked = tuple(items)
    for item in checked:
        if not isinstance(item, expected):
            raise MalformedItemError(
                f"Expected {expected.__name__}, got {type(item).__name__}: {item!r}",
                item=item,
                expected=expected,
            )
    return checked
