from collections.abc import Mapping
from dataclasses import dataclass

from dotgraph.attrs import EMPTY_ATTRS, AttrPairs, freeze_attrs, merge_attrs


@dataclass(slots=True, frozen=True)
class Node:
    name: str
    attrs: Mapping[str, str] = EMPTY_ATTRS

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", freeze_attrs(self.attrs))

    def __hash__(self) -> int:
        return hash((self.name, self.attrs))

    def with_attrs(self, pairs: AttrPairs) -> "Node":
        return Node(self.name, merge_attrs(self.attrs, pairs))

    def attr(self, key: str) -> str | None:
        return self.attrs.get(key)


@dataclass(slots=True, frozen=True)
class Edge:
    """A connection between two node names.

    Endpoints are kept exactly as given: ``Edge("a", "b")`` and
    ``Edge("b", "a")`` are different edges, and neither name has to belong
    to a node of the graph holding the edge.
    """

    node1: str
    node2: str
    attrs: Mapping[str, str] = EMPTY_ATTRS

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", freeze_attrs(self.attrs))

    def __hash__(self) -> int:
        return hash((self.node1, self.node2, self.attrs))

    def with_attrs(self, pairs: AttrPairs) -> "Edge":
        return Edge(self.node1, self.node2, merge_attrs(self.attrs, pairs))

    def attr(self, key: str) -> str | None:
        return self.attrs.get(key)
