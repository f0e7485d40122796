"""Immutable, builder-style graph descriptions."""

from dotgraph.attrs import FrozenAttrs, concat, merge_attrs
from dotgraph.errors import (
    ConfigurationError,
    DotGraphError,
    MalformedAttributeError,
    MalformedItemError,
)
from dotgraph.graph import Graph
from dotgraph.items import Edge, Node
from dotgraph.settings import Settings, configure_logging

__all__ = [
    "ConfigurationError",
    "DotGraphError",
    "Edge",
    "FrozenAttrs",
    "Graph",
    "MalformedAttributeError",
    "MalformedItemError",
    "Node",
    "Settings",
    "concat",
    "configure_logging",
    "merge_attrs",
]
