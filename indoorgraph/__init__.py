"""Extract a node relation graph from IndoorGML documents and lay it out."""

from .document import ParseError
from .graph import Edge, IndoorGraph, Node, build_graph, extract
from .layout import LayoutConfig, circular_layout

__version__ = "0.1.0"

__all__ = [
    "ParseError",
    "Edge",
    "IndoorGraph",
    "Node",
    "build_graph",
    "extract",
    "LayoutConfig",
    "circular_layout",
]
