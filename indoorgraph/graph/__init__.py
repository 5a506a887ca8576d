"""Graph layer for representing IndoorGML cell spaces and transitions."""

from .model_graph import Edge, IndoorGraph, Node
from .builder import build_graph, extract

__all__ = [
    "Edge",
    "IndoorGraph",
    "Node",
    "build_graph",
    "extract",
]
