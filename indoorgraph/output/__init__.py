"""Output formatting for graphs and diagnostics."""

from .formatter import format_check_result, format_graph, graph_to_dict

__all__ = [
    "format_graph",
    "format_check_result",
    "graph_to_dict",
]
