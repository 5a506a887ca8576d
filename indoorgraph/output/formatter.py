"""Output formatting for laid-out graphs and diagnostics results."""

import json
from typing import Any, Literal

from ..graph.model_graph import IndoorGraph, Node
from ..layout.models import LayoutConfig, RenderHints
from ..validators.base import CheckResult, Issue


def graph_to_dict(
    graph: IndoorGraph,
    layout: LayoutConfig | None = None,
    render: RenderHints | None = None,
) -> dict[str, Any]:
    """Convert a graph into the plain structure handed to a renderer.

    Nodes come in layout order; edges refer to nodes by key.
    """
    layout = layout or LayoutConfig()
    render = render or RenderHints()

    return {
        "nodes": [
            {
                "key": key,
                "id": node.id,
                "label": node.label,
                "x": node.position[0] if node.position else None,
                "y": node.position[1] if node.position else None,
            }
            for key, node in graph.nodes.items()
        ],
        "edges": [
            {
                "from": edge.from_node.key,
                "to": edge.to_node.key,
                "transition": edge.transition_id,
            }
            for edge in graph.edges
        ],
        "layout": {
            "center": list(layout.center),
            "radius": layout.radius,
        },
        "render": {
            "canvas": list(render.canvas),
            "node_radius": render.node_radius,
            "label_offset": list(render.label_offset),
        },
    }


def format_graph(
    graph: IndoorGraph,
    format: Literal["text", "json"] = "text",
    layout: LayoutConfig | None = None,
    render: RenderHints | None = None,
) -> str:
    """Format a graph for output.

    Args:
        graph: The graph to format, usually after layout.
        format: Output format ("text" or "json").
        layout: Layout used, echoed in JSON output.
        render: Drawing hints, echoed in JSON output.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(graph_to_dict(graph, layout, render), indent=2)
    return _format_graph_text(graph)


def _format_graph_text(graph: IndoorGraph) -> str:
    lines: list[str] = []

    lines.append("NODES:")
    if graph.nodes:
        for node in graph.nodes.values():
            lines.append(f"  {node.id} {_format_position(node)} {node.label!r}")
    else:
        lines.append("  (none)")

    lines.append("")

    lines.append("EDGES:")
    if graph.edges:
        for edge in graph.edges:
            name = f" [{edge.transition_id}]" if edge.transition_id else ""
            lines.append(f"  {edge.from_node.id} -> {edge.to_node.id}{name}")
    else:
        lines.append("  (none)")

    lines.append("")
    lines.append(f"{len(graph.nodes)} node(s), {len(graph.edges)} edge(s)")

    return "\n".join(lines)


def _format_position(node: Node) -> str:
    if node.position is None:
        return "(-, -)"
    x, y = node.position
    return f"({x:.2f}, {y:.2f})"


def format_check_result(
    result: CheckResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a diagnostics result for output.

    Args:
        result: The result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_result_json(result)
    return _format_result_text(result)


def _format_result_text(result: CheckResult) -> str:
    lines: list[str] = []

    lines.append("WARNINGS:")
    if result.issues:
        for issue in result.issues:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")
    if result.issues:
        lines.append(f"Check passed with {len(result.issues)} warning(s)")
    else:
        lines.append("Check passed")

    return "\n".join(lines)


def _format_issue_text(issue: Issue) -> str:
    location = f"[{issue.location}] " if issue.location else ""
    return f"⚠ {issue.code}: {location}{issue.message}"


def _format_result_json(result: CheckResult) -> str:
    data = {
        "clean": not result.has_warnings,
        "warning_count": len(result.issues),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "cell_space": issue.cell_space,
                "transition": issue.transition,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)
