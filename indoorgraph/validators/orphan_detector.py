"""Orphan cell space detection."""

from ..graph.model_graph import IndoorGraph
from .base import CheckResult


def check_orphan_cell_spaces(graph: IndoorGraph) -> CheckResult:
    """Check for cell spaces that no transition connects.

    Args:
        graph: The graph to check.

    Returns:
        CheckResult with warnings for orphan cell spaces.
    """
    result = CheckResult()

    for node in graph.isolated_nodes():
        result.add_warning(
            code="ORPHAN_CELL_SPACE",
            message=f"Cell space '{node.label}' has no transitions",
            cell_space=node.id or None,
        )

    return result
