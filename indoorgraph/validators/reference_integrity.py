"""Reference integrity checks for transitions."""

from ..document.models import IndoorDocument
from ..graph.model_graph import IndoorGraph
from .base import CheckResult


def check_reference_integrity(
    document: IndoorDocument, graph: IndoorGraph
) -> CheckResult:
    """Check that every transition connects two known cell spaces.

    This check reports:
    - Transitions with fewer than two connects elements
    - connects references that do not resolve to a cell space

    Only the first two connects of a transition are looked at, matching
    what becomes an edge.

    Args:
        document: The parsed document.
        graph: The graph built from the document.

    Returns:
        CheckResult with warnings for transitions that produce no edge.
    """
    result = CheckResult()

    for transition in document.transitions:
        endpoints = transition.endpoints
        if endpoints is None:
            result.add_warning(
                code="INCOMPLETE_TRANSITION",
                message=(
                    f"Transition has {len(transition.connects)} connects "
                    "element(s), needs 2"
                ),
                transition=transition.id,
            )
            continue

        for ref in endpoints:
            if graph.resolve(ref) is None:
                result.add_warning(
                    code="UNRESOLVED_REFERENCE",
                    message=f"Transition references unknown cell space '{ref}'",
                    transition=transition.id,
                    reference=ref,
                )

    return result
