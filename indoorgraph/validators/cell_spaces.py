"""Cell space identifier checks."""

from ..document.models import IndoorDocument
from .base import CheckResult


def check_cell_space_ids(document: IndoorDocument) -> CheckResult:
    """Check that every cell space has a unique, non-empty gml:id.

    A cell space without an id still becomes a node, but no transition
    can reach it. A repeated id is merged into the first cell space that
    declared it, so later names for the same id are lost.

    Args:
        document: The parsed document.

    Returns:
        CheckResult with warnings for missing and duplicate ids.
    """
    result = CheckResult()
    seen: set[str] = set()

    for index, cell_space in enumerate(document.cell_spaces):
        if not cell_space.id:
            result.add_warning(
                code="MISSING_ID",
                message=f"Cell space #{index + 1} has no gml:id and cannot be referenced",
                position=index,
            )
            continue

        if cell_space.id in seen:
            result.add_warning(
                code="DUPLICATE_ID",
                message=f"Cell space id '{cell_space.id}' is already defined; this one is ignored",
                cell_space=cell_space.id,
                position=index,
            )
            continue

        seen.add(cell_space.id)

    return result
