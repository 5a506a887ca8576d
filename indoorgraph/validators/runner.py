"""Runner that orchestrates all document checks."""

from pathlib import Path

from ..document.loader import load_document
from ..document.models import ExtractionConfig, IndoorDocument
from ..graph.builder import build_graph
from ..graph.model_graph import IndoorGraph
from .base import CheckResult
from .cell_spaces import check_cell_space_ids
from .orphan_detector import check_orphan_cell_spaces
from .reference_integrity import check_reference_integrity


def run_validators(document: IndoorDocument, graph: IndoorGraph) -> CheckResult:
    """Run all checks on a document and its graph.

    Args:
        document: The parsed document.
        graph: The graph built from the document.

    Returns:
        Combined CheckResult from all checks.
    """
    result = CheckResult()

    result.merge(check_cell_space_ids(document))
    result.merge(check_reference_integrity(document, graph))
    result.merge(check_orphan_cell_spaces(graph))

    return result


def check_document_file(
    path: str | Path, config: ExtractionConfig | None = None
) -> CheckResult:
    """Load and check an IndoorGML file.

    Args:
        path: Path to the GML file.
        config: Extraction options; defaults are used when omitted.

    Returns:
        CheckResult from all checks.

    Raises:
        ParseError: If the file cannot be read or is not well-formed XML.
    """
    document = load_document(path, config)
    graph = build_graph(document)
    return run_validators(document, graph)
