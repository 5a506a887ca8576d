"""Builder for converting an IndoorDocument to an IndoorGraph."""

import logging

from ..document.loader import DocumentSource, parse_document
from ..document.models import ExtractionConfig, IndoorDocument
from .model_graph import IndoorGraph

logger = logging.getLogger(__name__)


def build_graph(document: IndoorDocument) -> IndoorGraph:
    """Build an IndoorGraph from an IndoorDocument.

    Cell spaces become nodes in document order; the first cell space with
    a given id wins. Transitions become edges when they list at least two
    connects elements and both of the first two resolve to a node. Anything
    else is skipped without raising.

    Args:
        document: The parsed document.

    Returns:
        An IndoorGraph representing the document.
    """
    graph = IndoorGraph()

    # Add all cell spaces first
    for cell_space in document.cell_spaces:
        graph.add_cell_space(cell_space.id, cell_space.label)

    # Add transitions (after all cell spaces exist)
    for transition in document.transitions:
        endpoints = transition.endpoints
        if endpoints is None:
            logger.debug(
                "Skipping transition %s: %d connects element(s)",
                transition.id,
                len(transition.connects),
            )
            continue

        edge = graph.add_transition(*endpoints, transition_id=transition.id)
        if edge is None:
            logger.debug(
                "Dropping transition %s: unresolved reference in %s",
                transition.id,
                endpoints,
            )

    logger.debug(
        "Built graph with %d node(s) and %d edge(s)", len(graph), len(graph.edges)
    )
    return graph


def extract(
    source: DocumentSource, config: ExtractionConfig | None = None
) -> IndoorGraph:
    """Parse a document and build its graph.

    Args:
        source: Path, raw bytes or open binary handle of an IndoorGML document.
        config: Extraction options; defaults are used when omitted.

    Returns:
        The extracted graph, without positions.

    Raises:
        ParseError: If the document cannot be read or is not well-formed XML.
    """
    return build_graph(parse_document(source, config))
