"""XML loading and parsing for IndoorGML documents."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from .errors import ParseError
from .models import CellSpaceRecord, ExtractionConfig, IndoorDocument, TransitionRecord

logger = logging.getLogger(__name__)

GML_NAMESPACES = (
    "http://www.opengis.net/gml/3.2",
    "http://www.opengis.net/gml",
)
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

TRANSITION_TAG = "Transition"
CONNECTS_TAG = "connects"
NAME_TAG = "name"

DocumentSource = str | Path | bytes | BinaryIO


def load_document(
    path: str | Path, config: ExtractionConfig | None = None
) -> IndoorDocument:
    """Load an IndoorGML file and read its cell spaces and transitions.

    Args:
        path: Path to the GML file.
        config: Extraction options; defaults are used when omitted.

    Returns:
        The parsed IndoorDocument.

    Raises:
        ParseError: If the file cannot be read or is not well-formed XML.
    """
    path = Path(path)

    if not path.exists():
        raise ParseError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise ParseError(f"Not a file: {path}", str(path))

    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise ParseError(f"Invalid XML: {e}", str(path)) from e
    except OSError as e:
        raise ParseError(f"Cannot read file: {e}", str(path)) from e

    return _read_document(tree.getroot(), config, source=str(path))


def parse_document(
    source: DocumentSource, config: ExtractionConfig | None = None
) -> IndoorDocument:
    """Parse a document given as a path, raw bytes or an open binary handle.

    Raises:
        ParseError: If the source cannot be read or is not well-formed XML.
    """
    if isinstance(source, (str, Path)):
        return load_document(source, config)

    if isinstance(source, (bytes, bytearray)):
        try:
            root = ET.fromstring(bytes(source))
        except ET.ParseError as e:
            raise ParseError(f"Invalid XML: {e}") from e
        return _read_document(root, config)

    name = getattr(source, "name", None)
    try:
        tree = ET.parse(source)
    except ET.ParseError as e:
        raise ParseError(f"Invalid XML: {e}", name) from e
    except OSError as e:
        raise ParseError(f"Cannot read document: {e}", name) from e

    return _read_document(tree.getroot(), config, source=name)


def parse_document_from_string(
    xml_string: str, config: ExtractionConfig | None = None
) -> IndoorDocument:
    """Parse an XML string into an IndoorDocument.

    Args:
        xml_string: The XML content as a string.
        config: Extraction options; defaults are used when omitted.

    Returns:
        The parsed IndoorDocument.

    Raises:
        ParseError: If the string is not well-formed XML.
    """
    try:
        root = ET.fromstring(xml_string)
    except ET.ParseError as e:
        raise ParseError(f"Invalid XML: {e}") from e

    return _read_document(root, config)


def _read_document(
    root: ET.Element,
    config: ExtractionConfig | None,
    source: str | None = None,
) -> IndoorDocument:
    """Collect cell space and transition records from a parsed tree.

    Both lists keep document order. Nothing is de-duplicated or resolved
    here; that is the graph builder's job.
    """
    config = config or ExtractionConfig()
    cell_space_tags = set(config.cell_space_tags)

    cell_spaces: list[CellSpaceRecord] = []
    transitions: list[TransitionRecord] = []

    for element in root.iter():
        tag = _local_name(element.tag)
        if tag in cell_space_tags:
            cell_spaces.append(_read_cell_space(element))
        elif tag == TRANSITION_TAG:
            transitions.append(_read_transition(element))

    logger.debug(
        "Read %d cell space(s) and %d transition(s) from %s",
        len(cell_spaces),
        len(transitions),
        source or "<memory>",
    )

    return IndoorDocument(
        cell_spaces=cell_spaces,
        transitions=transitions,
        source=source,
    )


def _read_cell_space(element: ET.Element) -> CellSpaceRecord:
    name_element = _find_descendant(element, NAME_TAG, GML_NAMESPACES)
    return CellSpaceRecord(
        id=_get_attribute(element, "id", GML_NAMESPACES) or "",
        name=_text_content(name_element) if name_element is not None else None,
    )


def _read_transition(element: ET.Element) -> TransitionRecord:
    connects = [
        _get_attribute(c, "href", (XLINK_NAMESPACE,)) or ""
        for c in _descendants(element, CONNECTS_TAG)
    ]
    return TransitionRecord(
        id=_get_attribute(element, "id", GML_NAMESPACES),
        connects=connects,
    )


def _local_name(tag) -> str | None:
    """Strip the '{namespace}' part from an ElementTree tag."""
    if not isinstance(tag, str):
        # Comments and processing instructions
        return None
    return tag.rsplit("}", 1)[-1]


def _descendants(element: ET.Element, local_name: str) -> list[ET.Element]:
    """Get descendants (not the element itself) with the given local name."""
    return [
        child
        for child in element.iter()
        if child is not element and _local_name(child.tag) == local_name
    ]


def _find_descendant(
    element: ET.Element, local_name: str, namespaces: tuple[str, ...]
) -> ET.Element | None:
    """Find the first descendant with a local name, preferring given namespaces.

    A descendant in one of the namespaces wins over an earlier one in any
    other namespace; only when none exists is the first match returned.
    """
    candidates = _descendants(element, local_name)
    for candidate in candidates:
        if _namespace(candidate.tag) in namespaces:
            return candidate
    return candidates[0] if candidates else None


def _namespace(tag: str) -> str | None:
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def _text_content(element: ET.Element) -> str:
    """Concatenate all text below an element, like DOM textContent."""
    return "".join(element.itertext())


def _get_attribute(
    element: ET.Element, local_name: str, namespaces: tuple[str, ...]
) -> str | None:
    """Read a namespaced attribute.

    ElementTree exposes namespaced attributes as '{uri}name'. The expected
    namespaces are tried first, then any namespace carrying the same local
    name, so documents using an older or non-standard URI still resolve.
    """
    for namespace in namespaces:
        value = element.get(f"{{{namespace}}}{local_name}")
        if value is not None:
            return value

    for key, value in element.attrib.items():
        if key.startswith("{") and _local_name(key) == local_name:
            return value

    return None
