"""Document layer for reading IndoorGML files."""

from .errors import ParseError
from .models import (
    CellSpaceRecord,
    ExtractionConfig,
    IndoorDocument,
    TransitionRecord,
)
from .loader import load_document, parse_document, parse_document_from_string

__all__ = [
    "ParseError",
    "CellSpaceRecord",
    "ExtractionConfig",
    "IndoorDocument",
    "TransitionRecord",
    "load_document",
    "parse_document",
    "parse_document_from_string",
]
