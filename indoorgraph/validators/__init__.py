"""Diagnostics for IndoorGML documents.

These never change what extraction produces; they only report what it
skipped.
"""

from .base import CheckResult, Issue
from .cell_spaces import check_cell_space_ids
from .orphan_detector import check_orphan_cell_spaces
from .reference_integrity import check_reference_integrity
from .runner import check_document_file, run_validators

__all__ = [
    "Issue",
    "CheckResult",
    "check_cell_space_ids",
    "check_orphan_cell_spaces",
    "check_reference_integrity",
    "check_document_file",
    "run_validators",
]
