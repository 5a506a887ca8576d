"""Issue and result types for document checks.

Checks only ever warn: everything they report is something extraction
already tolerates.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Issue:
    """Something a check found that extraction skipped or merged away."""

    code: str
    message: str
    cell_space: str | None = None
    transition: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """Location string such as 'cell:R1' or 'transition:T2'.

        Empty ids give no location; the message names the element instead.
        """
        if self.cell_space:
            return f"cell:{self.cell_space}"
        if self.transition:
            return f"transition:{self.transition}"
        return ""

    def __str__(self) -> str:
        location = f" [{self.location}]" if self.location else ""
        return f"WARNING: {self.code}{location} - {self.message}"


@dataclass
class CheckResult:
    """Issues collected by one or more checks, in the order found."""

    issues: list[Issue] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.issues)

    def codes(self) -> list[str]:
        """Get the issue codes in order."""
        return [issue.code for issue in self.issues]

    def add_warning(
        self,
        code: str,
        message: str,
        cell_space: str | None = None,
        transition: str | None = None,
        **details: Any,
    ) -> None:
        """Record an issue."""
        self.issues.append(
            Issue(
                code=code,
                message=message,
                cell_space=cell_space,
                transition=transition,
                details=details,
            )
        )

    def merge(self, other: "CheckResult") -> None:
        """Append another result's issues to this one."""
        self.issues.extend(other.issues)
