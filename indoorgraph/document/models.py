"""Pydantic records for the parts of an IndoorGML document we read."""

from pydantic import BaseModel, Field


class CellSpaceRecord(BaseModel):
    """A CellSpace element as it appears in the document."""

    id: str = ""
    name: str | None = None

    @property
    def key(self) -> str:
        """The cross-reference key for this cell space ('#' + id)."""
        return f"#{self.id}"

    @property
    def label(self) -> str:
        """The display label, falling back to the id when unnamed."""
        return self.name or self.id


class TransitionRecord(BaseModel):
    """A Transition element and the hrefs of its connects elements."""

    id: str | None = None
    connects: list[str] = Field(default_factory=list)

    @property
    def endpoints(self) -> tuple[str, str] | None:
        """The first two connects references, or None if there are fewer."""
        if len(self.connects) < 2:
            return None
        return self.connects[0], self.connects[1]


class ExtractionConfig(BaseModel):
    """Options controlling which elements are read as cell spaces."""

    cell_space_tags: list[str] = Field(default_factory=lambda: ["CellSpace"])


class IndoorDocument(BaseModel):
    """Root record for a parsed IndoorGML document."""

    cell_spaces: list[CellSpaceRecord] = Field(default_factory=list)
    transitions: list[TransitionRecord] = Field(default_factory=list)
    source: str | None = None

    def get_cell_space_ids(self) -> list[str]:
        """Get all cell space ids in document order, duplicates included."""
        return [cs.id for cs in self.cell_spaces]
