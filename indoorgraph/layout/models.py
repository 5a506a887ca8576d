"""Pydantic models for layout and application configuration."""

from pydantic import BaseModel, Field

from ..document.models import ExtractionConfig


class LayoutConfig(BaseModel):
    """Circle on which nodes are placed."""

    center: tuple[float, float] = (250.0, 250.0)
    radius: float = Field(default=200.0, ge=0)


class RenderHints(BaseModel):
    """Drawing constants handed to an external renderer.

    The core never draws; these only describe how the nodes were meant to
    be shown.
    """

    canvas: tuple[int, int] = (500, 500)
    node_radius: float = 20.0
    label_offset: tuple[float, float] = (-15.0, 5.0)


class AppConfig(BaseModel):
    """Root model for an indoorgraph YAML configuration file."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    render: RenderHints = Field(default_factory=RenderHints)
