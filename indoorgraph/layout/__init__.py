"""Layout layer for placing graph nodes in 2D."""

from .errors import ConfigError
from .models import AppConfig, LayoutConfig, RenderHints
from .circular import circular_layout
from .config import load_config

__all__ = [
    "ConfigError",
    "AppConfig",
    "LayoutConfig",
    "RenderHints",
    "circular_layout",
    "load_config",
]
