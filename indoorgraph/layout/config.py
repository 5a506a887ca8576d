"""YAML loading for indoorgraph configuration files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models import AppConfig


def load_config(path: str | Path) -> AppConfig:
    """Load a YAML configuration file.

    The file may hold any of the top-level keys ``layout``, ``extraction``
    and ``render``; missing keys keep their defaults and an empty file gives
    the default configuration.

    Args:
        path: Path to the YAML file.

    Returns:
        The validated AppConfig.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise ConfigError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigError(
            f"Invalid configuration with {len(errors)} error(s)", str(path), errors
        ) from e
