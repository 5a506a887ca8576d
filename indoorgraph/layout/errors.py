"""Configuration-related exceptions."""


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is invalid."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        errors: list[dict] | None = None,
    ):
        self.path = path
        self.errors = errors or []
        super().__init__(message)
