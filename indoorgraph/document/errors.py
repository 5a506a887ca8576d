"""Document-related exceptions."""


class ParseError(Exception):
    """Raised when a document cannot be read or is not well-formed XML."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
