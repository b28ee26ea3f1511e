"""Exceptions raised while including blocks."""


class IncludeError(Exception):
    """Base exception for include operations."""


class BlockNotFoundError(IncludeError):
    """No block with the requested name exists, or it was never closed."""

    def __init__(self, name: str, dialect: str | None = None, source: str | None = None):
        self.name = name
        self.dialect = dialect
        self.source = source

        message = f"code block '{name}' not found"
        if dialect:
            message += f" in {dialect} document"
        if source:
            message += f" {source}"
        super().__init__(message)


class UnsupportedDialectError(IncludeError):
    """The requested dialect or file extension is not supported."""


class PathResolutionError(IncludeError):
    """A path could not be resolved in the requested mode."""


class SourceNotFoundError(IncludeError, FileNotFoundError):
    """The resolved source document does not exist."""


class SourceDecodeError(IncludeError, ValueError):
    """The source document cannot be decoded with the configured encoding."""
