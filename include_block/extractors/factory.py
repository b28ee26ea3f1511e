"""Factory for creating the extractor of a dialect."""

import os

from ..constants import get_dialect_for_alias, get_dialect_for_extension
from ..exceptions import UnsupportedDialectError
from .asciidoc import AsciiDocBlockExtractor
from .base import BaseBlockExtractor
from .markdown import MarkdownBlockExtractor
from .models import Dialect
from .org import OrgBlockExtractor
from .textile import TextileBlockExtractor

EXTRACTORS: dict[Dialect, type[BaseBlockExtractor]] = {
    Dialect.MARKDOWN: MarkdownBlockExtractor,
    Dialect.ASCIIDOC: AsciiDocBlockExtractor,
    Dialect.ORG: OrgBlockExtractor,
    Dialect.TEXTILE: TextileBlockExtractor,
}


def parse_dialect(value: Dialect | str) -> Dialect:
    """
    Convert a dialect name or alias into a Dialect.

    Raises:
        UnsupportedDialectError: If the value names no supported dialect
    """
    if isinstance(value, Dialect):
        return value

    dialect = get_dialect_for_alias(value)
    if dialect is None:
        raise UnsupportedDialectError(f"unsupported dialect '{value}'")
    return Dialect(dialect)


def dialect_for_path(file_path: str | os.PathLike) -> Dialect | None:
    """Determine the dialect of a file from its extension."""
    dialect = get_dialect_for_extension(os.fspath(file_path))
    return Dialect(dialect) if dialect else None


def get_extractor(dialect: Dialect | str) -> BaseBlockExtractor:
    """Get the extractor for a dialect."""
    return EXTRACTORS[parse_dialect(dialect)]()


def create_extractor(file_path: str | os.PathLike | None = None, content_type: str | None = None) -> BaseBlockExtractor | None:
    """
    Create appropriate extractor based on file extension or content type.

    Args:
        file_path: Optional file path to determine type from extension
        content_type: Optional explicit dialect name ('markdown', 'adoc', 'org', ...)

    Returns:
        Appropriate block extractor or None if type not supported
    """
    # Explicit content type wins over the extension
    if content_type:
        dialect = get_dialect_for_alias(content_type)
        if dialect:
            return EXTRACTORS[Dialect(dialect)]()

    if file_path:
        dialect = dialect_for_path(file_path)
        if dialect:
            return EXTRACTORS[dialect]()

    return None
