"""Include named code blocks from Markdown, AsciiDoc, Org and Textile documents."""

from .constants import __version__
from .exceptions import (
    BlockNotFoundError,
    IncludeError,
    PathResolutionError,
    SourceDecodeError,
    SourceNotFoundError,
    UnsupportedDialectError,
)
from .extraction import extract, wrap_scope
from .extractors import Dialect, Found, NotFound, create_extractor, get_extractor
from .include import include_asciidoc, include_file, include_markdown, include_org, include_textile
from .source import read_lines, resolve_path, split_lines

__all__ = [
    "BlockNotFoundError",
    "Dialect",
    "Found",
    "IncludeError",
    "NotFound",
    "PathResolutionError",
    "SourceDecodeError",
    "SourceNotFoundError",
    "UnsupportedDialectError",
    "__version__",
    "create_extractor",
    "extract",
    "get_extractor",
    "include_asciidoc",
    "include_file",
    "include_markdown",
    "include_org",
    "include_textile",
    "read_lines",
    "resolve_path",
    "split_lines",
    "wrap_scope",
]
