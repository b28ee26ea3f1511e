"""Include named blocks from documents on disk."""

import logging
import os

from .config import get_settings
from .exceptions import UnsupportedDialectError
from .extraction import extract
from .extractors import Dialect, dialect_for_path, parse_dialect
from .source import caller_file, read_lines, resolve_path

logger = logging.getLogger(__name__)


def _resolve_dialect(path: str | os.PathLike, dialect: Dialect | str | None) -> Dialect:
    """Pick the requested dialect, the one implied by the extension, or the configured default."""
    if dialect is not None:
        return parse_dialect(dialect)

    detected = dialect_for_path(path)
    if detected:
        return detected

    default = get_settings().include.default_dialect
    if default:
        return parse_dialect(default)

    raise UnsupportedDialectError(f"cannot determine the dialect of '{os.fspath(path)}'")


def include_file(
    path: str | os.PathLike,
    name: str,
    dialect: Dialect | str | None = None,
    scope: bool = False,
    relative: bool = False,
    language: str | None = None,
    root: str | os.PathLike | None = None,
    caller: str | os.PathLike | None = None,
    _stacklevel: int = 1,
) -> str:
    """
    Include the contents of a named block from a document.

    Args:
        path: Document path, relative to the root unless ``relative`` is set
        name: Name of the block to include
        dialect: Dialect of the document (default: from the file extension)
        scope: Wrap the contents in braces
        relative: Resolve ``path`` against the calling source file
        language: Optional language tag the block must declare
        root: Directory root-relative paths resolve against
        caller: Source file for relative paths (default: the calling module)

    Returns:
        The block's lines joined with newlines
    """
    if relative and caller is None:
        caller = caller_file(_stacklevel)

    resolved = resolve_path(path, relative=relative, caller=caller, root=root)
    selected = _resolve_dialect(resolved, dialect)
    lines = read_lines(resolved)

    content = extract(selected, lines, name, scope=scope, language=language, source=f"in '{resolved}'")
    logger.info(f"Included {selected} block '{name}' from {resolved} ({len(content)} lines)")
    return '\n'.join(content)


def include_markdown(path: str | os.PathLike, name: str, scope: bool = False, relative: bool = False, **kwargs) -> str:
    """Include code from within a code fence in a Markdown file."""
    return include_file(path, name, Dialect.MARKDOWN, scope=scope, relative=relative, _stacklevel=2, **kwargs)


def include_asciidoc(path: str | os.PathLike, name: str, scope: bool = False, relative: bool = False, **kwargs) -> str:
    """Include code from within a delimited block in an AsciiDoc file."""
    return include_file(path, name, Dialect.ASCIIDOC, scope=scope, relative=relative, _stacklevel=2, **kwargs)


def include_org(path: str | os.PathLike, name: str, scope: bool = False, relative: bool = False, **kwargs) -> str:
    """Include code from within a source block in an Org file."""
    return include_file(path, name, Dialect.ORG, scope=scope, relative=relative, _stacklevel=2, **kwargs)


def include_textile(path: str | os.PathLike, name: str, scope: bool = False, relative: bool = False, **kwargs) -> str:
    """Include code from within a code block in a Textile file."""
    return include_file(path, name, Dialect.TEXTILE, scope=scope, relative=relative, _stacklevel=2, **kwargs)
