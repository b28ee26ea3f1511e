"""Select a dialect's extractor and turn its result into lines or an error."""

import logging
from collections.abc import Sequence

from .constants import SCOPE_CLOSE, SCOPE_OPEN
from .exceptions import BlockNotFoundError
from .extractors import Dialect, Found, get_extractor, parse_dialect

logger = logging.getLogger(__name__)


def wrap_scope(lines: Sequence[str]) -> list[str]:
    """Enclose lines in a brace pair so they form a single block."""
    return [SCOPE_OPEN, *lines, SCOPE_CLOSE]


def extract(
    dialect: Dialect | str,
    lines: Sequence[str],
    name: str,
    scope: bool = False,
    language: str | None = None,
    source: str | None = None,
) -> list[str]:
    """
    Extract the lines of a named block.

    Args:
        dialect: Dialect of the document, as a Dialect or its name
        lines: Document lines with line terminators stripped
        name: Name of the block to extract
        scope: Wrap the lines in a brace pair
        language: Optional language tag the block must declare
        source: Optional description of where the document came from, for errors

    Returns:
        The block's lines

    Raises:
        BlockNotFoundError: If no complete block named ``name`` exists
        UnsupportedDialectError: If ``dialect`` is not supported
    """
    dialect = parse_dialect(dialect)
    result = get_extractor(dialect).collect(lines, name, language=language)

    if not isinstance(result, Found):
        logger.debug(f"No {dialect} block named '{name}' in {source or 'document'}")
        raise BlockNotFoundError(name, dialect=dialect.value, source=source)

    logger.debug(f"Extracted {dialect} block '{name}' from line {result.start_line} of {source or 'document'}")

    if scope:
        return wrap_scope(result.lines)
    return list(result.lines)
