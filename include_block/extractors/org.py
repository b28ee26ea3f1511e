"""Org-mode source block extractor."""

import logging
import re
from collections.abc import Sequence

from .base import BaseBlockExtractor
from .models import BlockInfo, Dialect, ExtractionResult, Found, NotFound

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r'^\s*#\+NAME:(?P<name>.*)$', re.IGNORECASE)
BEGIN_PATTERN = re.compile(r'^\s*#\+BEGIN_SRC(?:\s+(?P<parameters>.*))?$', re.IGNORECASE)
END_PATTERN = re.compile(r'^\s*#\+END_SRC(?:\s.*)?$', re.IGNORECASE)


class OrgBlockExtractor(BaseBlockExtractor):
    """Extract named source blocks from Org documents.

    The name comes from a ``#+NAME:`` keyword on the line immediately before
    ``#+BEGIN_SRC``. Keywords are case-insensitive.
    """

    dialect = Dialect.ORG

    def collect(self, lines: Sequence[str], name: str, language: str | None = None) -> ExtractionResult:
        """Collect the first source block named ``name``."""
        pending_name = None
        i = 0

        while i < len(lines):
            line = lines[i]

            begin = BEGIN_PATTERN.match(line)
            if begin:
                block = self._block_info(pending_name, begin.group('parameters'), i)
                end = self._find_end(lines, i + 1)
                if end is None:
                    logger.debug(f"Unclosed source block at line {i + 1}")
                    return NotFound()

                if self.is_match(block, name, language):
                    logger.debug(f"Found source block '{name}' at lines {i + 1}-{end + 1}")
                    return Found(lines[i + 1:end], start_line=block.start_line + 1)

                pending_name = None
                i = end + 1
                continue

            # A name only applies to the line directly below it
            match = NAME_PATTERN.match(line)
            pending_name = match.group('name').strip() if match else None
            i += 1

        return NotFound()

    def _block_info(self, block_name: str | None, parameters: str | None, line_number: int) -> BlockInfo:
        """Build block info from a pending name and the BEGIN_SRC parameters."""
        words = parameters.split() if parameters else []
        return BlockInfo(
            names=(block_name,) if block_name else (),
            language=words[0] if words else None,
            start_line=line_number
        )

    def _find_end(self, lines: Sequence[str], start: int) -> int | None:
        """Find the matching #+END_SRC line."""
        for i in range(start, len(lines)):
            if END_PATTERN.match(lines[i]):
                return i
        return None
