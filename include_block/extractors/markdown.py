"""Markdown fenced code block extractor."""

import logging
import re
from collections.abc import Sequence
from typing import NamedTuple

from .base import BaseBlockExtractor
from .models import BlockInfo, Dialect, ExtractionResult, Found, NotFound
from .utils import count_run, leading_whitespace, strip_indent

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r'^(?P<indent>\s*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$')


class Fence(NamedTuple):
    """An opening code fence."""
    char: str
    length: int
    indent: int
    info: str


class MarkdownBlockExtractor(BaseBlockExtractor):
    """Extract named code fences from Markdown.

    The block name is one of the words following the language tag in the
    fence's info string::

        ```rust example
        let x = 1;
        ```
    """

    dialect = Dialect.MARKDOWN

    def collect(self, lines: Sequence[str], name: str, language: str | None = None) -> ExtractionResult:
        """Collect the first fenced block whose info string names ``name``."""
        i = 0

        while i < len(lines):
            fence = self._parse_fence(lines[i])
            if fence is None:
                i += 1
                continue

            block = self._block_info(fence, i)
            end = self._find_closing_fence(lines, i + 1, fence)

            if end is None:
                # An unclosed fence swallows the rest of the document
                logger.debug(f"Unclosed code fence at line {i + 1}")
                return NotFound()

            if self.is_match(block, name, language):
                logger.debug(f"Found code fence '{name}' at lines {i + 1}-{end + 1}")
                return Found(
                    [strip_indent(line, fence.indent) for line in lines[i + 1:end]],
                    start_line=block.start_line + 1,
                )

            # Skip the whole block, including any fences nested in it
            i = end + 1

        return NotFound()

    def _parse_fence(self, line: str) -> Fence | None:
        """Parse an opening fence line."""
        match = FENCE_PATTERN.match(line)
        if not match:
            return None

        fence = match.group('fence')
        info = match.group('info')

        # Backtick fences cannot carry backticks in their info string
        if fence[0] == '`' and '`' in info:
            return None

        return Fence(
            char=fence[0],
            length=len(fence),
            indent=len(match.group('indent')),
            info=info.strip()
        )

    def _block_info(self, fence: Fence, line_number: int) -> BlockInfo:
        """Split the info string into a language tag and attribute words."""
        words = fence.info.split()
        return BlockInfo(
            names=tuple(words[1:]),
            language=words[0] if words else None,
            start_line=line_number
        )

    def _find_closing_fence(self, lines: Sequence[str], start: int, fence: Fence) -> int | None:
        """Find the line closing ``fence``, searching from ``start``."""
        for i in range(start, len(lines)):
            line = lines[i]
            if leading_whitespace(line) != fence.indent:
                continue

            stripped = line.strip()
            run = count_run(stripped, fence.char)
            if run >= fence.length and run == len(stripped):
                return i

        return None
