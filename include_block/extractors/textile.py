"""Textile block code extractor."""

import logging
import re
from collections.abc import Sequence
from typing import NamedTuple

from .base import BaseBlockExtractor
from .models import BlockInfo, Dialect, ExtractionResult, Found, NotFound
from .utils import trim_trailing_blank

logger = logging.getLogger(__name__)

# Block signatures such as "p. ", "h1>. ", "table(myclass). " or "bc(rust#id).. "
SIGNATURE_PATTERN = re.compile(
    r'^(?P<tag>bc|bq|notextile|pre|p|h[1-6]|table|fn\d+|###)'
    r'(?P<attributes>(?:\([^)]*\)|\[[^\]]*\]|\{[^}]*\}|[<>=()])*)'
    r'(?P<period>\.\.?)'
    r'(?:\s(?P<content>.*))?$'
)
CLASS_PATTERN = re.compile(r'\(([^()]*)\)')
LANGUAGE_PATTERN = re.compile(r'\[([^\]]+)\]')


class Signature(NamedTuple):
    """A parsed Textile block signature."""
    tag: str
    attributes: str
    extended: bool
    content: str


class TextileBlockExtractor(BaseBlockExtractor):
    """Extract named ``bc.`` blocks from Textile.

    The name is the ``#id`` in the class attribute. Code starts on the
    signature line::

        bc(rust#example). let x = 1;

    ``bc.`` blocks end at the first blank line; extended ``bc..`` blocks run
    until the next block signature.
    """

    dialect = Dialect.TEXTILE

    def collect(self, lines: Sequence[str], name: str, language: str | None = None) -> ExtractionResult:
        """Collect the first block code section named ``name``."""
        i = 0

        while i < len(lines):
            signature = self.parse_signature(lines[i])
            if signature is None or signature.tag != 'bc':
                i += 1
                continue

            block = self._block_info(signature, i)
            end = self._find_block_end(lines, i + 1, signature.extended)

            if self.is_match(block, name, language):
                body = [signature.content] if signature.content.strip() else []
                body.extend(lines[i + 1:end])
                if signature.extended:
                    body = trim_trailing_blank(body)
                logger.debug(f"Found block code '{name}' at lines {i + 1}-{end}")
                return Found(body, start_line=block.start_line + 1)

            i = end

        return NotFound()

    def parse_signature(self, line: str) -> Signature | None:
        """Parse a block signature at the start of a line."""
        match = SIGNATURE_PATTERN.match(line.lstrip())
        if not match:
            return None

        return Signature(
            tag=match.group('tag'),
            attributes=match.group('attributes'),
            extended=match.group('period') == '..',
            content=match.group('content') or ''
        )

    def _block_info(self, signature: Signature, line_number: int) -> BlockInfo:
        """Read the id and language from block attributes."""
        block_id = None
        classes = []

        match = CLASS_PATTERN.search(signature.attributes)
        if match:
            class_text, _, block_id = match.group(1).partition('#')
            classes = class_text.split()

        match = LANGUAGE_PATTERN.search(signature.attributes)
        if match:
            language = match.group(1).strip()
        else:
            language = classes[0] if classes else None

        return BlockInfo(
            names=(block_id.strip(),) if block_id and block_id.strip() else (),
            language=language,
            start_line=line_number
        )

    def _find_block_end(self, lines: Sequence[str], start: int, extended: bool) -> int:
        """Find the end (exclusive) of a block starting at ``start``."""
        for i in range(start, len(lines)):
            if extended:
                if self.parse_signature(lines[i]):
                    return i
            elif not lines[i].strip():
                return i

        # Textile blocks have no closing marker, so the document end closes them
        return len(lines)
