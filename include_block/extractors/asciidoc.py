"""AsciiDoc delimited block extractor."""

import logging
import re
from collections.abc import Sequence

from .base import BaseBlockExtractor
from .models import BlockInfo, Dialect, ExtractionResult, Found, NotFound
from .utils import split_attributes, unquote

logger = logging.getLogger(__name__)

# Listing, literal, example, sidebar, quote, passthrough and comment delimiters
DELIMITER_PATTERN = re.compile(r'^([-.=*_+/])\1{3,}$')
ANCHOR_PATTERN = re.compile(r'^\[\[(?P<id>[^\],\s]+)(?:,[^\]]*)?\]\]$')
ATTRIBUTE_LIST_PATTERN = re.compile(r'^\[(?!\[)(?P<attributes>.*)\]$')
TITLE_PATTERN = re.compile(r'^\.[^.\s]')
ID_SHORTHAND_PATTERN = re.compile(r'#([^.%#]+)')
SECTION_TITLE_PATTERN = re.compile(r'^=+\s')
STYLE_PATTERN = re.compile(r'^[^#.%]*')


class AsciiDocBlockExtractor(BaseBlockExtractor):
    """Extract named blocks from AsciiDoc.

    A block is named by the attribute list directly above its delimiter,
    either with an ``id`` attribute or the ``#id`` shorthand::

        [source,rust,id="example"]
        ----
        let x = 1;
        ----

    A block anchor (``[[example]]``) above the attribute list is used when the
    attribute list carries no id.
    """

    dialect = Dialect.ASCIIDOC

    def collect(self, lines: Sequence[str], name: str, language: str | None = None) -> ExtractionResult:
        """Collect the first delimited or paragraph block named ``name``."""
        metadata: list[str] = []
        i = 0

        while i < len(lines):
            line = lines[i].rstrip()

            if DELIMITER_PATTERN.match(line):
                block = self._block_info(metadata, i)
                end = self._find_closing_delimiter(lines, i + 1, line)
                if end is None:
                    logger.debug(f"Unclosed delimited block at line {i + 1}")
                    return NotFound()

                if self.is_match(block, name, language):
                    logger.debug(f"Found block '{name}' at lines {i + 1}-{end + 1}")
                    return Found(lines[i + 1:end], start_line=block.start_line + 1)

                metadata = []
                i = end + 1
                continue

            if self._is_metadata(line):
                metadata.append(line)
                i += 1
                continue

            if metadata and line.strip() and self._opens_paragraph(metadata, line):
                block = self._block_info(metadata, i)
                if self.is_match(block, name, language):
                    end = self._find_paragraph_end(lines, i)
                    logger.debug(f"Found paragraph block '{name}' at lines {i + 1}-{end}")
                    return Found(lines[i:end], start_line=block.start_line + 1)

            metadata = []
            i += 1

        return NotFound()

    def _is_metadata(self, line: str) -> bool:
        """Check for a block attribute list, anchor or title line."""
        return bool(
            ANCHOR_PATTERN.match(line)
            or ATTRIBUTE_LIST_PATTERN.match(line)
            or TITLE_PATTERN.match(line)
        )

    def _block_info(self, metadata: list[str], line_number: int) -> BlockInfo:
        """Read the name and language from the metadata above a block."""
        block_id = None
        language = None

        attributes = self._nearest_attributes(metadata)
        if attributes is not None:
            block_id, language, _ = self._parse_attributes(attributes)

        if block_id is None:
            for line in reversed(metadata):
                match = ANCHOR_PATTERN.match(line)
                if match:
                    block_id = match.group('id')
                    break

        return BlockInfo(
            names=(block_id,) if block_id else (),
            language=language,
            start_line=line_number
        )

    def _opens_paragraph(self, metadata: list[str], line: str) -> bool:
        """Check whether ``line`` starts a source paragraph under ``metadata``."""
        if SECTION_TITLE_PATTERN.match(line):
            return False

        attributes = self._nearest_attributes(metadata)
        if attributes is None:
            return False

        _, language, style = self._parse_attributes(attributes)
        return style == 'source' or (style == '' and language is not None)

    def _nearest_attributes(self, metadata: list[str]) -> str | None:
        """Return the text of the attribute list closest to the block."""
        for line in reversed(metadata):
            match = ATTRIBUTE_LIST_PATTERN.match(line)
            if match:
                return match.group('attributes')
        return None

    def _parse_attributes(self, text: str) -> tuple[str | None, str | None, str | None]:
        """Parse an attribute list into its id, source language and block style."""
        block_id = None
        language = None
        style = None
        positional = []

        for entry in split_attributes(text):
            if '=' in entry and entry[:1] not in '"\'':
                key, value = entry.split('=', 1)
                key = key.strip()
                if key == 'id':
                    block_id = unquote(value)
                elif key == 'language':
                    language = unquote(value)
                continue
            positional.append(entry)

        if positional:
            style = STYLE_PATTERN.match(positional[0]).group().strip()
            # Style shorthand, e.g. [source#example,rust] or [#example]
            match = ID_SHORTHAND_PATTERN.search(positional[0])
            if match and block_id is None:
                block_id = match.group(1)

        if len(positional) > 1 and positional[1] and language is None:
            language = unquote(positional[1])

        return block_id, language, style

    def _find_closing_delimiter(self, lines: Sequence[str], start: int, delimiter: str) -> int | None:
        """Find the line repeating ``delimiter`` exactly, from ``start``."""
        for i in range(start, len(lines)):
            if lines[i].rstrip() == delimiter:
                return i
        return None

    def _find_paragraph_end(self, lines: Sequence[str], start: int) -> int:
        """Find the end (exclusive) of a paragraph block."""
        i = start
        while i < len(lines):
            line = lines[i].rstrip()
            if not line.strip() or DELIMITER_PATTERN.match(line):
                break
            i += 1
        return i
