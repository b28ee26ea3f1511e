"""Block extractors for the supported markup dialects."""

from .asciidoc import AsciiDocBlockExtractor
from .base import BaseBlockExtractor
from .factory import create_extractor, dialect_for_path, get_extractor, parse_dialect
from .markdown import MarkdownBlockExtractor
from .models import BlockInfo, Dialect, ExtractionResult, Found, NotFound
from .org import OrgBlockExtractor
from .textile import TextileBlockExtractor

__all__ = [
    'AsciiDocBlockExtractor',
    'BaseBlockExtractor',
    'BlockInfo',
    'Dialect',
    'ExtractionResult',
    'Found',
    'MarkdownBlockExtractor',
    'NotFound',
    'OrgBlockExtractor',
    'TextileBlockExtractor',
    'create_extractor',
    'dialect_for_path',
    'get_extractor',
    'parse_dialect',
]
