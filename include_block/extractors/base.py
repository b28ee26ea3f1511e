"""Abstract base class for all block extractors."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import BlockInfo, Dialect, ExtractionResult


class BaseBlockExtractor(ABC):
    """Abstract base class for all block extractors."""

    dialect: Dialect

    @abstractmethod
    def collect(self, lines: Sequence[str], name: str, language: str | None = None) -> ExtractionResult:
        """
        Collect the lines of the first block declared with ``name``.

        Args:
            lines: Document lines with line terminators stripped
            name: Name of the block to collect
            language: Optional language tag the block must also declare

        Returns:
            Found with the block's inner lines, or NotFound
        """
        pass

    def is_match(self, block: BlockInfo, name: str, language: str | None = None) -> bool:
        """
        Determine if a block opener selects the requested block.

        Names compare verbatim. The language filter only applies when given.
        """
        if name not in block.names:
            return False
        if language is not None and block.language != language:
            return False
        return True
