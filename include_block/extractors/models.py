"""Data models shared by the block extractors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union


class Dialect(Enum):
    """Supported lightweight-markup dialects."""
    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"
    ORG = "org"
    TEXTILE = "textile"

    def __str__(self) -> str:
        return self.value


class BlockInfo(NamedTuple):
    """Information about a block opener."""
    names: tuple[str, ...]  # Every name the block answers to
    language: str | None
    start_line: int  # 0-based index of the opener line


@dataclass(frozen=True)
class Found:
    """The requested block, as the lines between its delimiters.

    ``start_line`` is the 1-based line number of the block's opener. It is
    informational and ignored when comparing results.
    """
    lines: tuple[str, ...] = ()
    start_line: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'lines', tuple(self.lines))

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """No complete block with the requested name exists."""

    def __bool__(self) -> bool:
        return False


ExtractionResult = Union[Found, NotFound]
