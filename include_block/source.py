"""Locate and read source documents."""

import errno
import inspect
import logging
import os
from pathlib import Path

from .config import get_settings
from .exceptions import PathResolutionError, SourceDecodeError, SourceNotFoundError

logger = logging.getLogger(__name__)


def caller_file(stacklevel: int = 1) -> Path | None:
    """
    Get the file of a function further up the call stack.

    Args:
        stacklevel: 1 is the caller of the function calling ``caller_file``

    Returns:
        The caller's source file, or None for interactive code
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None

        filename = frame.f_code.co_filename
        # <stdin>, <string>, <frozen ...> and the like have no directory
        if filename.startswith('<'):
            return None
        return Path(filename)
    finally:
        del frame


def resolve_path(
    path: str | os.PathLike,
    relative: bool = False,
    caller: str | os.PathLike | None = None,
    root: str | os.PathLike | None = None,
) -> Path:
    """
    Resolve a document path.

    Root-relative paths (the default) resolve against ``root``, the configured
    ``INCLUDE_ROOT`` or the current directory. Caller-relative paths resolve
    against the directory containing ``caller``. Absolute paths are returned
    as given.

    Raises:
        PathResolutionError: If ``relative`` is set without a caller
    """
    path = Path(path)
    if path.is_absolute():
        return path

    if relative:
        if caller is None:
            raise PathResolutionError(f"cannot resolve '{path}' relative to an unknown source file")
        base = Path(caller).parent
    elif root is not None:
        base = Path(root)
    else:
        base = get_settings().include.root_path

    resolved = base / path
    logger.debug(f"Resolved {path} to {resolved}")
    return resolved


def split_lines(text: str) -> list[str]:
    """Split text into lines without line terminators."""
    if text.startswith('\ufeff'):
        text = text[1:]

    lines = text.replace('\r\n', '\n').replace('\r', '\n').split('\n')
    # A final terminator does not start another line
    if lines and lines[-1] == '':
        lines.pop()
    return lines


def read_lines(path: str | os.PathLike, encoding: str | None = None) -> list[str]:
    """
    Read a whole document as lines without line terminators.

    Raises:
        SourceNotFoundError: If the file does not exist
        SourceDecodeError: If the file is not valid in ``encoding``
    """
    encoding = encoding or get_settings().include.encoding
    try:
        text = Path(path).read_text(encoding=encoding)
    except FileNotFoundError:
        raise SourceNotFoundError(errno.ENOENT, "No such file or directory", str(path)) from None
    except UnicodeDecodeError as e:
        raise SourceDecodeError(f"cannot decode '{path}' as {encoding}: {e.reason}") from e
    except LookupError:
        raise SourceDecodeError(f"unknown encoding '{encoding}'") from None

    return split_lines(text)
