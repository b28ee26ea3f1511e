"""Shared utilities for block extraction."""


def leading_whitespace(line: str) -> int:
    """Count the whitespace characters a line starts with."""
    return len(line) - len(line.lstrip())


def strip_indent(line: str, indent: int) -> str:
    """Remove up to ``indent`` leading whitespace characters from a line."""
    if indent <= 0:
        return line
    remove = min(indent, leading_whitespace(line))
    return line[remove:]


def count_run(text: str, char: str) -> int:
    """Count how many times ``char`` repeats at the start of ``text``."""
    count = 0
    for c in text:
        if c != char:
            break
        count += 1
    return count


def trim_trailing_blank(lines: list[str]) -> list[str]:
    """Drop blank lines from the end of a list of lines."""
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    return lines[:end]


def split_attributes(text: str) -> list[str]:
    """
    Split a comma-separated attribute list, honouring quoted values.

    Empty positions are kept so that ``",rust"`` yields ``['', 'rust']``.
    Whitespace around each entry is removed; quotes are left in place.
    """
    entries = []
    current = []
    quote = None

    for c in text:
        if quote:
            current.append(c)
            if c == quote:
                quote = None
        elif c in '"\'':
            quote = c
            current.append(c)
        elif c == ',':
            entries.append(''.join(current).strip())
            current = []
        else:
            current.append(c)

    entries.append(''.join(current).strip())
    return entries


def unquote(value: str) -> str:
    """Remove one pair of matching surrounding quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in '"\'':
        return value[1:-1]
    return value
