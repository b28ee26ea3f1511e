"""include-block constants and version information."""

__version__ = "0.1.0"
__app_name__ = "include-block"

# File type configuration - single source of truth
SUPPORTED_FILE_TYPES = {
    'markdown': {
        'extensions': ('.md', '.markdown', '.mdx', '.mdown', '.mkd', '.mdwn'),
        'aliases': ('md',),
        'description': 'Markdown fenced code blocks'
    },
    'asciidoc': {
        'extensions': ('.adoc', '.asciidoc', '.asc', '.ad'),
        'aliases': ('adoc', 'asc'),
        'description': 'AsciiDoc delimited blocks'
    },
    'org': {
        'extensions': ('.org',),
        'aliases': ('orgmode', 'org-mode'),
        'description': 'Org-mode source blocks'
    },
    'textile': {
        'extensions': ('.textile',),
        'aliases': (),
        'description': 'Textile bc. code blocks'
    },
}

# Lines added around extracted content in scope mode
SCOPE_OPEN = "{"
SCOPE_CLOSE = "}"


def get_dialect_for_extension(file_path):
    """Get the dialect name for a given file extension."""
    if isinstance(file_path, str):
        file_path_lower = file_path.lower()
        for dialect, file_type in SUPPORTED_FILE_TYPES.items():
            for ext in file_type['extensions']:
                if file_path_lower.endswith(ext):
                    return dialect
    return None


def get_dialect_for_alias(value):
    """Get the dialect name for a dialect name or one of its aliases."""
    value = value.strip().lower()
    for dialect, file_type in SUPPORTED_FILE_TYPES.items():
        if value == dialect or value in file_type['aliases']:
            return dialect
    return None

