# tablemerger/core/functions/utils.py
"""
Common text utilities for locating tables inside a document.
"""
from tablemerger.core.constants import TABLE_LINE_PREFIX


def is_table_line(line: str) -> bool:
    """A table line starts with '|' once leading whitespace is removed."""
    return line.strip().startswith(TABLE_LINE_PREFIX)
