# tablemerger/core/constants.py
"""
Table Merger Constants - patterns, markers and enums shared by the merge pipeline.

This module defines every pattern and marker used when reading and writing
Markdown pipe tables.
"""
import logging
from enum import Enum

logger = logging.getLogger("table-merger")


# ============================================================================
# Pipe table patterns
# ============================================================================

# Header separator row: only pipes, whitespace, dashes and alignment colons
SEPARATOR_ROW_PATTERN = r'^[|\s\-:]+$'

# Cell boundary: a pipe that is not escaped with a backslash
CELL_BOUNDARY_PATTERN = r'(?<!\\)\|'

# A table line starts with a pipe once leading whitespace is removed
TABLE_LINE_PREFIX = "|"


# ============================================================================
# Merge markers
# ============================================================================

# Vertical continuation marker (Table Extended / multimd syntax)
CONTINUATION_MARKER = "^^"

# Merged-away cell
EMPTY_CELL = ""

# Separator cell written on serialize (alignment is not preserved)
SEPARATOR_CELL = "---"

# Minimum content lines of a table: header plus one body row
MIN_TABLE_ROWS = 2

# A merge needs at least two cells
MIN_SELECTION_CELLS = 2


class ContinuationStyle(Enum):
    """How the vertical part of a merge is written back into the table."""
    BLANK = "blank"
    CARET = "caret"
