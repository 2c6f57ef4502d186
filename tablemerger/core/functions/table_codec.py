# tablemerger/core/functions/table_codec.py
"""
Table Text Codec - Markdown pipe table <-> Grid conversion

Main Entry Points:
    TableTextCodec.parse(lines)     → Grid
    TableTextCodec.serialize(grid)  → str

================================================================================
PARSING RULES
================================================================================

parse(lines)
│
├─ blank line                 → ignored
├─ separator row after header → dropped (regenerated on serialize)
└─ content row
    ├─ split on unescaped '|'
    ├─ drop the empty segments outside the outer pipes
    ├─ trim every segment
    └─ pad to header width / reject wider rows

Serialization always writes ``| --- |`` separators: alignment colons from the
source table are not preserved.
================================================================================
"""
import logging
import re
from typing import List, Sequence, Union

from tablemerger.core.constants import (
    CELL_BOUNDARY_PATTERN,
    EMPTY_CELL,
    MIN_TABLE_ROWS,
    SEPARATOR_CELL,
    SEPARATOR_ROW_PATTERN,
)
from tablemerger.core.functions.errors import ErrorReason, ParseError
from tablemerger.core.functions.table_models import Grid

logger = logging.getLogger("table-merger")


class TableTextCodec:
    """
    Parses pipe table lines into a Grid and serializes a Grid back to text.

    The codec keeps no state between calls; one instance can be shared.
    """

    def __init__(self):
        self.logger = logging.getLogger("table-merger")

    def parse(self, lines: Union[str, Sequence[str]]) -> Grid:
        """
        Parse pipe table lines into a Grid.

        Args:
            lines: Table lines, or a single text block containing them

        Returns:
            Grid whose row 0 is the header row

        Raises:
            ParseError: TOO_FEW_ROWS when fewer than two content rows remain,
                MALFORMED_ROW when a row has more cells than the header
        """
        if isinstance(lines, str):
            lines = lines.splitlines()

        rows: List[List[str]] = []
        separator_seen = False
        for line in lines:
            if not line.strip():
                continue
            # Only the line right after the header is a separator; a body row
            # of dash cells is content
            if len(rows) == 1 and not separator_seen and self.is_separator_row(line):
                self.logger.debug(f"Dropping separator row: {line.strip()}")
                separator_seen = True
                continue
            rows.append(self.split_row(line))

        if len(rows) < MIN_TABLE_ROWS:
            raise ParseError(
                f"A table needs a header and at least one body row, got {len(rows)} row(s)",
                ErrorReason.TOO_FEW_ROWS,
            )

        width = len(rows[0])
        for row_idx, row in enumerate(rows):
            if len(row) > width:
                raise ParseError(
                    f"Row {row_idx} has {len(row)} cells but the header has {width}",
                    ErrorReason.MALFORMED_ROW,
                )
            if len(row) < width:
                self.logger.debug(f"Padding row {row_idx} from {len(row)} to {width} cells")
                row.extend([EMPTY_CELL] * (width - len(row)))

        self.logger.debug(f"Parsed table with {len(rows)} rows and {width} columns")
        return rows

    def parse_text(self, text: str) -> Grid:
        """Parse a table given as one text block."""
        return self.parse(text.splitlines())

    def serialize(self, grid: Grid) -> str:
        """
        Serialize a Grid into pipe table text.

        The separator row is regenerated from the header width. Rows shorter
        than the header are padded with empty cells.

        Args:
            grid: Grid whose row 0 is the header row

        Returns:
            Table text without a trailing newline
        """
        if not grid:
            return ""

        width = len(grid[0])
        lines = [self._format_row(grid[0], width)]
        lines.append(self._format_row([SEPARATOR_CELL] * width, width))
        for row in grid[1:]:
            lines.append(self._format_row(row, width))

        return "\n".join(lines)

    @staticmethod
    def is_separator_row(line: str) -> bool:
        """Return True for header separator rows such as ``|---|:---:|``."""
        stripped = line.strip()
        return bool(re.match(SEPARATOR_ROW_PATTERN, stripped)) and "-" in stripped

    @staticmethod
    def split_row(line: str) -> List[str]:
        """
        Split one table line into trimmed cell strings.

        Escaped pipes (``\\|``) stay inside their cell.
        """
        stripped = line.strip()
        segments = re.split(CELL_BOUNDARY_PATTERN, stripped)

        # "| a | b |" splits into ['', ' a ', ' b ', '']
        if len(segments) > 1 and stripped.startswith("|"):
            segments = segments[1:]
        if len(segments) > 1 and segments[-1].strip() == "" and re.search(CELL_BOUNDARY_PATTERN + r'$', stripped):
            segments = segments[:-1]

        return [segment.strip() for segment in segments]

    @staticmethod
    def _format_row(row: Sequence[str], width: int) -> str:
        cells = list(row) + [EMPTY_CELL] * (width - len(row))
        return "| " + " | ".join(cells) + " |"


# Shared stateless instance
DEFAULT_CODEC = TableTextCodec()
