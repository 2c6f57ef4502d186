# tablemerger/core/functions/merge_engine.py
"""
Merge Engine - Rectangular cell merge over a Grid

merge(grid, rect)
│
├─ bounds check                    → MergeError(OUT_OF_BOUNDS)
├─ visit rect row-major            → collect non-blank trimmed contents
├─ anchor (min_row, min_col)       ← contents joined with join_separator
└─ every other cell of rect        ← "" (or "^^" below the anchor in CARET style)

Markdown has no merged cells: a merge is encoded as one anchor cell followed
by blank cells that the MergeRegionTracker later reads back as spans.
"""
import logging
from typing import Optional

from tablemerger.core.constants import CONTINUATION_MARKER, EMPTY_CELL, ContinuationStyle
from tablemerger.core.functions.errors import ErrorReason, MergeError
from tablemerger.core.functions.merge_config import DEFAULT_MERGE_CONFIG, TableMergeConfig
from tablemerger.core.functions.table_models import Grid, Rectangle, copy_grid, is_blank_cell

logger = logging.getLogger("table-merger")


class MergeEngine:
    """Applies a merge over a rectangle and returns the new grid."""

    def __init__(self, config: Optional[TableMergeConfig] = None):
        self.config = config or DEFAULT_MERGE_CONFIG
        self.logger = logging.getLogger("table-merger")

    def merge(self, grid: Grid, rect: Rectangle) -> Grid:
        """
        Merge every cell of ``rect`` into its top-left cell.

        Args:
            grid: Source grid (not modified)
            rect: Region to merge

        Returns:
            New grid with the merged content in the anchor cell

        Raises:
            MergeError: OUT_OF_BOUNDS when the rectangle leaves the grid
        """
        self._check_bounds(grid, rect)

        fragments = []
        for row, col in rect.coordinates():
            text = grid[row][col].strip()
            if not is_blank_cell(text):
                fragments.append(text)

        merged = copy_grid(grid)
        for row, col in rect.coordinates():
            merged[row][col] = self._placeholder(rect, row, col)
        merged[rect.min_row][rect.min_col] = self.config.join_separator.join(fragments)

        self.logger.debug(
            f"Merged {rect.cell_count} cells at ({rect.min_row}, {rect.min_col}) "
            f"from {len(fragments)} non-empty fragment(s)"
        )
        return merged

    def _placeholder(self, rect: Rectangle, row: int, col: int) -> str:
        if (self.config.continuation_style == ContinuationStyle.CARET
                and row > rect.min_row and col == rect.min_col):
            return CONTINUATION_MARKER
        return EMPTY_CELL

    @staticmethod
    def _check_bounds(grid: Grid, rect: Rectangle):
        if rect.min_row < 0 or rect.min_col < 0 or rect.max_row >= len(grid):
            raise MergeError(
                f"Rows {rect.min_row}..{rect.max_row} are outside a table of {len(grid)} rows",
                ErrorReason.OUT_OF_BOUNDS,
            )
        for row in range(rect.min_row, rect.max_row + 1):
            if rect.max_col >= len(grid[row]):
                raise MergeError(
                    f"Column {rect.max_col} is outside row {row} of {len(grid[row])} cells",
                    ErrorReason.OUT_OF_BOUNDS,
                )
