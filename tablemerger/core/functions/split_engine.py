# tablemerger/core/functions/split_engine.py
"""
Split Engine - inverse of a merge

The original per-cell values are gone after a merge, so a split copies the
anchor text into every formerly merged cell. The user edits them afterwards.
"""
import logging
from typing import Optional, Tuple

from tablemerger.core.functions.errors import ErrorReason, SplitError
from tablemerger.core.functions.merge_region_tracker import MergeRegionTracker
from tablemerger.core.functions.table_models import Grid, copy_grid, is_blank_cell

logger = logging.getLogger("table-merger")


class SplitEngine:
    """Turns a merge region back into independent cells."""

    def __init__(self, tracker: Optional[MergeRegionTracker] = None):
        self.tracker = tracker or MergeRegionTracker()
        self.logger = logging.getLogger("table-merger")

    def split(self, grid: Grid, anchor: Tuple[int, int]) -> Grid:
        """
        Split the region anchored at ``anchor``.

        Args:
            grid: Source grid (not modified)
            anchor: (row, col) of the region's top-left cell

        Returns:
            New grid where every blank cell of the region holds the anchor text

        Raises:
            SplitError: OUT_OF_BOUNDS when the anchor is outside the grid,
                NOT_A_MERGE_ANCHOR when the anchor cell is blank
        """
        row, col = anchor
        if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
            raise SplitError(
                f"Cell ({row}, {col}) is outside the table",
                ErrorReason.OUT_OF_BOUNDS,
            )

        content = grid[row][col]
        if is_blank_cell(content):
            raise SplitError(
                f"Cell ({row}, {col}) is empty and cannot be a merge anchor",
                ErrorReason.NOT_A_MERGE_ANCHOR,
            )

        region = self.tracker.region_at(grid, row, col)
        result = copy_grid(grid)
        if not region.is_merged:
            self.logger.debug(f"Cell ({row}, {col}) is not merged, nothing to split")
            return result

        filled = 0
        for r, c in region.to_rectangle().coordinates():
            if is_blank_cell(result[r][c]):
                result[r][c] = content
                filled += 1

        self.logger.debug(
            f"Split {region.rowspan}x{region.colspan} region at ({row}, {col}), filled {filled} cell(s)"
        )
        return result
