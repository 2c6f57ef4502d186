# tablemerger/core/functions/merge_region_tracker.py
"""
Merge Region Tracker - rowspan/colspan reconstruction from blank cells

Pipe tables have no merged cells, so a merge is only visible as a pattern of
blank cells. The tracker reads that pattern back into MergeRegion objects for
a rendering layer. It works on a copy and never changes the grid that the
merge and split engines operate on.

================================================================================
ADJACENCY RULES (row by row, left to right)
================================================================================

cell already claimed          → skipped
non-blank cell                → new region anchored here
'^^...' cell                  → continues the region above
'' cell                       → continues the region on its left when that
                                region starts on this row, else the region above
anything else                 → standalone blank cell

A region above is only continued when every cell of its column range on the
current row is blank, so regions always stay rectangular.
================================================================================
"""
import logging
from typing import List, Optional

from tablemerger.core.constants import EMPTY_CELL
from tablemerger.core.functions.table_models import (
    Grid,
    MergeRegion,
    TableCell,
    TableData,
    copy_grid,
    grid_width,
    is_blank_cell,
    is_continuation_cell,
)

logger = logging.getLogger("table-merger")

OwnerMap = List[List[Optional[MergeRegion]]]


class MergeRegionTracker:
    """Derives merge regions from a grid without modifying it."""

    def __init__(self):
        self.logger = logging.getLogger("table-merger")

    def detect_regions(self, grid: Grid) -> List[MergeRegion]:
        """
        Reconstruct every region of the grid.

        Each grid cell belongs to exactly one returned region.

        Args:
            grid: Parsed grid (not modified)

        Returns:
            Regions in row-major order of their anchors
        """
        cells = copy_grid(grid)
        width = grid_width(cells)
        for row in cells:
            row.extend([EMPTY_CELL] * (width - len(row)))

        owner: OwnerMap = [[None] * width for _ in cells]
        regions: List[MergeRegion] = []

        for r, row in enumerate(cells):
            for c in range(width):
                if owner[r][c] is not None:
                    continue

                cell = row[c]
                if not is_blank_cell(cell):
                    region = MergeRegion(anchor_row=r, anchor_col=c, content=cell)
                    regions.append(region)
                    owner[r][c] = region
                    continue

                left = owner[r][c - 1] if c > 0 else None
                if cell == EMPTY_CELL and left is not None and left.content and left.anchor_row == r:
                    left.colspan += 1
                    owner[r][c] = left
                    continue

                if self._extend_down(cells, owner, r, c):
                    continue

                region = MergeRegion(anchor_row=r, anchor_col=c, content=EMPTY_CELL)
                regions.append(region)
                owner[r][c] = region

        merged = sum(1 for region in regions if region.is_merged)
        self.logger.debug(f"Detected {len(regions)} regions ({merged} merged) in {len(cells)} rows")
        return regions

    def region_at(self, grid: Grid, row: int, col: int) -> MergeRegion:
        """
        Walk the region anchored at (row, col).

        Blank cells to the right of the anchor extend the colspan; rows below
        extend the rowspan while the anchor column holds a blank or '^^' cell
        and the rest of the span is blank. Stops at the first non-blank cell.
        """
        cells = grid
        width = len(cells[row])
        region = MergeRegion(anchor_row=row, anchor_col=col, content=cells[row][col])

        c = col + 1
        while c < width and cells[row][c] == EMPTY_CELL:
            region.colspan += 1
            c += 1

        r = row + 1
        while r < len(cells) and self._row_is_blank(cells[r], col, col + region.colspan):
            region.rowspan += 1
            r += 1

        return region

    def build_table_data(self, grid: Grid) -> TableData:
        """
        Build the presentation model: covered cells removed, anchors spanned.

        Args:
            grid: Parsed grid (not modified)

        Returns:
            TableData for the TableProcessor
        """
        regions = self.detect_regions(grid)
        rows: List[List[TableCell]] = [[] for _ in grid]
        for region in regions:
            rows[region.anchor_row].append(TableCell(
                content=region.content,
                row_span=region.rowspan,
                col_span=region.colspan,
                is_header=region.anchor_row == 0,
                row_index=region.anchor_row,
                col_index=region.anchor_col,
            ))

        return TableData(
            rows=rows,
            num_rows=len(grid),
            num_cols=grid_width(grid),
            has_header=True,
            metadata={"merged_regions": sum(1 for region in regions if region.is_merged)},
        )

    def _extend_down(self, cells: Grid, owner: OwnerMap, r: int, c: int) -> bool:
        """Claim row ``r`` for the region above (r, c) when its whole span is blank."""
        if r == 0:
            return False

        above = owner[r - 1][c]
        if above is None or not above.content:
            return False

        start = above.anchor_col
        end = above.anchor_col + above.colspan
        if any(owner[r][col] is not None for col in range(start, end)):
            return False
        if not self._row_is_blank(cells[r], start, end):
            return False

        above.rowspan += 1
        for col in range(start, end):
            owner[r][col] = above
        return True

    @staticmethod
    def _row_is_blank(row: List[str], start: int, end: int) -> bool:
        """True if row[start:end] is blank, with '^^' only allowed at ``start``."""
        if end > len(row):
            return False
        for col in range(start, end):
            cell = row[col]
            if cell == EMPTY_CELL:
                continue
            if is_continuation_cell(cell) and col == start:
                continue
            return False
        return True
