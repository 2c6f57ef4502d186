# tablemerger/core/functions/region_selector.py
"""
Region Selector - Selection coordinates → merge Rectangle

Main Entry Points:
    RegionSelector.normalize(coordinates)  → Rectangle
    coordinates_from_cursor_range(lines, start, end) → Set[CellCoordinate]

The merge algorithm always works on a rectangle. A selection that is not
contiguous (L-shape, scattered clicks) becomes its bounding rectangle unless
strict mode is enabled, in which case it is rejected.
"""
import logging
import re
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from tablemerger.core.constants import CELL_BOUNDARY_PATTERN, MIN_SELECTION_CELLS
from tablemerger.core.functions.errors import ErrorReason, SelectionError
from tablemerger.core.functions.table_codec import TableTextCodec
from tablemerger.core.functions.table_models import CellCoordinate, Rectangle

logger = logging.getLogger("table-merger")

# (line, ch) editor position
CursorPosition = Tuple[int, int]


class RegionSelector:
    """Normalizes a set of selected cells into a Rectangle."""

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.logger = logging.getLogger("table-merger")

    def normalize(self, coordinates: Iterable[Tuple[int, int]]) -> Rectangle:
        """
        Compute the bounding rectangle of the selected cells.

        Args:
            coordinates: Selected (row, col) pairs

        Returns:
            Rectangle spanning the min/max row and column of the selection

        Raises:
            SelectionError: EMPTY when fewer than two cells are selected,
                NOT_RECTANGULAR in strict mode when the selection does not
                fill its bounding rectangle
        """
        cells = {CellCoordinate(int(row), int(col)) for row, col in coordinates}
        if len(cells) < MIN_SELECTION_CELLS:
            raise SelectionError(
                f"Select at least {MIN_SELECTION_CELLS} cells to merge",
                ErrorReason.EMPTY,
            )

        rect = Rectangle(
            min_row=min(c.row for c in cells),
            max_row=max(c.row for c in cells),
            min_col=min(c.col for c in cells),
            max_col=max(c.col for c in cells),
        )

        if len(cells) != rect.cell_count:
            if self.strict:
                raise SelectionError(
                    f"Selection of {len(cells)} cells does not fill its "
                    f"{rect.row_count}x{rect.col_count} bounding rectangle",
                    ErrorReason.NOT_RECTANGULAR,
                )
            self.logger.debug(
                f"Selection of {len(cells)} cells widened to {rect.cell_count} cell bounding rectangle"
            )

        return rect


def column_index_at(line: str, ch: int) -> int:
    """
    Return the column under character offset ``ch`` of a table line.

    Offsets on or before the first pipe map to column 0; offsets past the
    last cell map to the last column.
    """
    boundaries = [m.start() for m in re.finditer(CELL_BOUNDARY_PATTERN, line)]
    stripped = line.lstrip()
    leading_pipe = stripped.startswith("|")

    segment = 0
    for pos in boundaries:
        if ch <= pos:
            break
        segment += 1

    col = segment - 1 if leading_pipe else segment
    cell_count = len(TableTextCodec.split_row(line))
    return max(0, min(col, cell_count - 1))


def coordinates_from_cursor_range(
    lines: Sequence[str],
    start: CursorPosition,
    end: CursorPosition,
    first_line: int = 0,
) -> Set[CellCoordinate]:
    """
    Map an editor selection inside a table block to grid coordinates.

    Every cell of the box spanned by the two positions is returned. The
    separator row has no grid row and is skipped.

    Args:
        lines: Lines of the table block
        start: (line, ch) where the selection starts
        end: (line, ch) where the selection ends
        first_line: Document line number of ``lines[0]``

    Returns:
        Set of CellCoordinate
    """
    row_of_line = _grid_rows_by_line(lines)

    (start_line, start_ch), (end_line, end_ch) = sorted([start, end])
    start_idx = start_line - first_line
    end_idx = end_line - first_line

    start_col = column_index_at(lines[start_idx], start_ch)
    end_col = column_index_at(lines[end_idx], end_ch)
    min_col, max_col = sorted((start_col, end_col))

    coordinates: Set[CellCoordinate] = set()
    for idx in range(start_idx, end_idx + 1):
        row = row_of_line[idx]
        if row is None:
            continue
        for col in range(min_col, max_col + 1):
            coordinates.add(CellCoordinate(row, col))

    logger.debug(f"Cursor range {start}..{end} selects {len(coordinates)} cells")
    return coordinates


def _grid_rows_by_line(lines: Sequence[str]) -> List[Optional[int]]:
    """Grid row index of every block line (None for the separator and blank lines)."""
    rows: List[Optional[int]] = []
    row = 0
    separator_seen = False
    for line in lines:
        if not line.strip():
            rows.append(None)
            continue
        if row == 1 and not separator_seen and TableTextCodec.is_separator_row(line):
            separator_seen = True
            rows.append(None)
            continue
        rows.append(row)
        row += 1
    return rows
