# tablemerger/core/functions/table_models.py
"""
Table Models - Data structures shared by the merge pipeline

Module Components:
- Grid: Row-major list of cell strings (row 0 is the header)
- CellCoordinate: (row, col) position of a single cell
- Rectangle: Inclusive bounding box used as the unit of merge
- MergeRegion: Derived anchor + span information for one visual cell
- TableCell / TableData: Presentation model handed to the TableProcessor

Usage Example:
    from tablemerger.core.functions.table_models import Rectangle

    rect = Rectangle(min_row=1, max_row=1, min_col=0, max_col=1)
    for coord in rect.coordinates():
        print(coord.row, coord.col)
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, NamedTuple

from tablemerger.core.constants import CONTINUATION_MARKER

logger = logging.getLogger("table-merger")

Grid = List[List[str]]


class CellCoordinate(NamedTuple):
    """Position of a cell in a Grid."""
    row: int
    col: int


@dataclass(frozen=True)
class Rectangle:
    """Inclusive rectangle of grid cells.

    Attributes:
        min_row: Top row
        max_row: Bottom row
        min_col: Left column
        max_col: Right column
    """
    min_row: int
    max_row: int
    min_col: int
    max_col: int

    def __post_init__(self):
        if self.min_row > self.max_row or self.min_col > self.max_col:
            raise ValueError(
                f"Invalid rectangle: rows {self.min_row}..{self.max_row}, "
                f"cols {self.min_col}..{self.max_col}"
            )

    @property
    def row_count(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def col_count(self) -> int:
        return self.max_col - self.min_col + 1

    @property
    def cell_count(self) -> int:
        return self.row_count * self.col_count

    @property
    def anchor(self) -> CellCoordinate:
        """Top-left cell of the rectangle."""
        return CellCoordinate(self.min_row, self.min_col)

    def contains(self, row: int, col: int) -> bool:
        return self.min_row <= row <= self.max_row and self.min_col <= col <= self.max_col

    def coordinates(self) -> Iterator[CellCoordinate]:
        """Yield every cell in row-major order (top row first, left to right)."""
        for row in range(self.min_row, self.max_row + 1):
            for col in range(self.min_col, self.max_col + 1):
                yield CellCoordinate(row, col)


@dataclass
class MergeRegion:
    """A set of grid cells presented as one visual cell.

    Not stored in the text format; reconstructed from the pattern of blank
    cells by the MergeRegionTracker.

    Attributes:
        anchor_row: Row of the top-left (anchor) cell
        anchor_col: Column of the anchor cell
        rowspan: Number of rows covered
        colspan: Number of columns covered
        content: Text of the anchor cell
    """
    anchor_row: int
    anchor_col: int
    rowspan: int = 1
    colspan: int = 1
    content: str = ""

    @property
    def is_merged(self) -> bool:
        return self.rowspan > 1 or self.colspan > 1

    def covers(self, row: int, col: int) -> bool:
        return (self.anchor_row <= row < self.anchor_row + self.rowspan
                and self.anchor_col <= col < self.anchor_col + self.colspan)

    def to_rectangle(self) -> Rectangle:
        return Rectangle(
            min_row=self.anchor_row,
            max_row=self.anchor_row + self.rowspan - 1,
            min_col=self.anchor_col,
            max_col=self.anchor_col + self.colspan - 1,
        )


@dataclass
class TableCell:
    """Represents a single rendered table cell.

    Attributes:
        content: Cell content (text)
        row_span: Number of rows this cell spans
        col_span: Number of columns this cell spans
        is_header: Whether this cell is a header cell
        row_index: Row position in the table
        col_index: Column position in the table
    """
    content: str = ""
    row_span: int = 1
    col_span: int = 1
    is_header: bool = False
    row_index: int = 0
    col_index: int = 0


@dataclass
class TableData:
    """Presentation model of a table with merged cells removed.

    Attributes:
        rows: 2D list of TableCell objects (covered cells are omitted)
        num_rows: Number of grid rows
        num_cols: Number of grid columns
        has_header: Whether the first row is a header row
        metadata: Additional metadata about the table
    """
    rows: List[List[TableCell]] = field(default_factory=list)
    num_rows: int = 0
    num_cols: int = 0
    has_header: bool = True
    metadata: Dict[str, Any] = field(default_factory=dict)


def is_continuation_cell(cell: str) -> bool:
    """Return True for a vertical continuation cell (text after the marker is kept)."""
    return cell.startswith(CONTINUATION_MARKER)


def is_blank_cell(cell: str) -> bool:
    """Return True if the cell is merged away (empty or continuation marker)."""
    return cell == "" or is_continuation_cell(cell)


def copy_grid(grid: Grid) -> Grid:
    """Return a row-by-row copy so callers never share rows with the input."""
    return [list(row) for row in grid]


def grid_width(grid: Grid) -> int:
    """Column count of a grid, taken from its header row."""
    return len(grid[0]) if grid else 0
