# tablemerger/core/host/base_host.py
"""
Base Host - Abstract interface to the editor that owns the table text

The merge pipeline never touches an editor directly. A host supplies the
lines of the table under the cursor, writes replacement text back, and owns
the user's cell selection.

Module Components:
- TableBlock: Location and lines of one table in the document
- CellSelection: Explicit selection value owned by the host
- BaseTableHost: Abstract base class for host implementations

Usage Example:
    from tablemerger.core.host.base_host import BaseTableHost, TableBlock

    class EditorHost(BaseTableHost):
        def get_table_source_lines(self, line):
            # Editor-specific lookup
            pass

        def replace_table_source_lines(self, block, new_text):
            # Editor-specific transaction
            pass
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from tablemerger.core.functions.table_models import CellCoordinate

logger = logging.getLogger("table-merger")


@dataclass
class TableBlock:
    """A contiguous block of table lines in a document.

    Attributes:
        start_line: First line of the block (inclusive)
        end_line: Last line of the block (inclusive)
        lines: Text of the block lines
    """
    start_line: int
    end_line: int
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def contains(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


class CellSelection:
    """
    Cells currently selected by the user.

    The set is replaced as a whole (never emptied piecemeal) when a fresh
    selection starts or after a successful merge or split.
    """

    def __init__(self, coordinates: Optional[Iterable[Tuple[int, int]]] = None):
        self._cells: FrozenSet[CellCoordinate] = self._freeze(coordinates or ())

    @property
    def coordinates(self) -> FrozenSet[CellCoordinate]:
        return self._cells

    def start(self, row: int, col: int):
        """Start a fresh selection (plain click)."""
        self._cells = frozenset({CellCoordinate(row, col)})

    def add(self, row: int, col: int):
        """Extend the selection (drag or modified click)."""
        self._cells = self._cells | {CellCoordinate(row, col)}

    def toggle(self, row: int, col: int):
        cell = CellCoordinate(row, col)
        if cell in self._cells:
            self._cells = self._cells - {cell}
        else:
            self._cells = self._cells | {cell}

    def clear(self):
        self._cells = frozenset()

    @staticmethod
    def _freeze(coordinates: Iterable[Tuple[int, int]]) -> FrozenSet[CellCoordinate]:
        return frozenset(CellCoordinate(row, col) for row, col in coordinates)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, item) -> bool:
        return item in self._cells


class BaseTableHost(ABC):
    """Abstract base class for editor hosts.

    Implementation Guidelines:
        - get_table_source_lines() returns the whole table block around a line
        - replace_table_source_lines() must replace the block in one step
        - selection is kept on the host, never in module-level state
    """

    def __init__(self, selection: Optional[CellSelection] = None):
        self.selection = selection or CellSelection()
        self.logger = logging.getLogger("table-merger")

    @abstractmethod
    def get_table_source_lines(self, line: int) -> TableBlock:
        """Locate the table block containing ``line``.

        Raises:
            ParseError: When ``line`` is not inside a table
        """
        pass

    @abstractmethod
    def replace_table_source_lines(self, block: TableBlock, new_text: str):
        """Replace the lines of ``block`` with ``new_text`` atomically."""
        pass

    def get_selected_cell_coordinates(self) -> Set[CellCoordinate]:
        """Snapshot of the current selection."""
        return set(self.selection.coordinates)
