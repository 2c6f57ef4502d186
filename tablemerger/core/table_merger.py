# tablemerger/core/table_merger.py
"""TableMerger - Merge and split cells of Markdown pipe tables

Main entry point of the tablemerger library. Wires the pipeline

    table lines → TableTextCodec → Grid → RegionSelector → MergeEngine / SplitEngine
                → TableTextCodec → replacement text

and turns typed errors into user-facing results for editor hosts.

Usage Example:
    from tablemerger import TableMerger

    merger = TableMerger()

    # Pure text operations (raise TableMergeError subclasses)
    text = merger.merge_table_text(table_text, {(1, 0), (1, 1)})
    text = merger.split_table_text(text, (1, 0))
    html = merger.render_table(text)

    # Host operations (never raise, never write on failure)
    host = TextTableHost(document_text)
    host.selection.start(1, 0)
    host.selection.add(1, 1)
    result = merger.merge_selection(host, line=4)
    print(result.message)
"""
import logging
from typing import Iterable, Optional, Tuple

from tablemerger.core.functions.errors import ErrorReason, SelectionError, TableMergeError
from tablemerger.core.functions.merge_config import DEFAULT_MERGE_CONFIG, TableMergeConfig
from tablemerger.core.functions.merge_engine import MergeEngine
from tablemerger.core.functions.merge_region_tracker import MergeRegionTracker
from tablemerger.core.functions.region_selector import (
    CursorPosition,
    RegionSelector,
    coordinates_from_cursor_range,
)
from tablemerger.core.functions.split_engine import SplitEngine
from tablemerger.core.functions.table_codec import TableTextCodec
from tablemerger.core.functions.table_processor import TableProcessor
from tablemerger.core.host.base_host import BaseTableHost, TableBlock

logger = logging.getLogger("table-merger")


class OperationResult:
    """
    Outcome of a host-level merge or split.

    Attributes:
        success: Whether the document was changed
        message: Short user-facing message
        text: Replacement table text (None on failure)
        error: The caught error (None on success)
    """

    def __init__(
        self,
        success: bool,
        message: str,
        text: Optional[str] = None,
        error: Optional[TableMergeError] = None
    ):
        self.success = success
        self.message = message
        self.text = text
        self.error = error

    def __bool__(self) -> bool:
        return self.success

    def __repr__(self) -> str:
        return f"OperationResult(success={self.success!r}, message={self.message!r})"


class TableMerger:
    """
    Merge/split facade over the table pipeline.

    A grid is parsed fresh on every call and discarded after serialization;
    the merger keeps no table state between calls.
    """

    def __init__(self, config: Optional[TableMergeConfig] = None):
        """
        Initialize TableMerger.

        Args:
            config: Merge configuration (defaults to DEFAULT_MERGE_CONFIG)
        """
        self.config = config or DEFAULT_MERGE_CONFIG
        self.codec = TableTextCodec()
        self.selector = RegionSelector(strict=self.config.strict_selection)
        self.merge_engine = MergeEngine(self.config)
        self.tracker = MergeRegionTracker()
        self.split_engine = SplitEngine(self.tracker)
        self.processor = TableProcessor(self.config.processor_config)
        self.logger = logging.getLogger("table-merger")

    # ==========================================================================
    # Text operations
    # ==========================================================================

    def merge_table_text(self, table_text: str, coordinates: Iterable[Tuple[int, int]]) -> str:
        """
        Merge the selected cells of a table.

        Args:
            table_text: Pipe table text
            coordinates: Selected (row, col) pairs, row 0 being the header

        Returns:
            New table text

        Raises:
            ParseError, SelectionError, MergeError
        """
        grid = self.codec.parse_text(table_text)
        rect = self.selector.normalize(coordinates)
        return self.codec.serialize(self.merge_engine.merge(grid, rect))

    def split_table_text(self, table_text: str, anchor: Tuple[int, int]) -> str:
        """
        Split the merge region anchored at ``anchor``.

        Raises:
            ParseError, SplitError
        """
        grid = self.codec.parse_text(table_text)
        return self.codec.serialize(self.split_engine.split(grid, anchor))

    def render_table(self, table_text: str) -> str:
        """
        Render a table with its merge regions in the configured output format.

        Raises:
            ParseError
        """
        grid = self.codec.parse_text(table_text)
        return self.processor.format_table(self.tracker.build_table_data(grid))

    # ==========================================================================
    # Host operations
    # ==========================================================================

    def merge_selection(self, host: BaseTableHost, line: int) -> OperationResult:
        """
        Merge the host's selected cells in the table containing ``line``.

        On success the table block is replaced and the selection cleared.
        On failure nothing is written and the result carries the message.
        """
        coordinates = host.get_selected_cell_coordinates()
        try:
            block = host.get_table_source_lines(line)
            new_text = self.merge_table_text(block.text, coordinates)
        except TableMergeError as e:
            self.logger.warning(f"Merge failed: {e.message}")
            return OperationResult(False, e.message, error=e)

        return self._commit(host, block, new_text, f"Merged {len(coordinates)} cells")

    def merge_cursor_range(
        self,
        host: BaseTableHost,
        start: CursorPosition,
        end: CursorPosition
    ) -> OperationResult:
        """
        Merge the cells covered by an editor text selection.

        Args:
            host: Editor host
            start: (line, ch) where the text selection starts
            end: (line, ch) where the text selection ends
        """
        try:
            block = host.get_table_source_lines(start[0])
            if not block.contains(end[0]):
                raise SelectionError(
                    "Selection must stay inside one table",
                    ErrorReason.OUT_OF_BOUNDS,
                )
            coordinates = coordinates_from_cursor_range(
                block.lines, start, end, first_line=block.start_line
            )
            new_text = self.merge_table_text(block.text, coordinates)
        except TableMergeError as e:
            self.logger.warning(f"Merge failed: {e.message}")
            return OperationResult(False, e.message, error=e)

        return self._commit(host, block, new_text, f"Merged {len(coordinates)} cells")

    def split_at(self, host: BaseTableHost, line: int, anchor: Tuple[int, int]) -> OperationResult:
        """
        Split the merge region anchored at ``anchor`` in the table containing ``line``.

        On success the table block is replaced and the selection cleared.
        """
        try:
            block = host.get_table_source_lines(line)
            new_text = self.split_table_text(block.text, anchor)
        except TableMergeError as e:
            self.logger.warning(f"Split failed: {e.message}")
            return OperationResult(False, e.message, error=e)

        return self._commit(host, block, new_text, f"Split cell ({anchor[0]}, {anchor[1]})")

    def _commit(self, host: BaseTableHost, block: TableBlock, new_text: str, message: str) -> OperationResult:
        """Write the transformed table back and reset the selection."""
        host.replace_table_source_lines(block, new_text)
        host.selection.clear()
        self.logger.info(f"{message} in table at lines {block.start_line}..{block.end_line}")
        return OperationResult(True, message, text=new_text)


def create_table_merger(config: Optional[TableMergeConfig] = None) -> TableMerger:
    """
    Factory function to create a TableMerger.

    Args:
        config: Merge configuration

    Returns:
        Configured TableMerger instance
    """
    return TableMerger(config)
