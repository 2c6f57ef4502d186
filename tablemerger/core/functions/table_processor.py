# tablemerger/core/functions/table_processor.py
"""
Table Processor - Rendering of tracked merge regions

Formats a TableData (produced by the MergeRegionTracker) as HTML, Markdown or
plain text. Only HTML can express merged cells natively.

================================================================================
TABLE PROCESSOR ARCHITECTURE
================================================================================

Main Entry Point:
    format_table(table: TableData) → str

Internal Processing Functions (called from format_table):
    ├─ format_table_as_html()     - HTML with rowspan/colspan
    ├─ format_table_as_markdown() - Pipe table, merged cells flattened
    └─ format_table_as_text()     - Tab separated text

Common Utility:
    └─ _clean_cell_content()      - whitespace normalization

================================================================================
OUTPUT FORMAT COMPARISON
================================================================================

| Format   | Use Case                      | Merge Support |
|----------|-------------------------------|---------------|
| HTML     | Preview panes, export         | rowspan/colspan |
| Markdown | Plain pipe table              | none (blank cells) |
| Text     | Search indexing, logging      | none          |

================================================================================
"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from html import escape
from typing import List, Optional

from tablemerger.core.constants import CONTINUATION_MARKER, EMPTY_CELL, SEPARATOR_CELL
from tablemerger.core.functions.table_models import TableData

logger = logging.getLogger("table-merger")


class TableOutputFormat(Enum):
    """Table output format options."""
    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"


@dataclass
class TableProcessorConfig:
    """Configuration for table rendering."""
    output_format: TableOutputFormat = TableOutputFormat.HTML
    clean_whitespace: bool = True
    preserve_merged_cells: bool = True


class TableProcessor:
    """
    Renders a TableData in the configured output format.

    Public Methods:
        format_table()             ← Main Entry Point (routes on config.output_format)
        format_table_as_html()
        format_table_as_markdown()
        format_table_as_text()
    """

    def __init__(self, config: Optional[TableProcessorConfig] = None):
        self.config = config or TableProcessorConfig()
        self.logger = logging.getLogger("table-merger")

    def format_table(self, table: TableData) -> str:
        """
        Main entry point for table formatting.

        Args:
            table: TableData from the MergeRegionTracker

        Returns:
            Formatted string (HTML/Markdown/Text)
        """
        if self.config.output_format == TableOutputFormat.HTML:
            return self.format_table_as_html(table)
        elif self.config.output_format == TableOutputFormat.MARKDOWN:
            return self.format_table_as_markdown(table)
        else:
            return self.format_table_as_text(table)

    def format_table_as_html(self, table: TableData) -> str:
        """
        Convert TableData to an HTML string.

        Anchor cells carry rowspan/colspan; covered cells are not emitted.
        """
        if not table.rows:
            return ""

        html_parts = ["<table>"]
        for row in table.rows:
            html_parts.append("  <tr>")
            for cell in row:
                tag = "th" if cell.is_header else "td"
                attrs = []
                if self.config.preserve_merged_cells:
                    if cell.row_span > 1:
                        attrs.append(f'rowspan="{cell.row_span}"')
                    if cell.col_span > 1:
                        attrs.append(f'colspan="{cell.col_span}"')

                attr_str = " " + " ".join(attrs) if attrs else ""
                content = escape(self._clean_cell_content(cell.content), quote=False)
                html_parts.append(f"    <{tag}{attr_str}>{content}</{tag}>")
            html_parts.append("  </tr>")
        html_parts.append("</table>")

        self.logger.debug(f"Rendered HTML table with {len(table.rows)} rows")
        return "\n".join(html_parts)

    def format_table_as_markdown(self, table: TableData) -> str:
        """
        Convert TableData to a pipe table.

        Note: Markdown does NOT support rowspan/colspan, covered cells are
        written back as empty cells, with a '^^' marker under the anchor
        column of a rowspan.
        """
        if not table.rows:
            return ""

        lines = []
        for row_idx, cells in enumerate(self._expand_rows(table)):
            lines.append("| " + " | ".join(cells) + " |")
            if row_idx == 0 and table.has_header:
                lines.append("| " + " | ".join([SEPARATOR_CELL] * table.num_cols) + " |")

        return "\n".join(lines)

    def format_table_as_text(self, table: TableData) -> str:
        """
        Convert TableData to plain text.

        Note: No table structure preserved. Useful for search indexing.
        """
        if not table.rows:
            return ""

        lines = []
        for row in table.rows:
            cells = [self._clean_cell_content(cell.content) for cell in row]
            lines.append("\t".join(cells))

        return "\n".join(lines)

    def _expand_rows(self, table: TableData) -> List[List[str]]:
        """Place every rendered cell back on a full grid, covered cells left empty."""
        grid = [[EMPTY_CELL] * table.num_cols for _ in range(table.num_rows)]
        for row in table.rows:
            for cell in row:
                grid[cell.row_index][cell.col_index] = self._clean_cell_content(cell.content)
                for covered_row in range(cell.row_index + 1, cell.row_index + cell.row_span):
                    grid[covered_row][cell.col_index] = CONTINUATION_MARKER
        return grid

    def _clean_cell_content(self, content: str) -> str:
        """Clean cell content (whitespace normalization)."""
        if not content:
            return ""

        if self.config.clean_whitespace:
            content = re.sub(r'\s+', ' ', content)
            content = content.strip()

        return content


def create_table_processor(config: Optional[TableProcessorConfig] = None) -> TableProcessor:
    """
    Factory function to create a TableProcessor.

    Args:
        config: Table processing configuration

    Returns:
        Configured TableProcessor instance
    """
    return TableProcessor(config)


# Default configuration
DEFAULT_PROCESSOR_CONFIG = TableProcessorConfig()
