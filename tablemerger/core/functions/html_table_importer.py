# tablemerger/core/functions/html_table_importer.py
"""
HTML Table Importer - <table> with rowspan/colspan → Grid

Encodes spanned HTML cells with the same convention the MergeEngine writes:
the anchor keeps the text, covered cells become blank ('' or '^^' below the
anchor in CARET style). Serializing the result with the TableTextCodec gives
a pipe table that the MergeRegionTracker renders back with the same spans.

Usage Example:
    from tablemerger.core.functions.html_table_importer import html_table_to_grid
    from tablemerger.core.functions.table_codec import DEFAULT_CODEC

    grid = html_table_to_grid(table_html)
    markdown = DEFAULT_CODEC.serialize(grid)
"""
import logging
import re
from typing import Dict, Tuple

from bs4 import BeautifulSoup

from tablemerger.core.constants import (
    CONTINUATION_MARKER,
    EMPTY_CELL,
    MIN_TABLE_ROWS,
    ContinuationStyle,
)
from tablemerger.core.functions.errors import ErrorReason, ParseError
from tablemerger.core.functions.table_models import Grid

logger = logging.getLogger("table-merger")


def html_table_to_grid(
    table_html: str,
    continuation_style: ContinuationStyle = ContinuationStyle.BLANK
) -> Grid:
    """
    Convert the first HTML table of ``table_html`` into a Grid.

    Args:
        table_html: HTML containing a <table> element
        continuation_style: Placeholder for cells covered by a rowspan

    Returns:
        Grid whose row 0 is the first <tr>

    Raises:
        ParseError: TOO_FEW_ROWS when there is no table or it has fewer
            than two rows
    """
    soup = BeautifulSoup(table_html, 'html.parser')
    table = soup.find('table')
    if table is None:
        raise ParseError("No <table> element found", ErrorReason.TOO_FEW_ROWS)

    rows = table.find_all('tr')
    if len(rows) < MIN_TABLE_ROWS:
        raise ParseError(
            f"A table needs a header and at least one body row, got {len(rows)} row(s)",
            ErrorReason.TOO_FEW_ROWS,
        )

    filled: Dict[Tuple[int, int], str] = {}
    width = 0

    for r, tr in enumerate(rows):
        col = 0
        for cell in tr.find_all(['td', 'th'], recursive=False):
            while (r, col) in filled:
                col += 1

            rowspan = _span_value(cell.get('rowspan'))
            colspan = _span_value(cell.get('colspan'))

            for dr in range(rowspan):
                for dc in range(colspan):
                    if dr == 0 and dc == 0:
                        value = _clean_cell_text(cell.get_text(" ", strip=True))
                    elif dr > 0 and dc == 0 and continuation_style == ContinuationStyle.CARET:
                        value = CONTINUATION_MARKER
                    else:
                        value = EMPTY_CELL
                    filled[(r + dr, col + dc)] = value

            col += colspan
            width = max(width, col)

    grid = [
        [filled.get((r, c), EMPTY_CELL) for c in range(width)]
        for r in range(len(rows))
    ]
    logger.debug(f"Imported HTML table with {len(grid)} rows and {width} columns")
    return grid


def _span_value(raw) -> int:
    try:
        value = int(raw or 1)
    except ValueError:
        return 1
    return max(value, 1)


def _clean_cell_text(text: str) -> str:
    text = re.sub(r'\s+', ' ', text).strip()
    return re.sub(r'(?<!\\)\|', r'\\|', text)
