# tablemerger/core/host/text_host.py
"""
Text Host - In-memory document implementation of BaseTableHost

Holds a whole Markdown document as text. Useful for scripts, batch jobs and
tests where no editor is involved.
"""
import logging
from typing import List, Optional, Sequence

from tablemerger.core.functions.errors import ErrorReason, ParseError
from tablemerger.core.functions.utils import is_table_line
from tablemerger.core.host.base_host import BaseTableHost, CellSelection, TableBlock

logger = logging.getLogger("table-merger")


def locate_table_block(lines: Sequence[str], line: int) -> TableBlock:
    """
    Find the maximal contiguous block of table lines containing ``line``.

    Args:
        lines: Document lines
        line: Zero-based line index inside the table

    Returns:
        TableBlock with inclusive start/end lines

    Raises:
        ParseError: TOO_FEW_ROWS when ``line`` is not a table line
    """
    if line < 0 or line >= len(lines) or not is_table_line(lines[line]):
        raise ParseError(f"Line {line} is not inside a table", ErrorReason.TOO_FEW_ROWS)

    start = line
    while start > 0 and is_table_line(lines[start - 1]):
        start -= 1

    end = line
    while end + 1 < len(lines) and is_table_line(lines[end + 1]):
        end += 1

    return TableBlock(start_line=start, end_line=end, lines=list(lines[start:end + 1]))


class TextTableHost(BaseTableHost):
    """Host backed by a document string.

    The document's line ending (LF or CRLF) is kept for replaced lines too.
    """

    def __init__(self, text: str, selection: Optional[CellSelection] = None):
        super().__init__(selection)
        self.newline = "\r\n" if "\r\n" in text else "\n"
        self._lines: List[str] = text.split(self.newline)

    @property
    def text(self) -> str:
        return self.newline.join(self._lines)

    def get_table_source_lines(self, line: int) -> TableBlock:
        block = locate_table_block(self._lines, line)
        self.logger.debug(f"Located table at lines {block.start_line}..{block.end_line}")
        return block

    def replace_table_source_lines(self, block: TableBlock, new_text: str):
        new_lines = new_text.splitlines()
        self._lines = self._lines[:block.start_line] + new_lines + self._lines[block.end_line + 1:]
        self.logger.debug(
            f"Replaced lines {block.start_line}..{block.end_line} with {len(new_lines)} line(s)"
        )
