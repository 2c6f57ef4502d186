# tablemerger/core/host/__init__.py
"""
Host - Editor collaborator interface

- base_host: BaseTableHost, CellSelection, TableBlock
- text_host: TextTableHost (in-memory document), locate_table_block
"""

from tablemerger.core.host.base_host import BaseTableHost, CellSelection, TableBlock
from tablemerger.core.host.text_host import TextTableHost, locate_table_block

__all__ = [
    "BaseTableHost",
    "CellSelection",
    "TableBlock",
    "TextTableHost",
    "locate_table_block",
]
