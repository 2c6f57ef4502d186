# tablemerger/core/__init__.py
"""
Core - Table merge core module

- TableMerger: Main merge/split facade
- functions: Codec, selector, engines, tracker, rendering
- host: Editor collaborator interface and in-memory host
"""

from tablemerger.core.table_merger import OperationResult, TableMerger, create_table_merger

from tablemerger.core import functions
from tablemerger.core import host

__all__ = [
    "TableMerger",
    "OperationResult",
    "create_table_merger",
    "functions",
    "host",
]
