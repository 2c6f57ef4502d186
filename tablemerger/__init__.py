# tablemerger/__init__.py
"""
TableMerger Library

Merges and splits cells of Markdown pipe tables. Markdown has no merged
cells, so a merge is written as one anchor cell followed by empty cells
(optionally '^^' continuation markers for the vertical part).

Package Structure:
- core: Table merge core module
    - TableMerger: Main merge/split class
    - functions: Codec, region selector, merge/split engines, region tracker
    - host: Editor collaborator interface

Usage:
    from tablemerger import TableMerger

    merger = TableMerger()
    text = merger.merge_table_text(table_text, {(1, 0), (1, 1)})
"""

__version__ = "0.1.0"

# Expose core classes at top level
from tablemerger.core import OperationResult, TableMerger, create_table_merger
from tablemerger.core.constants import ContinuationStyle
from tablemerger.core.functions import TableMergeConfig, TableMergeError
from tablemerger.core.host import TextTableHost

# Explicit subpackages
from tablemerger import core

__all__ = [
    "__version__",
    # Core classes
    "TableMerger",
    "OperationResult",
    "create_table_merger",
    "TableMergeConfig",
    "TableMergeError",
    "ContinuationStyle",
    "TextTableHost",
    # Subpackages
    "core",
]
