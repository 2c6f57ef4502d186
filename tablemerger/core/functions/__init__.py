# tablemerger/core/functions/__init__.py
"""
Functions - Table model, merge and split building blocks

Module Components:
- errors: Typed, recoverable errors
- table_models: Grid, Rectangle, MergeRegion, TableCell/TableData
- table_codec: Pipe table text <-> Grid
- region_selector: Selection → Rectangle, cursor range → coordinates
- merge_engine: Rectangular merge
- merge_region_tracker: rowspan/colspan reconstruction
- split_engine: Inverse of merge
- table_processor: HTML/Markdown/Text rendering of merge regions
- html_table_importer: HTML <table> → Grid
- merge_config: Pipeline configuration

Usage Example:
    from tablemerger.core.functions import TableTextCodec, MergeEngine, Rectangle

    codec = TableTextCodec()
    grid = codec.parse_text(table_text)
    grid = MergeEngine().merge(grid, Rectangle(1, 1, 0, 1))
    print(codec.serialize(grid))
"""

from tablemerger.core.functions.errors import (
    ErrorReason,
    TableMergeError,
    ParseError,
    SelectionError,
    MergeError,
    SplitError,
)

from tablemerger.core.functions.table_models import (
    Grid,
    CellCoordinate,
    Rectangle,
    MergeRegion,
    TableCell,
    TableData,
    is_blank_cell,
    is_continuation_cell,
    copy_grid,
)

# Table processor module (formatting)
from tablemerger.core.functions.table_processor import (
    TableOutputFormat,
    TableProcessorConfig,
    TableProcessor,
    create_table_processor,
    DEFAULT_PROCESSOR_CONFIG,
)

from tablemerger.core.functions.merge_config import (
    TableMergeConfig,
    DEFAULT_MERGE_CONFIG,
)

from tablemerger.core.functions.table_codec import TableTextCodec, DEFAULT_CODEC

from tablemerger.core.functions.region_selector import (
    RegionSelector,
    column_index_at,
    coordinates_from_cursor_range,
)

from tablemerger.core.functions.merge_engine import MergeEngine
from tablemerger.core.functions.merge_region_tracker import MergeRegionTracker
from tablemerger.core.functions.split_engine import SplitEngine
from tablemerger.core.functions.html_table_importer import html_table_to_grid

__all__ = [
    # Errors
    "ErrorReason",
    "TableMergeError",
    "ParseError",
    "SelectionError",
    "MergeError",
    "SplitError",
    # Models
    "Grid",
    "CellCoordinate",
    "Rectangle",
    "MergeRegion",
    "TableCell",
    "TableData",
    "is_blank_cell",
    "is_continuation_cell",
    "copy_grid",
    # Table processor (formatting)
    "TableOutputFormat",
    "TableProcessorConfig",
    "TableProcessor",
    "create_table_processor",
    "DEFAULT_PROCESSOR_CONFIG",
    # Configuration
    "TableMergeConfig",
    "DEFAULT_MERGE_CONFIG",
    # Pipeline
    "TableTextCodec",
    "DEFAULT_CODEC",
    "RegionSelector",
    "column_index_at",
    "coordinates_from_cursor_range",
    "MergeEngine",
    "MergeRegionTracker",
    "SplitEngine",
    "html_table_to_grid",
]
