# tablemerger/core/functions/merge_config.py
"""
Configuration for the table merge pipeline.

Usage Example:
    from tablemerger.core.functions.merge_config import TableMergeConfig
    from tablemerger.core.constants import ContinuationStyle

    config = TableMergeConfig(
        continuation_style=ContinuationStyle.CARET,
        strict_selection=True,
    )
"""
from dataclasses import dataclass, field

from tablemerger.core.constants import ContinuationStyle
from tablemerger.core.functions.table_processor import TableProcessorConfig


@dataclass
class TableMergeConfig:
    """Configuration for merge and split operations.

    Attributes:
        continuation_style: How vertically merged-away cells are written
            (BLANK: empty cell, CARET: ``^^`` continuation marker)
        strict_selection: Reject selections that do not fill their bounding
            rectangle instead of silently merging the bounding box
        join_separator: Separator placed between merged cell contents
        processor_config: Formatting options used by render operations
    """
    continuation_style: ContinuationStyle = ContinuationStyle.BLANK
    strict_selection: bool = False
    join_separator: str = " "
    processor_config: TableProcessorConfig = field(default_factory=TableProcessorConfig)


# Default configuration
DEFAULT_MERGE_CONFIG = TableMergeConfig()
