# tablemerger/core/functions/errors.py
"""Typed errors raised by the table merge pipeline.

Every error is recoverable: callers catch TableMergeError, report the
message and leave the document untouched.
"""
from enum import Enum


class ErrorReason(Enum):
    """Reason codes carried by TableMergeError subclasses."""
    TOO_FEW_ROWS = "too_few_rows"
    MALFORMED_ROW = "malformed_row"
    EMPTY = "empty"
    NOT_RECTANGULAR = "not_rectangular"
    OUT_OF_BOUNDS = "out_of_bounds"
    NOT_A_MERGE_ANCHOR = "not_a_merge_anchor"


class TableMergeError(Exception):
    """Base class for all table merge errors."""

    def __init__(self, message: str, reason: ErrorReason):
        self.message = message
        self.reason = reason
        super().__init__(self.message)


class ParseError(TableMergeError):
    """Table text could not be turned into a grid (TOO_FEW_ROWS, MALFORMED_ROW)."""


class SelectionError(TableMergeError):
    """Selected cells cannot be merged (EMPTY, NOT_RECTANGULAR)."""


class MergeError(TableMergeError):
    """Merge rectangle does not fit the grid (OUT_OF_BOUNDS)."""


class SplitError(TableMergeError):
    """Split target is not a merge anchor (NOT_A_MERGE_ANCHOR, OUT_OF_BOUNDS)."""
