"""
Custom exceptions for the densetable.io module.

Purpose
- Provide IO-layer error types for configuration loading and DataFrame conversion.
- Keep densetable.core as the source of truth for table precondition errors
  (see densetable.core.errors).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class TableIoError(Exception):
    """
    Base class for IO-related errors in densetable.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from densetable.core errors.
    """


class TableConfigError(TableIoError):
    """
    Raised when table configuration is invalid.

    Examples:
        - Negative indent_size in [table] or DENSETABLE_INDENT_SIZE
        - Unknown key under the format options mapping
    """


class FrameConversionError(TableIoError):
    """
    Raised when a table cannot be converted to or from a polars DataFrame.

    Examples:
        - Column name list whose length differs from the table's column count
    """
