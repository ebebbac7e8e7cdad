"""
Core exception types raised by table construction, indexing, and structural edits.

Provides typed exceptions for precondition violations of the table API:
- InvalidDimension / InconsistentColumnSize for construction failures.
- IndexOutOfRange / IllegalEndIndex (IllegalEndRowIndex, IllegalEndColIndex) /
  EndBeforeBegin for index and interval checks.
- MismatchRowSize / MismatchColSize for row/column vectors of the wrong length.
- IllegalCapacity / NegativeSize for capacity and bulk-growth requests.
- NotSquare for in-place transposition of a non-square table.
- InvalidFormatterState for a formatter not attached to any table.

Notes:
    - Every exception derives from TableError and from the closest builtin
      (ValueError, IndexError, RuntimeError) so callers may catch either.
    - All checks run before any mutation; an exception means the table is unchanged.
    - This module uses only the Python standard library and has no side effects.

Examples:
    Catch an out-of-range read.

    >>> from densetable.core.errors import IndexOutOfRange
    >>> from densetable.core.table import Table
    >>> t = Table.create_with_size(2, 2)
    >>> try:
    ...     t.get(5, 0)
    ... except IndexOutOfRange as e:
    ...     msg = str(e)
    >>> "out of range" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "TableError",
    "InvalidDimension",
    "InconsistentColumnSize",
    "IndexOutOfRange",
    "IllegalEndIndex",
    "IllegalEndRowIndex",
    "IllegalEndColIndex",
    "EndBeforeBegin",
    "MismatchRowSize",
    "MismatchColSize",
    "IllegalCapacity",
    "NegativeSize",
    "NotSquare",
    "InvalidFormatterState",
]


class TableError(Exception):
    """
    Base class for table errors.

    Notes:
        Use this as a catch-all for precondition violations raised by densetable.core.
    """


class InvalidDimension(TableError, ValueError):
    """Negative row/column count or capacity passed to a factory."""


class InconsistentColumnSize(TableError, ValueError):
    """Ragged 2D source: an inner row length differs from the first row's."""


class IndexOutOfRange(TableError, IndexError):
    """Row or column index outside [0, logical size)."""


class IllegalEndIndex(TableError, IndexError):
    """End of a half-open interval outside [0, logical size]."""


class IllegalEndRowIndex(IllegalEndIndex):
    """End of a row interval greater than the row count."""


class IllegalEndColIndex(IllegalEndIndex):
    """End of a column interval greater than the column count."""


class EndBeforeBegin(TableError, ValueError):
    """Half-open interval whose end is not strictly after its begin."""


class MismatchRowSize(TableError, ValueError):
    """Row vector length differs from the current column count."""


class MismatchColSize(TableError, ValueError):
    """Column vector length differs from the current row count."""


class IllegalCapacity(TableError, ValueError):
    """Requested capacity smaller than the current logical size on that axis."""


class NegativeSize(TableError, ValueError):
    """Negative count passed to a bulk grow or resize operation."""


class NotSquare(TableError, ValueError):
    """In-place transpose requested on a table with rows != cols."""


class InvalidFormatterState(TableError, RuntimeError):
    """Formatter used while detached from any table."""
