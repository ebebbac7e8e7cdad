"""
Flat backing storage for dense tables.

Owns the single contiguous backing list plus the logical-size and capacity
bookkeeping, and translates (row, col) pairs to flat indexes.

Layout
- flat(r, c) = r * col_capacity + c
- The stride between rows is col_capacity, not cols. Slots in columns
  [cols, col_capacity) and rows [rows, row_capacity) are capacity slack.
- len(data) == row_capacity * col_capacity at all times.

Reallocation shapes
- realloc_rows: stride unchanged; one bulk slice copy of the live region.
- realloc_cols: stride changes; one slice copy per logical row.
- realloc: both axes change; one slice copy per logical row into the new stride.

Notes
- No bounds checking happens here. ReadableTable/Table validate before calling.
- Every reallocation builds a new list and drops the old one.
- ``version`` is bumped by ``touch()``; formatters compare it to detect changes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ["FlatStore"]


class FlatStore:
    """
    Contiguous row-major storage with independent row/column capacity.

    Attributes:
        data (list[Any]): Backing list of length row_capacity * col_capacity.
        rows (int): Logical row count.
        cols (int): Logical column count.
        row_capacity (int): Allocated row count.
        col_capacity (int): Allocated column count (the row stride).
        version (int): Mutation counter, incremented by touch().

    Examples:
        >>> s = FlatStore(3, 4, rows=2, cols=2)
        >>> s.flat_index(1, 1)
        5
        >>> len(s.data)
        12
    """

    __slots__ = ("data", "rows", "cols", "row_capacity", "col_capacity", "version")

    def __init__(self, row_capacity: int, col_capacity: int, rows: int = 0, cols: int = 0) -> None:
        self.data: list[Any] = [None] * (row_capacity * col_capacity)
        self.rows = rows
        self.cols = cols
        self.row_capacity = row_capacity
        self.col_capacity = col_capacity
        self.version = 0

    def flat_index(self, row: int, col: int) -> int:
        return row * self.col_capacity + col

    # Raw access (unchecked)

    def raw_get(self, row: int, col: int) -> Any:
        return self.data[row * self.col_capacity + col]

    def raw_set(self, row: int, col: int, value: Any) -> None:
        self.data[row * self.col_capacity + col] = value

    def raw_get_flat(self, index: int) -> Any:
        return self.data[index]

    def raw_set_flat(self, index: int, value: Any) -> None:
        self.data[index] = value

    def read_row(self, row: int) -> list[Any]:
        """Return a copy of the logical part of ``row``."""
        start = row * self.col_capacity
        return self.data[start : start + self.cols]

    def write_row(self, row: int, values: Sequence[Any]) -> None:
        """Overwrite the first len(values) slots of ``row``."""
        start = row * self.col_capacity
        self.data[start : start + len(values)] = values

    def write_row_segment(self, row: int, col: int, values: Sequence[Any]) -> None:
        """Overwrite len(values) slots of ``row`` starting at ``col``."""
        start = row * self.col_capacity + col
        self.data[start : start + len(values)] = values

    def fill_row(self, row: int, value: Any) -> None:
        """Set every logical slot of ``row`` to ``value``."""
        start = row * self.col_capacity
        self.data[start : start + self.cols] = [value] * self.cols

    def move_row(self, src: int, dst: int) -> None:
        """Copy the logical part of row ``src`` over row ``dst``."""
        cc = self.col_capacity
        s = src * cc
        d = dst * cc
        self.data[d : d + self.cols] = self.data[s : s + self.cols]

    def snapshot(self) -> list[Any]:
        """Return a copy of the whole buffer, capacity slack included."""
        return list(self.data)

    def touch(self) -> None:
        self.version += 1

    # Reallocation (caller guarantees new capacities >= logical sizes)

    def realloc_rows(self, new_row_capacity: int) -> None:
        live = self.rows * self.col_capacity
        result: list[Any] = [None] * (new_row_capacity * self.col_capacity)
        result[:live] = self.data[:live]
        logger.debug(
            "densetable.realloc.rows",
            extra={"row_capacity_before": self.row_capacity, "row_capacity_after": new_row_capacity},
        )
        self.row_capacity = new_row_capacity
        self.data = result

    def realloc_cols(self, new_col_capacity: int) -> None:
        result = self._copy_rows_into(self.row_capacity, new_col_capacity)
        logger.debug(
            "densetable.realloc.cols",
            extra={"col_capacity_before": self.col_capacity, "col_capacity_after": new_col_capacity},
        )
        self.col_capacity = new_col_capacity
        self.data = result

    def realloc(self, new_row_capacity: int, new_col_capacity: int) -> None:
        result = self._copy_rows_into(new_row_capacity, new_col_capacity)
        logger.debug(
            "densetable.realloc.both",
            extra={
                "row_capacity_before": self.row_capacity,
                "col_capacity_before": self.col_capacity,
                "row_capacity_after": new_row_capacity,
                "col_capacity_after": new_col_capacity,
            },
        )
        self.row_capacity = new_row_capacity
        self.col_capacity = new_col_capacity
        self.data = result

    def _copy_rows_into(self, new_row_capacity: int, new_col_capacity: int) -> list[Any]:
        result: list[Any] = [None] * (new_row_capacity * new_col_capacity)
        cols = self.cols
        old_cc = self.col_capacity
        for r in range(self.rows):
            src = r * old_cc
            dst = r * new_col_capacity
            result[dst : dst + cols] = self.data[src : src + cols]
        return result

    def clone(self) -> FlatStore:
        """Return an independent store with identical shape, capacity, and contents."""
        other = FlatStore.__new__(FlatStore)
        other.data = list(self.data)
        other.rows = self.rows
        other.cols = self.cols
        other.row_capacity = self.row_capacity
        other.col_capacity = self.col_capacity
        other.version = 0
        return other
