"""
Mutable dense table: element writes, structural edits, and capacity management.

Overview
- set / set_row / set_col overwrite logical cells.
- add_row / add_col / add_rows / add_cols append at the next logical index,
  growing capacity first when needed.
- remove_row / remove_col / remove_rows / remove_cols shift survivors toward the
  origin and clear vacated slots to None.
- resize_rows / resize_cols reach an exact logical size.
- be_transposed transposes a square table in place.
- set_row_capacity / set_col_capacity / reallocate / trim_to_size change capacity.

Growth policy
- When an append needs capacity beyond the current value on an axis, the new
  capacity is required * 3 // 2 (never below required). Row and column capacity
  grow independently.

Notes
- Every public mutator validates all arguments before touching storage.
- Every mutator bumps FlatStore.version, which invalidates cached formatter widths.
- Mutators return self for chaining, except the capacity setters.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .errors import NotSquare
from .readable import ReadableTable, _scaled, _validate_non_negative
from .typing import E

__all__ = ["Table"]


def _grown(required: int) -> int:
    return max(required, _scaled(required))


class Table(ReadableTable[E]):
    """
    Dense 2D table supporting in-place edits with amortized growth.

    Examples:
        >>> from densetable import Table
        >>> t = Table.create_from_source([[1, 2], [3, 4]])
        >>> t.add_row([5, 6]).remove_col(0).to_lists()
        [[2], [4], [6]]
        >>> t.rows, t.cols
        (3, 1)
    """

    # ------------------------------------------------------------------
    # Simple setters
    # ------------------------------------------------------------------

    def set(self, row: int, col: int, value: E | None) -> Table[E]:
        self._validate_row_index(row)
        self._validate_col_index(col)
        self._store.raw_set(row, col, value)
        self._store.touch()
        return self

    def set_row(self, row: int, values: Sequence[E | None]) -> Table[E]:
        self._validate_row_index(row)
        self._validate_row_vector(values)
        self._store.write_row(row, list(values))
        self._store.touch()
        return self

    def set_col(self, col: int, values: Sequence[E | None]) -> Table[E]:
        self._validate_col_index(col)
        self._validate_col_vector(values)
        store = self._store
        for r, v in enumerate(values):
            store.raw_set(r, col, v)
        store.touch()
        return self

    # ------------------------------------------------------------------
    # Add rows / cols
    # ------------------------------------------------------------------

    def add_row(self, values: Sequence[E | None]) -> Table[E]:
        self._validate_row_vector(values)
        self._grow_row_capacity_if_needed(self._store.rows + 1)
        store = self._store
        store.write_row(store.rows, list(values))
        store.rows += 1
        store.touch()
        return self

    def add_col(self, values: Sequence[E | None]) -> Table[E]:
        self._validate_col_vector(values)
        self._grow_col_capacity_if_needed(self._store.cols + 1)
        store = self._store
        for r, v in enumerate(values):
            store.raw_set(r, store.cols, v)
        store.cols += 1
        store.touch()
        return self

    def add_rows(self, spec: int | Sequence[E | None]) -> Table[E]:
        """
        Append rows.

        Args:
            spec: Either a count of rows to append (cells set to None), or a
                sequence of default values; new row i is filled with spec[i].

        Raises:
            NegativeSize: If a negative count is given.
        """
        if isinstance(spec, int):
            _validate_non_negative(spec)
            defaults: Sequence[Any] = [None] * spec
        else:
            defaults = list(spec)
        n = len(defaults)
        if n == 0:
            return self
        self._grow_row_capacity_if_needed(self._store.rows + n)
        store = self._store
        base = store.rows
        for i, value in enumerate(defaults):
            store.fill_row(base + i, value)
        store.rows += n
        store.touch()
        return self

    def add_cols(self, spec: int | Sequence[E | None]) -> Table[E]:
        """
        Append columns.

        Args:
            spec: Either a count of columns to append (cells set to None), or a
                sequence of default values; new column i is filled with spec[i].

        Raises:
            NegativeSize: If a negative count is given.
        """
        if isinstance(spec, int):
            _validate_non_negative(spec)
            defaults: Sequence[Any] = [None] * spec
        else:
            defaults = list(spec)
        n = len(defaults)
        if n == 0:
            return self
        self._grow_col_capacity_if_needed(self._store.cols + n)
        store = self._store
        base = store.cols
        for r in range(store.rows):
            store.write_row_segment(r, base, defaults)
        store.cols += n
        store.touch()
        return self

    # ------------------------------------------------------------------
    # Remove rows / cols
    # ------------------------------------------------------------------

    def remove_row(self, row: int) -> Table[E]:
        self._validate_row_index(row)
        store = self._store
        for r in range(row, store.rows - 1):
            store.move_row(r + 1, r)
        store.fill_row(store.rows - 1, None)
        store.rows -= 1
        store.touch()
        return self

    def remove_col(self, col: int) -> Table[E]:
        return self.remove_cols(col, col + 1)

    def remove_rows(self, begin: int, end: int) -> Table[E]:
        """
        Remove the half-open row interval [begin, end).

        Rows at or after ``end`` move down to close the gap; the vacated tail
        rows are cleared to None.

        Raises:
            IndexOutOfRange: If begin is not a valid row index.
            IllegalEndRowIndex: If end > rows.
            EndBeforeBegin: If begin >= end.
        """
        self._validate_row_begin_end(begin, end)
        store = self._store
        removed = end - begin
        for r in range(end, store.rows):
            store.move_row(r, r - removed)
        for r in range(store.rows - removed, store.rows):
            store.fill_row(r, None)
        store.rows -= removed
        store.touch()
        return self

    def remove_cols(self, begin: int, end: int) -> Table[E]:
        """Remove the half-open column interval [begin, end), shifting later columns left."""
        self._validate_col_begin_end(begin, end)
        store = self._store
        removed = end - begin
        cols = store.cols
        tail = [None] * removed
        for r in range(store.rows):
            row = store.read_row(r)
            store.write_row(r, row[:begin] + row[end:] + tail)
        store.cols = cols - removed
        store.touch()
        return self

    # ------------------------------------------------------------------
    # Resize
    # ------------------------------------------------------------------

    def resize_rows(self, new_rows: int) -> Table[E]:
        _validate_non_negative(new_rows)
        rows = self._store.rows
        if new_rows < rows:
            self.remove_rows(new_rows, rows)
        else:
            self.add_rows(new_rows - rows)
        return self

    def resize_cols(self, new_cols: int) -> Table[E]:
        _validate_non_negative(new_cols)
        cols = self._store.cols
        if new_cols < cols:
            self.remove_cols(new_cols, cols)
        else:
            self.add_cols(new_cols - cols)
        return self

    # ------------------------------------------------------------------
    # Transpose
    # ------------------------------------------------------------------

    def be_transposed(self) -> Table[E]:
        """
        Transpose in place.

        Raises:
            NotSquare: If rows != cols.
        """
        store = self._store
        if store.rows != store.cols:
            raise NotSquare(f"in-place transpose requires rows == cols, got {store.rows} x {store.cols}")
        n = store.rows
        for r in range(n):
            for c in range(r + 1, n):
                a = store.flat_index(r, c)
                b = store.flat_index(c, r)
                store.data[a], store.data[b] = store.data[b], store.data[a]
        store.touch()
        return self

    # ------------------------------------------------------------------
    # Capacity / reallocate
    # ------------------------------------------------------------------

    def set_row_capacity(self, capacity: int) -> None:
        self._validate_row_capacity(capacity)
        if capacity != self._store.row_capacity:
            self._store.realloc_rows(capacity)
            self._store.touch()

    def set_col_capacity(self, capacity: int) -> None:
        self._validate_col_capacity(capacity)
        if capacity != self._store.col_capacity:
            self._store.realloc_cols(capacity)
            self._store.touch()

    def reallocate(self, row_capacity: int, col_capacity: int) -> None:
        """
        Change both capacities, choosing the cheapest copy shape.

        Raises:
            IllegalCapacity: If either capacity is below its logical size.
        """
        self._validate_row_capacity(row_capacity)
        self._validate_col_capacity(col_capacity)
        store = self._store
        same_rows = row_capacity == store.row_capacity
        same_cols = col_capacity == store.col_capacity
        if same_rows and same_cols:
            return
        if same_rows:
            store.realloc_cols(col_capacity)
        elif same_cols:
            store.realloc_rows(row_capacity)
        else:
            store.realloc(row_capacity, col_capacity)
        store.touch()

    def trim_to_size(self) -> None:
        """Shrink capacity to the logical size in place."""
        self.reallocate(self._store.rows, self._store.cols)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _grow_row_capacity_if_needed(self, required: int) -> None:
        if required > self._store.row_capacity:
            self._store.realloc_rows(_grown(required))

    def _grow_col_capacity_if_needed(self, required: int) -> None:
        if required > self._store.col_capacity:
            self._store.realloc_cols(_grown(required))
