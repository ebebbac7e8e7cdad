"""
Read-only view over a capacity-managed dense table.

Responsibilities
- Factories that build tables of a given size, capacity, default value, or 2D source.
- Bounds-checked element, row, and column reads returning independent snapshots.
- Transpose-as-copy, copy, copy_and_trim, and structural equality/hash.
- Index, interval, size, and capacity validation shared with the mutable Table.

Notes
- Storage lives in a FlatStore (densetable.core.store); this module never reads
  capacity slack except through get_underlying_clone().
- Factories are classmethods so that Table.create_* return Table instances.
- Validation always happens before any state change.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from .constants import (
    DEFAULT_COL_CAPACITY,
    DEFAULT_ROW_CAPACITY,
    GROWTH_DENOMINATOR,
    GROWTH_NUMERATOR,
    UNKNOWN_ELEMENT_TYPE,
)
from .errors import (
    EndBeforeBegin,
    IllegalCapacity,
    IllegalEndColIndex,
    IllegalEndRowIndex,
    InconsistentColumnSize,
    IndexOutOfRange,
    InvalidDimension,
    MismatchColSize,
    MismatchRowSize,
    NegativeSize,
)
from .formatter import TableFormatter
from .options import FormatOptions
from .store import FlatStore
from .typing import E, ElementType

__all__ = ["ReadableTable"]

T = TypeVar("T", bound="ReadableTable[Any]")


def _scaled(n: int) -> int:
    return n * GROWTH_NUMERATOR // GROWTH_DENOMINATOR


class ReadableTable(Generic[E]):
    """
    Dense 2D table with independent logical size and capacity, read-only API.

    Attributes:
        element_type (ElementType): Display label for the element kind.
        rows (int): Logical row count.
        cols (int): Logical column count.
        row_capacity (int): Allocated rows.
        col_capacity (int): Allocated columns (row stride of the backing list).

    Examples:
        >>> from densetable.core.readable import ReadableTable
        >>> t = ReadableTable.create_from_source([[1, 2, 3], [4, 5, 6]])
        >>> (t.rows, t.cols, t.row_capacity, t.col_capacity)
        (2, 3, 3, 4)
        >>> t.get(1, 2)
        6
        >>> t.get_col_clone(0)
        [1, 4]
    """

    def __init__(self, element_type: ElementType, store: FlatStore) -> None:
        self._element_type = element_type
        self._store = store
        self._formatter: TableFormatter[E] | None = None

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def _new(
        cls: type[T],
        element_type: ElementType,
        rows: int,
        cols: int,
        row_capacity: int,
        col_capacity: int,
    ) -> T:
        # no check
        return cls(element_type, FlatStore(row_capacity, col_capacity, rows, cols))

    @classmethod
    def create_empty(
        cls: type[T],
        element_type: ElementType = None,
        *,
        row_capacity: int = DEFAULT_ROW_CAPACITY,
        col_capacity: int = DEFAULT_COL_CAPACITY,
    ) -> T:
        """Build a 0x0 table at the default (or given) capacity."""
        _validate_dimensions(row_capacity, col_capacity)
        return cls._new(element_type, 0, 0, row_capacity, col_capacity)

    @classmethod
    def create_with_size(
        cls: type[T],
        rows: int,
        cols: int,
        default: Any = None,
        *,
        element_type: ElementType = None,
    ) -> T:
        """
        Build a rows x cols table with 3/2 capacity slack on each axis.

        Args:
            rows (int): Logical rows (>= 0).
            cols (int): Logical columns (>= 0).
            default (Any): Value for every logical cell; None leaves cells empty.
            element_type (ElementType): Display label.

        Returns:
            A table with row_capacity == rows * 3 // 2 and col_capacity == cols * 3 // 2.

        Raises:
            InvalidDimension: If rows or cols is negative.
        """
        _validate_dimensions(rows, cols)
        result = cls._new(element_type, rows, cols, _scaled(rows), _scaled(cols))
        if default is not None:
            store = result._store
            for r in range(rows):
                store.fill_row(r, default)
        return result

    @classmethod
    def create_with_capacity(
        cls: type[T], row_capacity: int, col_capacity: int, *, element_type: ElementType = None
    ) -> T:
        _validate_dimensions(row_capacity, col_capacity)
        return cls._new(element_type, 0, 0, row_capacity, col_capacity)

    @classmethod
    def create_with_size_capacity(
        cls: type[T],
        rows: int,
        cols: int,
        row_capacity: int,
        col_capacity: int,
        *,
        element_type: ElementType = None,
    ) -> T:
        """
        Build a rows x cols table at an explicit capacity.

        Raises:
            InvalidDimension: If any argument is negative.
            IllegalCapacity: If a capacity is smaller than its logical size.
        """
        _validate_dimensions(rows, cols)
        _validate_dimensions(row_capacity, col_capacity)
        if row_capacity < rows:
            raise IllegalCapacity(
                f"row capacity ({row_capacity}) cannot be smaller than logical row size ({rows})"
            )
        if col_capacity < cols:
            raise IllegalCapacity(
                f"col capacity ({col_capacity}) cannot be smaller than logical col size ({cols})"
            )
        return cls._new(element_type, rows, cols, row_capacity, col_capacity)

    @classmethod
    def create_from_source(
        cls: type[T], source: Sequence[Sequence[Any]], *, element_type: ElementType = None
    ) -> T:
        """
        Build a table holding a copy of a dense row-major 2D sequence.

        Args:
            source: Outer sequence of rows; every row must have the same length.
            element_type (ElementType): Display label.

        Returns:
            A table shaped len(source) x len(source[0]), sized as create_with_size().
            An empty source yields create_empty().

        Raises:
            InconsistentColumnSize: If any row length differs from the first row's.
        """
        rows = len(source)
        if rows == 0:
            return cls.create_empty(element_type)
        cols = len(source[0])
        for r in range(1, rows):
            if len(source[r]) != cols:
                raise InconsistentColumnSize(
                    f"at row {r}: expected {cols} columns, but found {len(source[r])}"
                )
        result = cls.create_with_size(rows, cols, element_type=element_type)
        store = result._store
        for r in range(rows):
            store.write_row(r, list(source[r]))
        return result

    @classmethod
    def create_copy(cls: type[T], other: ReadableTable[Any]) -> T:
        """Duplicate logical size, capacity, and all storage (slack included)."""
        return cls(other._element_type, other._store.clone())

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    @property
    def element_type(self) -> ElementType:
        return self._element_type

    @property
    def element_type_name(self) -> str:
        et = self._element_type
        if et is None:
            return UNKNOWN_ELEMENT_TYPE
        if isinstance(et, str):
            return et
        return et.__name__

    @property
    def rows(self) -> int:
        return self._store.rows

    @property
    def cols(self) -> int:
        return self._store.cols

    @property
    def row_capacity(self) -> int:
        return self._store.row_capacity

    @property
    def col_capacity(self) -> int:
        return self._store.col_capacity

    @property
    def version(self) -> int:
        """Mutation counter; changes whenever contents or shape change."""
        return self._store.version

    @property
    def formatter(self) -> TableFormatter[E]:
        """Formatter bound to this table, created with default options on first use."""
        if self._formatter is None:
            self._formatter = TableFormatter.create_default_from(self)
        return self._formatter

    def set_format_options(self, options: FormatOptions) -> None:
        """Replace the bound formatter with one using ``options``."""
        self._formatter = TableFormatter.create_default_from(self, options)

    def get(self, row: int, col: int) -> E:
        self._validate_row_index(row)
        self._validate_col_index(col)
        return self._store.raw_get(row, col)

    def get_row_clone(self, row: int) -> list[E]:
        self._validate_row_index(row)
        return self._store.read_row(row)

    def get_col_clone(self, col: int) -> list[E]:
        self._validate_col_index(col)
        store = self._store
        return [store.raw_get(r, col) for r in range(store.rows)]

    def get_underlying_clone(self) -> list[Any]:
        """Return the full backing buffer, capacity slack included."""
        return self._store.snapshot()

    def to_lists(self) -> list[list[E]]:
        """Return the logical contents as a list of row lists."""
        store = self._store
        return [store.read_row(r) for r in range(store.rows)]

    def is_index_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self._store.rows and 0 <= col < self._store.cols

    # ------------------------------------------------------------------
    # Transpose / copy
    # ------------------------------------------------------------------

    def transpose(self: T) -> T:
        """
        Return a new table with rows and columns swapped.

        Notes:
            The result keeps this table's capacity, transposed
            (row_capacity <- col_capacity, col_capacity <- row_capacity).
        """
        src = self._store
        result = type(self)._new(
            self._element_type, src.cols, src.rows, src.col_capacity, src.row_capacity
        )
        dst = result._store
        for r in range(src.rows):
            for c in range(src.cols):
                dst.raw_set(c, r, src.raw_get(r, c))
        return result

    def copy(self: T) -> T:
        return type(self).create_copy(self)

    def copy_and_trim(self: T) -> T:
        """Return a copy whose capacity equals its logical size."""
        src = self._store
        result = type(self)._new(self._element_type, src.rows, src.cols, src.rows, src.cols)
        dst = result._store
        for r in range(src.rows):
            dst.write_row(r, src.read_row(r))
        return result

    # ------------------------------------------------------------------
    # Common dunders
    # ------------------------------------------------------------------

    def render(self) -> str:
        return self.formatter.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}<{self.element_type_name}>("
            f"rows={self.rows}, cols={self.cols}, "
            f"row_capacity={self.row_capacity}, col_capacity={self.col_capacity})"
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ReadableTable):
            return NotImplemented
        a = self._store
        b = other._store
        if a.rows != b.rows or a.cols != b.cols:
            return False
        for r in range(a.rows):
            if a.read_row(r) != b.read_row(r):
                return False
        return True

    def __hash__(self) -> int:
        store = self._store
        cells = tuple(v for r in range(store.rows) for v in store.read_row(r))
        return hash((store.rows, store.cols, cells))

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def _validate_row_index(self, row: int) -> None:
        if row < 0 or row >= self._store.rows:
            raise IndexOutOfRange(f"row index {row} out of range [0, {self._store.rows})")

    def _validate_col_index(self, col: int) -> None:
        if col < 0 or col >= self._store.cols:
            raise IndexOutOfRange(f"col index {col} out of range [0, {self._store.cols})")

    def _validate_end_row_index(self, end: int) -> None:
        if end < 0 or end > self._store.rows:
            raise IllegalEndRowIndex(f"end row index {end} out of range [0, {self._store.rows}]")

    def _validate_end_col_index(self, end: int) -> None:
        if end < 0 or end > self._store.cols:
            raise IllegalEndColIndex(f"end col index {end} out of range [0, {self._store.cols}]")

    def _validate_row_begin_end(self, begin: int, end: int) -> None:
        self._validate_row_index(begin)
        self._validate_end_row_index(end)
        if begin >= end:
            raise EndBeforeBegin(
                f"end row index ({end}) must be larger than begin row index ({begin})"
            )

    def _validate_col_begin_end(self, begin: int, end: int) -> None:
        self._validate_col_index(begin)
        self._validate_end_col_index(end)
        if begin >= end:
            raise EndBeforeBegin(
                f"end col index ({end}) must be larger than begin col index ({begin})"
            )

    def _validate_row_vector(self, values: Sequence[Any]) -> None:
        if len(values) != self._store.cols:
            raise MismatchRowSize(f"expected {self._store.cols} values but {len(values)} were given")

    def _validate_col_vector(self, values: Sequence[Any]) -> None:
        if len(values) != self._store.rows:
            raise MismatchColSize(f"expected {self._store.rows} values but {len(values)} were given")

    def _validate_row_capacity(self, capacity: int) -> None:
        if capacity < self._store.rows:
            raise IllegalCapacity(
                f"new row capacity ({capacity}) cannot be smaller than "
                f"current logical row size ({self._store.rows})"
            )

    def _validate_col_capacity(self, capacity: int) -> None:
        if capacity < self._store.cols:
            raise IllegalCapacity(
                f"new col capacity ({capacity}) cannot be smaller than "
                f"current logical col size ({self._store.cols})"
            )


def _validate_non_negative(count: int) -> None:
    if count < 0:
        raise NegativeSize(f"given value {count} cannot be negative")


def _validate_dimensions(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise InvalidDimension(f"table dimensions must be non-negative: {rows} x {cols}")
