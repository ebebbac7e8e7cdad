"""
Column-aligned text rendering for dense tables with cached column widths.

Output layout
    Table<E>: R x C (capacity: RC x CC) [
      [ a , b ],
      [ c , d ]
    ]

- Each cell is centered in its column: left pad (W - L) // 2 + 1 spaces,
  right pad ceil((W - L) / 2) + 1 spaces.
- Column width W is the longest str() of the logical cells in that column;
  None cells count as len(null_repr).
- Zero rows render "(empty)"; a row of a zero-column table renders "[ (empty row) ]".

Caching
- Widths are cached in a list sized to the table's col_capacity.
- The cache is dirty when the table's version differs from the version seen at the
  last computation, or after handle_table_change().
- Capacity slack is never read.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any, Generic, Protocol

from .errors import InvalidFormatterState
from .options import FormatOptions
from .typing import E

if TYPE_CHECKING:
    from .readable import ReadableTable

__all__ = ["TableFormatter"]


class _Writer(Protocol):
    def write(self, s: str, /) -> Any: ...


class TableFormatter(Generic[E]):
    """
    Renders a table as bracketed, centered, comma-separated text.

    Attributes:
        options (FormatOptions): Null text and row indent.
        col_widths (list[int] | None): Cached width per column, sized to col_capacity.
        col_widths_len (int): Number of valid entries in col_widths.
        use_default_widths (bool): When False, calc_col_widths() bypasses the cache.

    Examples:
        >>> from densetable import Table
        >>> t = Table.create_from_source([[1, 22], [333, None]], element_type=int)
        >>> print(t.formatter.render())
        Table<int>: 2 x 2 (capacity: 3 x 3) [
          [  1  ,  22  ],
          [ 333 , null ]
        ]
    """

    def __init__(
        self,
        table: ReadableTable[E] | None,
        options: FormatOptions,
        col_widths: list[int] | None,
        col_widths_len: int,
        use_default_widths: bool,
    ) -> None:
        self._table = table
        self.options = options
        self.col_widths = col_widths
        self.col_widths_len = col_widths_len
        self.use_default_widths = use_default_widths
        self._seen_version: int | None = None

    @classmethod
    def create_default(cls, options: FormatOptions | None = None) -> TableFormatter[Any]:
        """Build a formatter not attached to any table."""
        return cls(None, options or FormatOptions(), None, 0, True)

    @classmethod
    def create_default_from(
        cls, table: ReadableTable[E], options: FormatOptions | None = None
    ) -> TableFormatter[E]:
        return cls(table, options or FormatOptions(), [0] * table.col_capacity, table.cols, True)

    @property
    def table(self) -> ReadableTable[E] | None:
        return self._table

    @property
    def dirty(self) -> bool:
        table = self._require_table()
        return self._seen_version != table.version

    # ------------------------------------------------------------------
    # Public rendering API
    # ------------------------------------------------------------------

    def render(self) -> str:
        self._require_table()
        self._update_col_widths()
        buf = io.StringIO()
        self._append_table_repr(buf)
        return buf.getvalue()

    def append_table_repr(self, buf: _Writer) -> None:
        self._require_table()
        self._update_col_widths()
        self._append_table_repr(buf)

    def append_header(self, buf: _Writer) -> None:
        self._require_table()
        self._update_col_widths()
        self._append_header(buf)

    def append_data_row(self, buf: _Writer, row: int) -> None:
        table = self._require_table()
        table._validate_row_index(row)
        self._update_col_widths()
        self._append_data_row(buf, self._widths(), row)

    def append_data_cell(self, buf: _Writer, row: int, col: int) -> None:
        table = self._require_table()
        table._validate_row_index(row)
        table._validate_col_index(col)
        self._update_col_widths()
        self._append_data_cell(buf, self._widths(), row, col)

    def calc_col_widths(self) -> list[int]:
        """Return the width of each logical column."""
        table = self._require_table()
        if self.use_default_widths:
            self._update_col_widths()
            return self._widths()[: table.cols]
        result = [0] * table.cols
        self._calc_col_widths_into(result)
        return result

    def handle_table_change(self) -> None:
        # mark all cache outdated
        self._seen_version = None

    # ------------------------------------------------------------------
    # Cache maintenance
    # ------------------------------------------------------------------

    def _update_col_widths(self) -> None:
        table = self._require_table()
        if not self.use_default_widths or self._seen_version == table.version:
            return
        if self.col_widths is None or len(self.col_widths) < table.cols:
            self.col_widths = [0] * table.col_capacity
        self.col_widths_len = table.cols
        self._calc_col_widths_into(self.col_widths)
        self._seen_version = table.version

    def _widths(self) -> list[int]:
        if self.use_default_widths and self.col_widths is not None:
            return self.col_widths
        table = self._require_table()
        result = [0] * table.cols
        self._calc_col_widths_into(result)
        return result

    def _calc_col_widths_into(self, result: list[int]) -> None:
        table = self._require_table()
        store = table._store
        null_len = len(self.options.null_repr)
        cols = store.cols
        for c in range(cols):
            result[c] = 0
        for r in range(store.rows):
            for c, value in enumerate(store.read_row(r)):
                width = null_len if value is None else len(str(value))
                if width > result[c]:
                    result[c] = width

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def _append_table_repr(self, buf: _Writer) -> None:
        self._append_header(buf)
        buf.write(" [\n")
        self._append_data_mat(buf)
        buf.write("\n]")

    def _append_header(self, buf: _Writer) -> None:
        table = self._require_table()
        buf.write(
            f"Table<{table.element_type_name}>: {table.rows} x {table.cols} "
            f"(capacity: {table.row_capacity} x {table.col_capacity})"
        )

    def _append_data_mat(self, buf: _Writer) -> None:
        table = self._require_table()
        if table.rows == 0:
            buf.write("(empty)")
            return
        widths = self._widths()
        indent = " " * self.options.indent_size
        for r in range(table.rows):
            if r:
                buf.write(",\n")
            buf.write(indent)
            self._append_data_row(buf, widths, r)

    def _append_data_row(self, buf: _Writer, widths: list[int], row: int) -> None:
        table = self._require_table()
        if table.cols == 0:
            buf.write("[ (empty row) ]")
            return
        buf.write("[")
        for c in range(table.cols):
            if c:
                buf.write(",")
            self._append_data_cell(buf, widths, row, c)
        buf.write("]")

    def _append_data_cell(self, buf: _Writer, widths: list[int], row: int, col: int) -> None:
        table = self._require_table()
        value = table._store.raw_get(row, col)
        s = self.options.null_repr if value is None else str(value)
        gap = widths[col] - len(s)
        # floor div + 1 on the left, ceil div + 1 on the right
        buf.write(" " * (gap // 2 + 1))
        buf.write(s)
        buf.write(" " * ((gap + 1) // 2 + 1))

    def _require_table(self) -> ReadableTable[E]:
        if self._table is None:
            raise InvalidFormatterState("formatter is not attached to a table")
        return self._table
