"""
Core package aggregator for densetable (storage, read/mutate API, formatting, errors).

## Contracts (single source of truth)
- FlatStore - flat backing list, logical size vs. capacity, flat-index law
  ``flat(r, c) = r * col_capacity + c``, reallocation shapes, version counter.
- ReadableTable - factories, bounds-checked reads, snapshots, transpose-as-copy,
  copy/copy_and_trim, structural equality and hash.
- Table - set, add/remove rows and columns, resize, in-place transpose, capacity
  management with 3/2 amortized growth.
- TableFormatter / FormatOptions - cached column widths and text rendering.
- Errors/Constants/Typing - exception taxonomy, defaults, aliases.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Capacity slack is never exposed through reads other than get_underlying_clone().
- Validation always runs before mutation; a raised error leaves the table unchanged.

## Downstream usage
- densetable.io - loads TableSettings (env > TOML > defaults) and converts tables
  to and from polars DataFrames.

## Examples
```python
from densetable.core import Table
t = Table.create_from_source([[1, 2, 3], [4, 5, 6]], element_type=int)
t.add_row([7, 8, 9]).remove_row(0)
t.get(0, 2)  # 6
print(t)     # Table<int>: 2 x 3 (capacity: 3 x 4) [ ... ]
```
"""

from __future__ import annotations

from .errors import (
    EndBeforeBegin,
    IllegalCapacity,
    IllegalEndIndex,
    IllegalEndRowIndex,
    IllegalEndColIndex,
    InconsistentColumnSize,
    IndexOutOfRange,
    InvalidDimension,
    InvalidFormatterState,
    MismatchColSize,
    MismatchRowSize,
    NegativeSize,
    NotSquare,
    TableError,
)
from .formatter import TableFormatter
from .options import FormatOptions
from .readable import ReadableTable
from .store import FlatStore
from .table import Table

__all__ = [
    "FlatStore",
    "ReadableTable",
    "Table",
    "TableFormatter",
    "FormatOptions",
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
