"""
densetable - mutable dense 2D tables with independent logical size and capacity.

## Packages
- densetable.core - storage, read/mutate API, formatter, errors (zero-IO).
- densetable.io - settings loading and polars interop.
"""

from __future__ import annotations

from .core import (
    FormatOptions,
    ReadableTable,
    Table,
    TableError,
    TableFormatter,
)

__all__ = [
    "ReadableTable",
    "Table",
    "TableFormatter",
    "FormatOptions",
    "TableError",
]

__version__ = "0.1.0"
