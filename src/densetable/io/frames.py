"""
polars interop for dense tables.

Overview
- table_to_frame: one DataFrame column per logical table column, rows in order.
- table_from_frame: one table row per DataFrame row, built via create_from_source().

Notes
- Only the logical region is exported; capacity slack never reaches the frame.
- None cells become polars nulls and back.
- Columns are built strictly; mixed-type columns raise instead of being coerced.
- A frame with no rows or no columns keeps its shape (e.g. 0 x 3).
- Column names default to column_0 .. column_{cols-1}.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

import polars as pl

from densetable.core.readable import ReadableTable
from densetable.core.table import Table
from densetable.core.typing import ElementType

from .errors import FrameConversionError

__all__ = [
    "default_column_names",
    "table_to_frame",
    "table_from_frame",
]

T = TypeVar("T", bound=ReadableTable[Any])


def default_column_names(n: int) -> list[str]:
    """Return ['column_0', ..., 'column_{n-1}']."""
    return [f"column_{c}" for c in range(n)]


def table_to_frame(table: ReadableTable[Any], columns: Sequence[str] | None = None) -> pl.DataFrame:
    """
    Export the logical contents of a table as a polars DataFrame.

    Args:
        table: Source table.
        columns: Optional column names; must have exactly table.cols entries.

    Returns:
        pl.DataFrame with table.rows rows and table.cols columns.

    Raises:
        FrameConversionError: If len(columns) != table.cols, or a column mixes
            values that polars cannot hold in a single dtype.
    """
    names = list(columns) if columns is not None else default_column_names(table.cols)
    if len(names) != table.cols:
        raise FrameConversionError(
            f"expected {table.cols} column names but {len(names)} were given"
        )
    data = {name: table.get_col_clone(c) for c, name in enumerate(names)}
    try:
        return pl.DataFrame(data, strict=True)
    except (TypeError, ValueError, pl.exceptions.PolarsError) as exc:
        raise FrameConversionError(f"table column values do not share one polars dtype: {exc}") from exc


def table_from_frame(
    df: pl.DataFrame,
    *,
    element_type: ElementType = None,
    table_cls: type[T] = Table,  # type: ignore[assignment]
) -> T:
    """
    Build a table from the rows of a polars DataFrame.

    Args:
        df: Source frame. Column order becomes table column order.
        element_type: Display label for the table.
        table_cls: Table or ReadableTable (or a subclass).

    Returns:
        A table shaped df.height x df.width, sized as create_with_size().
    """
    if df.width == 0 or df.height == 0:
        return table_cls.create_with_size(df.height, df.width, element_type=element_type)
    return table_cls.create_from_source(df.rows(), element_type=element_type)
