"""
densetable.io - configuration loading and polars interop for dense tables.

## Responsibilities
- Load TableSettings (default capacities, formatter options) with precedence env > TOML > defaults.
- Convert tables to and from polars DataFrames without exposing capacity slack.

## Public API
- TableSettings - frozen settings; create_empty()/apply_format() apply them to tables.
- table_to_frame / table_from_frame - DataFrame conversion helpers.

## Import DAG discipline
- Depends only on stdlib, pydantic, polars, and densetable.core.*.
- densetable.core must not import this package.

## Examples
```python
from densetable.io import TableSettings, table_to_frame
settings = TableSettings.load()
t = settings.create_empty(element_type=int)
t.add_cols(2).add_row([1, 2])
table_to_frame(t, columns=["a", "b"])  # shape: (1, 2)
```
"""

from __future__ import annotations

from .config import TableSettings
from .errors import FrameConversionError, TableConfigError, TableIoError
from .frames import default_column_names, table_from_frame, table_to_frame

__all__ = [
    "TableSettings",
    "TableIoError",
    "TableConfigError",
    "FrameConversionError",
    "default_column_names",
    "table_to_frame",
    "table_from_frame",
]
