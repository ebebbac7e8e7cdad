"""
densetable core defaults.

Defines default capacities, the growth factor, and formatter defaults consumed by
the table and formatter modules and by densetable.io.config. This module is zero-IO
and uses only the Python standard library.

Notes:
    - Capacity rounding is floor: ``n * GROWTH_NUMERATOR // GROWTH_DENOMINATOR``.
    - Growth never yields less than the required capacity (see Table._grown).
    - Changes to these constants change the rendered capacity in table headers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ROW_CAPACITY",
    "DEFAULT_COL_CAPACITY",
    "GROWTH_NUMERATOR",
    "GROWTH_DENOMINATOR",
    "DEFAULT_NULL_REPR",
    "DEFAULT_INDENT_SIZE",
    "UNKNOWN_ELEMENT_TYPE",
]

# Capacity of a table built with create_empty().
DEFAULT_ROW_CAPACITY: int = 5
DEFAULT_COL_CAPACITY: int = 5

# Capacity growth factor 3/2, applied on overflow and by create_with_size().
GROWTH_NUMERATOR: int = 3
GROWTH_DENOMINATOR: int = 2

# Text shown for empty (None) cells.
DEFAULT_NULL_REPR: str = "null"

# Spaces before each data row in a rendered table.
DEFAULT_INDENT_SIZE: int = 2

# Header label when a table carries no element type.
UNKNOWN_ELEMENT_TYPE: str = "Unknown"
