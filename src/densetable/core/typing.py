"""
Lightweight typing aliases used across the table modules.

This module contains no runtime logic and is zero-IO.

Examples:
    >>> from densetable.core.typing import Matrix
    >>> grid: Matrix[int] = [[1, 2], [3, 4]]
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar, Union

__all__ = [
    "E",
    "ElementType",
    "Matrix",
]

E = TypeVar("E")

# Display label for a table's element kind: a class, an explicit name, or unknown.
ElementType = Union[type, str, None]

# Dense row-major 2D source accepted by create_from_source().
Matrix = Sequence[Sequence[E]]
