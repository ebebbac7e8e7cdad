"""
Pydantic v2 model for table formatter options.

Responsibilities
- Declare the rendering knobs consumed by TableFormatter (null text, row indent).
- Validate values loaded from configuration (densetable.io.config) or passed directly.

Style
- Zero-IO (stdlib + pydantic only).
- Frozen and extra="forbid" so that typos in configuration mappings surface early.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_INDENT_SIZE, DEFAULT_NULL_REPR

__all__ = ["FormatOptions"]


class FormatOptions(BaseModel):
    """
    Rendering options for a TableFormatter.

    Attributes:
        null_repr (str): Text rendered for empty (None) cells. Its length also
            counts toward column widths.
        indent_size (int): Spaces written before each data row (>= 0).

    Raises:
        pydantic.ValidationError: If indent_size is negative or an unknown field is given.

    Examples:
        >>> from densetable.core.options import FormatOptions
        >>> FormatOptions().null_repr
        'null'
        >>> FormatOptions(null_repr="-", indent_size=4).indent_size
        4
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    null_repr: str = DEFAULT_NULL_REPR
    indent_size: int = Field(default=DEFAULT_INDENT_SIZE, ge=0)
