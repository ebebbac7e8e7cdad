import pytest
from pydantic import ValidationError

from densetable.core.options import FormatOptions


def test_defaults() -> None:
    opts = FormatOptions()
    assert opts.null_repr == "null"
    assert opts.indent_size == 2


def test_rejects_negative_indent() -> None:
    with pytest.raises(ValidationError):
        FormatOptions(indent_size=-1)


def test_rejects_unknown_field() -> None:
    with pytest.raises(ValidationError):
        FormatOptions(padding=3)  # type: ignore[call-arg]


def test_is_frozen() -> None:
    opts = FormatOptions()
    with pytest.raises(ValidationError):
        opts.null_repr = "-"  # type: ignore[misc]


def test_coerces_numeric_strings() -> None:
    assert FormatOptions.model_validate({"indent_size": "4"}).indent_size == 4
