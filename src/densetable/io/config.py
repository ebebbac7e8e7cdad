"""
Configuration for densetable.

Defines TableSettings, a frozen dataclass carrying the defaults used when building
empty tables and rendering them. Defaults are sourced from densetable.core.constants
(the single source of truth) and may be overridden from the environment or TOML.

Source of truth
- densetable.core.constants.DEFAULT_ROW_CAPACITY, DEFAULT_COL_CAPACITY,
  DEFAULT_NULL_REPR, DEFAULT_INDENT_SIZE
- Formatter option validation: densetable.core.options.FormatOptions (pydantic)

Import DAG discipline
- Depends only on stdlib, pydantic, and densetable.core.

Notes
- Precedence: env > TOML > defaults (see TableSettings.load).
- Unparseable integers are ignored; values rejected by FormatOptions raise TableConfigError.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

try:  # Python 3.11+ stdlib TOML parser
    import tomllib  # type: ignore
except Exception:  # pragma: no cover - environments without tomllib
    tomllib = None  # type: ignore[assignment]

from pydantic import ValidationError

from densetable.core.constants import DEFAULT_COL_CAPACITY, DEFAULT_ROW_CAPACITY
from densetable.core.options import FormatOptions
from densetable.core.readable import ReadableTable
from densetable.core.table import Table
from densetable.core.typing import ElementType

from .errors import TableConfigError

_FORMAT_KEYS = ("null_repr", "indent_size")


@dataclass(frozen=True)
class TableSettings:
    """
    Runtime settings for building and rendering tables.

    Attributes:
        default_row_capacity (int): Row capacity of tables from create_empty().
        default_col_capacity (int): Column capacity of tables from create_empty().
        format (FormatOptions): Formatter options (null text, row indent).

    Examples:
        >>> from densetable.io import TableSettings
        >>> s = TableSettings(default_row_capacity=8)
        >>> s.create_empty().row_capacity
        8
    """

    default_row_capacity: int = DEFAULT_ROW_CAPACITY
    default_col_capacity: int = DEFAULT_COL_CAPACITY
    format: FormatOptions = field(default_factory=FormatOptions)

    def create_empty(
        self, table_cls: type[ReadableTable[Any]] = Table, element_type: ElementType = None
    ) -> Any:
        """Build an empty table at the configured capacity with the configured formatter."""
        table = table_cls.create_empty(
            element_type,
            row_capacity=self.default_row_capacity,
            col_capacity=self.default_col_capacity,
        )
        table.set_format_options(self.format)
        return table

    def apply_format(self, table: ReadableTable[Any]) -> None:
        table.set_format_options(self.format)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: TableSettings, cfg: dict[str, Any] | None) -> TableSettings:
        """Apply a loose config mapping onto TableSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        for key in ("default_row_capacity", "default_col_capacity"):
            if key in cfg:
                try:
                    value = int(cfg[key])
                except (TypeError, ValueError):
                    continue
                if value >= 0:
                    s = replace(s, **{key: value})

        # format options: flat keys or a nested [format] mapping
        fmt: dict[str, Any] = {}
        nested = cfg.get("format")
        if isinstance(nested, dict):
            fmt.update(nested)
        for key in _FORMAT_KEYS:
            if key in cfg:
                fmt[key] = cfg[key]
        if fmt:
            merged = {**s.format.model_dump(), **fmt}
            try:
                s = replace(s, format=FormatOptions.model_validate(merged))
            except ValidationError as exc:
                raise TableConfigError(f"invalid format options: {exc}") from exc

        return s

    @classmethod
    def from_env(cls, base: TableSettings | None = None, prefix: str = "DENSETABLE_") -> TableSettings:
        """
        Build TableSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - DENSETABLE_DEFAULT_ROW_CAPACITY
            - DENSETABLE_DEFAULT_COL_CAPACITY
            - DENSETABLE_NULL_REPR
            - DENSETABLE_INDENT_SIZE
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("DEFAULT_ROW_CAPACITY")
        if v:
            mapping["default_row_capacity"] = v
        v = get("DEFAULT_COL_CAPACITY")
        if v:
            mapping["default_col_capacity"] = v
        v = get("NULL_REPR")
        if v is not None:
            mapping["null_repr"] = v
        v = get("INDENT_SIZE")
        if v:
            mapping["indent_size"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> TableSettings:
        """
        Build TableSettings from a TOML file.

        Search order when `path` is None:
            1) ./densetable.toml (with either a top-level [table] table or direct keys)
            2) ./pyproject.toml under [tool.densetable]

        Returns defaults if no file is present or tomllib is unavailable.
        """
        s = cls()
        if tomllib is None:
            return s

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)  # type: ignore[arg-type]
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "densetable.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("densetable") if isinstance(tool, dict) else None
            elif "table" in data and isinstance(data["table"], dict):
                cfg = data["table"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> TableSettings:
        """
        Load TableSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (densetable.toml, pyproject.toml).

        Returns:
            TableSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
