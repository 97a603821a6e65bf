"""
Configuration models and YAML I/O for csv-cursor.

This module defines the Pydantic models that map 1:1 to a table config
YAML file, plus helper functions for loading, saving, and generating a
starting config from a header row.

Key models:
- ParserConfig: Behaviour switches of the field cursor parser.
- OutputConfig: Output directory and format for exported tables.
- TableConfig: Top-level config (columns + header handling + parser + output).

Key functions:
- load_config(path) -> TableConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(header_line) -> TableConfig: All-string columns
  named after a header row.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from csv_cursor.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

ColumnType = Literal["string", "short", "integer", "long", "float", "double"]


class ParserConfig(BaseModel):
    """Behaviour switches for ``FieldCursorParser``.

    The defaults reproduce the historical parser exactly.  Each switch
    selects a stricter variant.
    """

    skip_empty_fields: bool = Field(
        True,
        description=(
            "If True, the trim phase skips commas as well as spaces, so "
            "empty fields ('a,,b') are collapsed. If False, only spaces are "
            "skipped and empty fields are returned as ''"
        ),
    )
    cursor_bounds: Literal["current", "target"] = Field(
        "current",
        description=(
            "Which position set_cursor() validates: 'current' checks the "
            "cursor before the move, 'target' checks the requested position"
        ),
    )


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )


class TableConfig(BaseModel):
    """Top-level configuration for reading one CSV file into a table.

    ``columns`` is ordered: the n-th entry types the n-th field of
    every row.
    """

    columns: dict[str, ColumnType] = Field(
        ..., description="Column name -> column type, in field order"
    )
    skip_header: bool = Field(
        False, description="If True, the first line of the source is ignored"
    )
    on_error: Literal["raise", "skip"] = Field(
        "raise",
        description="'raise' aborts on the first bad row, 'skip' logs and drops it",
    )
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @model_validator(mode="after")
    def _check_columns_not_empty(self) -> TableConfig:
        """Validate that at least one column is declared."""
        if not self.columns:
            raise ValueError(
                "Table config has no columns. "
                "Declare at least one 'name: type' entry under 'columns'."
            )
        return self


def load_config(path: str | Path) -> TableConfig:
    """Load and validate a table config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return TableConfig.model_validate(raw)


def save_config(config: TableConfig, path: str | Path) -> None:
    """Serialize a TableConfig to YAML.

    Writes a human-readable YAML file with a header comment.  Column
    order is preserved.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# csv-cursor table configuration\n")
        f.write("# Edit this file to set column types, error handling, etc.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    header_line: str,
    output_dir: str = "outputs/",
    parser_config: ParserConfig | None = None,
) -> TableConfig:
    """Build a TableConfig from a header row (used on first run).

    The header is split with the cursor parser itself, so the column
    names are exactly what ``next_string()`` would return for that
    line.  Every column is typed ``"string"``; edit the saved YAML to
    narrow the types.

    Args:
        header_line: The first line of the CSV file.
        output_dir: Where exported tables should be written.
        parser_config: Parser switches to store in the config.

    Returns:
        A TableConfig with ``skip_header=True``.

    Raises:
        ConfigValidationError: If the header yields no column names, an
            empty name, or a repeated name.
    """
    # Local import: parser imports ParserConfig from this module
    from csv_cursor.parser import FieldCursorParser

    parser_config = parser_config or ParserConfig()
    names = FieldCursorParser(header_line, parser_config).read_fields()
    if not names or "" in names:
        raise ConfigValidationError(
            f"Header line has missing column names: {header_line!r}"
        )
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ConfigValidationError(
            f"Header line repeats column names: {duplicates}"
        )
    return TableConfig(
        columns={name: "string" for name in names},
        skip_header=True,
        parser=parser_config,
        output=OutputConfig(output_dir=output_dir),
    )
