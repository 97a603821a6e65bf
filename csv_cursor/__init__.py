"""
csv-cursor: cursor-driven CSV field reader with typed extraction.

Public API surface:

- ``FieldCursorParser`` -- the core.  Holds one text buffer and a
  cursor; ``next_string()`` and the typed ``next_*`` readers pull one
  field at a time, ``total_columns()`` counts the first row's columns.

- ``read_table(path, config)`` -- drive a parser over every line of a
  file and collect typed rows into a ``pandas.DataFrame``.

- ``LineFile`` -- line source / line sink over one file.

- ``PromptService`` -- ask for typed values on an explicit text stream
  until valid input is given.

- ``load_config`` / ``save_config`` / ``generate_default_config`` --
  YAML table configs.

- ``export_table`` -- write a table as CSV or Parquet.
"""

from __future__ import annotations

from csv_cursor.config import (
    OutputConfig,
    ParserConfig,
    TableConfig,
    generate_default_config,
    load_config,
    save_config,
)
from csv_cursor.exceptions import (
    ConfigValidationError,
    CsvCursorError,
    ExportError,
    InputExhaustedError,
    OutOfRangeError,
    ParseError,
    RowError,
)
from csv_cursor.export import export_table
from csv_cursor.lines import LineFile
from csv_cursor.parser import FieldCursorParser
from csv_cursor.prompt import PromptConfig, PromptService
from csv_cursor.table import ReadResult, read_lines, read_table

__all__ = [
    "FieldCursorParser",
    "LineFile",
    "PromptService",
    "PromptConfig",
    "ParserConfig",
    "OutputConfig",
    "TableConfig",
    "ReadResult",
    "read_table",
    "read_lines",
    "export_table",
    "load_config",
    "save_config",
    "generate_default_config",
    "CsvCursorError",
    "OutOfRangeError",
    "ParseError",
    "RowError",
    "ConfigValidationError",
    "InputExhaustedError",
    "ExportError",
]
