"""
Table reader for csv-cursor.

Turns lines of CSV text into a typed ``pandas.DataFrame`` by driving a
single reusable ``FieldCursorParser`` over them:

1. Skip the header line if ``TableConfig.skip_header`` is set.
2. Ignore blank lines.
3. ``set_text(line)`` and compare ``total_columns()`` with the number
   of configured columns.
4. Read one typed value per column with ``next_value()``.

Any failure on a line is wrapped in ``RowError`` carrying the 1-based
line number.  With ``on_error="raise"`` (default) the first failure
aborts the read; with ``on_error="skip"`` the row is logged and dropped.

Because the parser collapses empty fields by default, a row such as
``"1,,3"`` passes the column-count check but runs out of fields; it is
reported as a ``RowError`` rather than filled with a default.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

import pandas as pd

from csv_cursor.config import ColumnType, TableConfig
from csv_cursor.exceptions import CsvCursorError, RowError
from csv_cursor.lines import LineFile
from csv_cursor.parser import FieldCursorParser

logger = logging.getLogger(__name__)

# Column type -> pandas dtype of the resulting DataFrame column
_DTYPES: dict[str, str] = {
    "string": "object",
    "short": "int16",
    "integer": "int32",
    "long": "int64",
    "float": "float32",
    "double": "float64",
}


@dataclass
class ReadResult:
    """Result of reading a CSV source into a table."""
    df: pd.DataFrame
    rows_read: int
    rows_skipped: int


def parse_row(
    parser: FieldCursorParser,
    columns: dict[str, ColumnType],
) -> list[Any]:
    """Read one typed value per column from the parser's current text.

    The parser must already hold the row (``set_text``).  Fields beyond
    the declared columns are rejected by the column-count check.

    Raises:
        RowError: If the row's column count does not match.
        OutOfRangeError: If the row runs out of fields.
        ParseError: If a field does not convert to its column type.
    """
    found = parser.total_columns()
    if found != len(columns):
        raise RowError(f"expected {len(columns)} columns, found {found}")
    return [parser.next_value(column_type) for column_type in columns.values()]


def read_lines(lines: Iterable[str], config: TableConfig) -> ReadResult:
    """Parse an iterable of CSV lines into a typed DataFrame.

    Args:
        lines: Lines of CSV text, without line terminators.
        config: Column types, header handling and error policy.

    Returns:
        ReadResult with the DataFrame and row counts.

    Raises:
        RowError: On the first bad row, when ``on_error="raise"``.
    """
    parser = FieldCursorParser(config=config.parser)
    names = list(config.columns)
    data: dict[str, list[Any]] = {name: [] for name in names}
    rows_read = 0
    rows_skipped = 0

    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 and config.skip_header:
            logger.debug("Skipping header line: %r", line)
            continue
        if not line.strip():
            continue

        parser.set_text(line)
        try:
            values = parse_row(parser, config.columns)
        except CsvCursorError as exc:
            reason = exc.reason if isinstance(exc, RowError) else str(exc)
            error = RowError(reason, line_number=line_number)
            if config.on_error == "raise":
                raise error from exc
            logger.warning("Skipping row: %s", error)
            rows_skipped += 1
            continue

        for name, value in zip(names, values):
            data[name].append(value)
        rows_read += 1

    df = pd.DataFrame(data, columns=names).astype(
        {name: _DTYPES[column_type] for name, column_type in config.columns.items()}
    )
    logger.info(
        "Read %d rows (%d skipped) into %d columns",
        rows_read,
        rows_skipped,
        len(names),
    )
    return ReadResult(df=df, rows_read=rows_read, rows_skipped=rows_skipped)


def read_table(path: str | Path, config: TableConfig) -> ReadResult:
    """Read a CSV file line by line into a typed DataFrame.

    Raises:
        FileNotFoundError: If *path* does not exist.
        RowError: On the first bad row, when ``on_error="raise"``.
    """
    logger.info("Reading table from %s", path)
    with LineFile(path) as source:
        return read_lines(source, config)
