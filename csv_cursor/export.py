"""
Table export for csv-cursor.

``export_table`` saves the DataFrame built by ``table.read_table()`` as
``{output_dir}/{table_name}.csv`` or ``.parquet``.

Parquet keeps the narrow dtypes picked from the column types (int16,
float32, ...), so the file can be re-loaded without the table config.
CSV output carries a BOM; ``LineFile`` drops it again, so an exported
CSV can be fed straight back into ``read_table()``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Literal

import pandas as pd

from csv_cursor.exceptions import ExportError

logger = logging.getLogger(__name__)

# Output format -> writer taking (df, path)
_WRITERS: dict[str, Callable[[pd.DataFrame, Path], None]] = {
    "csv": lambda df, path: df.to_csv(path, index=False, encoding="utf-8-sig"),
    "parquet": lambda df, path: df.to_parquet(path, index=False, engine="pyarrow"),
}


def export_table(
    df: pd.DataFrame,
    output_dir: str | Path,
    table_name: str,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> str:
    """Save *df* as ``{output_dir}/{table_name}.{output_format}``.

    Missing directories are created.

    Returns:
        The path of the written file, as a string.

    Raises:
        ExportError: If *output_format* is unknown or the write fails.
    """
    writer = _WRITERS.get(output_format)
    if writer is None:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_WRITERS)}"
        )

    file_path = Path(output_dir) / f"{table_name}.{output_format}"
    file_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        writer(df, file_path)
    except Exception as exc:
        raise ExportError(
            f"Failed to write {file_path.name} as {output_format}: {exc}"
        ) from exc

    logger.info(
        "Exported %d rows x %d columns to %s", len(df), len(df.columns), file_path
    )
    return str(file_path)
