"""
Demo script: read a CSV file into a typed table and export it.

Usage:
    uv run python scripts/read_table.py inputs/people.csv            # reuse config if present
    uv run python scripts/read_table.py inputs/people.csv --force    # regenerate config

On first run the header line is used to generate ``{stem}.yaml`` under
outputs/ with every column typed as "string".  Edit that file to set
real column types, then run again.  Pass --force to regenerate it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("read_table")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import csv_cursor

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    force = "--force" in sys.argv
    if not args:
        log.error("Usage: read_table.py INPUT_CSV [--force]")
        sys.exit(2)

    input_path = Path(args[0])
    if not input_path.exists():
        log.error("Input file not found: %s", input_path)
        sys.exit(1)

    name = input_path.stem
    config_path = OUTPUT_ROOT / f"{name}.yaml"

    if force or not config_path.exists():
        with csv_cursor.LineFile(input_path) as source:
            header = source.read_line()
        config = csv_cursor.generate_default_config(
            header, output_dir=str(OUTPUT_ROOT / name)
        )
        csv_cursor.save_config(config, config_path)
        log.info("Generated config %s -- edit column types and re-run", config_path)
    else:
        config = csv_cursor.load_config(config_path)

    result = csv_cursor.read_table(input_path, config)
    log.info("  rows read    : %s", f"{result.rows_read:,}")
    log.info("  rows skipped : %s", f"{result.rows_skipped:,}")

    written = csv_cursor.export_table(
        result.df,
        config.output.output_dir,
        name,
        config.output.output_format,
    )
    log.info("Done: %s", written)


if __name__ == "__main__":
    main()
