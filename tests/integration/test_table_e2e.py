"""
End-to-end tests: CSV file -> generated config -> typed table -> export.

Mirrors the workflow of scripts/read_table.py using tmp_path for all
files so no real inputs are needed.
"""

from __future__ import annotations

import pandas as pd
import pytest

import csv_cursor
from tests.conftest import PEOPLE_HEADER, PEOPLE_ROWS

pytestmark = pytest.mark.integration


class TestFirstRun:
    """Generate a config from the header, then read with all-string columns."""

    def test_generated_config_reads_strings(self, people_csv, tmp_path):
        with csv_cursor.LineFile(people_csv) as source:
            header = source.read_line()
        assert header == PEOPLE_HEADER

        config = csv_cursor.generate_default_config(
            header, output_dir=str(tmp_path / "out")
        )
        config_path = tmp_path / "people.yaml"
        csv_cursor.save_config(config, config_path)

        result = csv_cursor.read_table(people_csv, csv_cursor.load_config(config_path))
        assert result.rows_read == len(PEOPLE_ROWS)
        assert result.df["age"].tolist() == ["34", "41", "29"]


class TestTypedRun:
    """Edit column types, re-read, export and reload."""

    def _typed_config(self, tmp_path, output_format: str) -> csv_cursor.TableConfig:
        return csv_cursor.TableConfig(
            columns={
                "name": "string",
                "age": "short",
                "height": "float",
                "balance": "double",
            },
            skip_header=True,
            output=csv_cursor.OutputConfig(
                output_dir=str(tmp_path / "out"), output_format=output_format
            ),
        )

    def test_parquet_round_trip(self, people_csv, tmp_path):
        config = self._typed_config(tmp_path, "parquet")
        result = csv_cursor.read_table(people_csv, config)
        path = csv_cursor.export_table(
            result.df, config.output.output_dir, "people", config.output.output_format
        )

        loaded = pd.read_parquet(path)
        assert loaded["age"].dtype == "int16"
        assert loaded["height"].dtype == "float32"
        assert loaded["balance"].tolist() == [1024.50, -20.25, 0.0]

    def test_csv_export_reads_back_through_parser(self, people_csv, tmp_path):
        """A CSV written by export_table is readable by read_table again."""
        config = self._typed_config(tmp_path, "csv")
        first = csv_cursor.read_table(people_csv, config)
        path = csv_cursor.export_table(
            first.df, config.output.output_dir, "people", "csv"
        )

        second = csv_cursor.read_table(path, config)
        assert second.rows_read == first.rows_read
        assert second.df["name"].tolist() == first.df["name"].tolist()
        assert second.df["age"].tolist() == first.df["age"].tolist()

    def test_skip_policy_on_dirty_file(self, tmp_path):
        path = tmp_path / "dirty.csv"
        with csv_cursor.LineFile(path) as sink:
            sink.write_line(PEOPLE_HEADER)
            sink.write_line(PEOPLE_ROWS[0])
            sink.write_line("Broken,abc,1.5,2")
            sink.write_line("")
            sink.write_line(PEOPLE_ROWS[1])

        config = self._typed_config(tmp_path, "csv").model_copy(
            update={"on_error": "skip"}
        )
        result = csv_cursor.read_table(path, config)
        assert result.rows_read == 2
        assert result.rows_skipped == 1
        assert result.df["name"].tolist() == ["Alice", "Bob"]
