"""
Shared test fixtures for csv-cursor tests.

Sample CSV content is defined here as module-level constants so unit
and integration tests agree on the same rows.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample data -- edit here if the shared rows change
# ---------------------------------------------------------------------------
PEOPLE_HEADER = "name,age,height,balance"
PEOPLE_ROWS = [
    "Alice,34,1.68,1024.50",
    "Bob,41,1.82,-20.25",
    "Chloe,29,1.75,0",
]
PEOPLE_CSV = "\n".join([PEOPLE_HEADER, *PEOPLE_ROWS]) + "\n"


@pytest.fixture
def people_csv(tmp_path: Path) -> Path:
    """Write the people sample to a temporary CSV file."""
    path = tmp_path / "people.csv"
    path.write_text(PEOPLE_CSV, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (file -> table -> export)",
    )
