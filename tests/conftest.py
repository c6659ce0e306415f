"""Pytest fixtures shared across the dashboard tests."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from utils.prep import clean

DATA_DIR = Path(__file__).parent / "data"


def make_rows(rows: list[tuple[str, str, float]]) -> pd.DataFrame:
    """Raw frame shaped like the CSV, before cleaning."""

    return pd.DataFrame(rows, columns=["Month", "Train type", "Number of operated trains"])


@pytest.fixture
def sample_csv() -> Path:
    """Path to the small CSV shipped with the tests."""

    return DATA_DIR / "punctuality_sample.csv"


@pytest.fixture
def scenario_df() -> pd.DataFrame:
    """The three-row IC/S scenario, cleaned."""

    return clean(make_rows([("2023-01", "IC", 10), ("2023-01", "S", 5), ("2023-02", "IC", 12)]))


@pytest.fixture
def unsorted_df() -> pd.DataFrame:
    """Rows out of month order, with a same-month tie, cleaned."""

    return clean(
        make_rows(
            [
                ("2023-03", "IC", 11),
                ("2023-01", "S", 5),
                ("2023-02", "IC", 12),
                ("2023-01", "IC", 10),
                ("2023-02", "L", 3),
                ("2023-01", "L", 2),
            ]
        )
    )
