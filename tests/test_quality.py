"""Data quality reports on the cleaned rows."""

from __future__ import annotations

import pandas as pd
import pytest

from conftest import make_rows
from utils.prep import clean
from utils.quality import coverage, duplicate_keys, month_gaps

pytestmark = pytest.mark.unit


def test_duplicate_keys_counts_repeated_months() -> None:
    df = clean(make_rows([("2023-01", "IC", 10), ("2023-01", "IC", 11), ("2023-01", "S", 5)]))

    dups = duplicate_keys(df)

    assert len(dups) == 1
    assert dups.iloc[0]["Train type"] == "IC"
    assert dups.iloc[0]["count"] == 2


def test_duplicate_keys_empty_when_clean(scenario_df: pd.DataFrame) -> None:
    assert duplicate_keys(scenario_df).empty


def test_month_gaps_lists_missing_months_per_type() -> None:
    df = clean(
        make_rows(
            [
                ("2022-11", "IC", 1),
                ("2023-02", "IC", 2),
                ("2023-01", "S", 3),
                ("2023-02", "S", 4),
            ]
        )
    )

    gaps = month_gaps(df)

    assert gaps["Train type"].tolist() == ["IC", "IC"]
    assert gaps["missing_month"].tolist() == [pd.Timestamp("2022-12-01"), pd.Timestamp("2023-01-01")]


def test_month_gaps_ignore_single_month_types() -> None:
    df = clean(make_rows([("2023-01", "L", 1)]))

    assert month_gaps(df).empty


def test_coverage_per_train_type(unsorted_df: pd.DataFrame) -> None:
    cov = coverage(unsorted_df).set_index("Train type")

    assert list(cov.index) == ["IC", "S", "L"]
    assert cov.loc["IC", "first_month"] == pd.Timestamp("2023-01-01")
    assert cov.loc["IC", "last_month"] == pd.Timestamp("2023-03-01")
    assert cov.loc["IC", "rows"] == 3
    assert cov.loc["L", "total_operated"] == 5
