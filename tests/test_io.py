"""Loading the CSV and the Parquet cache."""

from __future__ import annotations

import os
from pathlib import Path

import pandas as pd
import pytest

import constants
from utils.io import (
    cache_is_fresh,
    load_csv_comma,
    maybe_read_parquet,
    parquet_path_for,
    resolve_data_path,
    write_parquet,
)
from utils.prep import clean, train_types

pytestmark = pytest.mark.integration


def test_resolve_data_path_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(constants.ENV_DATA_PATH, raising=False)

    assert resolve_data_path() == Path("data") / constants.DATA_FILENAME


def test_resolve_data_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    target = tmp_path / "other.csv"
    monkeypatch.setenv(constants.ENV_DATA_PATH, str(target))

    assert resolve_data_path() == target


def test_parquet_cache_sits_next_to_the_csv(tmp_path: Path) -> None:
    assert parquet_path_for(tmp_path / "x.csv") == tmp_path / "x_clean.parquet"


def test_each_csv_in_a_directory_gets_its_own_cache(tmp_path: Path) -> None:
    """A newer cache of a.csv never counts as the cache of an older b.csv."""

    a_csv, b_csv = tmp_path / "a.csv", tmp_path / "b.csv"
    b_csv.write_text("Month,Train type,Number of operated trains\n2023-01,TGV,4\n", encoding="utf-8")
    a_csv.write_text("Month,Train type,Number of operated trains\n2023-01,IC,9\n", encoding="utf-8")
    os.utime(b_csv, (1_000, 1_000))
    os.utime(a_csv, (2_000, 2_000))
    write_parquet(clean(load_csv_comma(a_csv)), parquet_path_for(a_csv))

    assert parquet_path_for(a_csv) != parquet_path_for(b_csv)
    assert cache_is_fresh(parquet_path_for(a_csv), a_csv) is True
    assert cache_is_fresh(parquet_path_for(b_csv), b_csv) is False


def test_load_sample_csv(sample_csv: Path) -> None:
    """The sample loads, cleans and keeps its first-appearance type order."""

    df = clean(load_csv_comma(sample_csv))

    assert len(df) == 6
    assert train_types(df) == ["IC", "S", "L"]
    assert "Comment" in df.columns
    assert pd.api.types.is_datetime64_any_dtype(df["Month"])


def test_missing_csv_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_csv_comma(tmp_path / "missing.csv")


def test_numeric_looking_train_types_stay_text(tmp_path: Path) -> None:
    path = tmp_path / "numeric_types.csv"
    path.write_text("Month,Train type,Number of operated trains\n2023-01,12,4\n", encoding="utf-8")

    df = clean(load_csv_comma(path))

    assert train_types(df) == ["12"]


def test_cache_freshness(tmp_path: Path) -> None:
    csv = tmp_path / "data.csv"
    pq = tmp_path / "data.parquet"
    csv.write_text("x", encoding="utf-8")

    assert cache_is_fresh(pq, csv) is False

    pq.write_bytes(b"")
    os.utime(csv, (1_000, 1_000))
    os.utime(pq, (2_000, 2_000))
    assert cache_is_fresh(pq, csv) is True

    os.utime(csv, (3_000, 3_000))
    assert cache_is_fresh(pq, csv) is False


def test_parquet_cache_keeps_schema_types(sample_csv: Path, tmp_path: Path) -> None:
    df = clean(load_csv_comma(sample_csv))
    target = tmp_path / "cache" / "clean.parquet"

    write_parquet(df, target)
    back = maybe_read_parquet(target)

    assert back is not None
    assert pd.api.types.is_datetime64_any_dtype(back["Month"])
    assert train_types(back) == ["IC", "S", "L"]
    assert back["Number of operated trains"].tolist() == df["Number of operated trains"].tolist()


def test_maybe_read_parquet_missing(tmp_path: Path) -> None:
    assert maybe_read_parquet(tmp_path / "none.parquet") is None
