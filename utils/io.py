import os
import streamlit as st
import pandas as pd
from pathlib import Path

import constants


def resolve_data_path() -> Path:
    """CSV location: PUNCTUALITY_DATA_PATH if set, else data/<DATA_FILENAME>."""
    env_path = os.getenv(constants.ENV_DATA_PATH, "").strip()
    if env_path:
        return Path(env_path)
    return Path("data") / constants.DATA_FILENAME


def parquet_path_for(csv_path: str | Path) -> Path:
    # One cache per CSV: data/a.csv -> data/a_clean.parquet
    csv_path = Path(csv_path)
    return csv_path.with_name(f"{csv_path.stem}{constants.CLEANED_PARQUET_SUFFIX}")


@st.cache_data(show_spinner=False)
def load_csv_comma(path: str | Path, mtime: float | None = None) -> pd.DataFrame:
    # mtime only keys the cache so an edited file is read again
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path.resolve()}")
    # Labels stay text even when a train type looks numeric
    df = pd.read_csv(
        path,
        sep=",",
        encoding="utf-8",
        dtype={constants.TRAIN_TYPE_COL: "string"},
    )
    return df


def file_mtime(path: str | Path) -> float | None:
    p = Path(path)
    return p.stat().st_mtime if p.exists() else None


def cache_is_fresh(parquet_path: str | Path, csv_path: str | Path) -> bool:
    pq, csv = Path(parquet_path), Path(csv_path)
    if not pq.exists():
        return False
    if not csv.exists():
        return True
    return pq.stat().st_mtime >= csv.stat().st_mtime


@st.cache_data(show_spinner=False)
def maybe_read_parquet(path: str | Path, mtime: float | None = None) -> pd.DataFrame | None:
    p = Path(path)
    if p.exists():
        return pd.read_parquet(p)
    return None


def write_parquet(df: pd.DataFrame, path: str | Path) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(p, index=False)
    return str(p.resolve())
