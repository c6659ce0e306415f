import pandas as pd
import numpy as np

from constants import MONTH_COL, TRAIN_TYPE_COL, OPERATED_COL

CORE_KEYS = [MONTH_COL, TRAIN_TYPE_COL]


def duplicate_keys(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty or not set(CORE_KEYS).issubset(df.columns):
        return pd.DataFrame(columns=CORE_KEYS + ["count"])
    g = df.groupby(CORE_KEYS, dropna=False, sort=False).size().reset_index(name="count")
    return g[g["count"] > 1].sort_values("count", ascending=False, kind="stable").reset_index(drop=True)


def _month_index(dates: pd.Series) -> np.ndarray:
    return (dates.dt.year * 12 + dates.dt.month - 1).to_numpy()


def month_gaps(df: pd.DataFrame) -> pd.DataFrame:
    """Months missing between each train type's first and last month."""
    cols = [TRAIN_TYPE_COL, "missing_month"]
    if df.empty:
        return pd.DataFrame(columns=cols)

    rows = []
    for train_type, g in df.groupby(TRAIN_TYPE_COL, sort=False):
        idx = np.unique(_month_index(g[MONTH_COL]))
        if len(idx) < 2:
            continue
        expected = np.arange(idx[0], idx[-1] + 1)
        for m in np.setdiff1d(expected, idx):
            rows.append({
                TRAIN_TYPE_COL: train_type,
                "missing_month": pd.Timestamp(year=int(m // 12), month=int(m % 12) + 1, day=1),
            })
    return pd.DataFrame(rows, columns=cols)


def coverage(df: pd.DataFrame) -> pd.DataFrame:
    cols = [TRAIN_TYPE_COL, "first_month", "last_month", "rows", "total_operated"]
    if df.empty:
        return pd.DataFrame(columns=cols)
    g = df.groupby(TRAIN_TYPE_COL, sort=False).agg(
        first_month=(MONTH_COL, "min"),
        last_month=(MONTH_COL, "max"),
        rows=(MONTH_COL, "size"),
        total_operated=(OPERATED_COL, "sum"),
    )
    return g.reset_index()[cols]
