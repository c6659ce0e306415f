import pandas as pd

from constants import MONTH_COL, TRAIN_TYPE_COL, OPERATED_COL

# Column -> kind. Parsing applies exactly this, nothing is inferred.
SCHEMA = {
    MONTH_COL: "date",
    TRAIN_TYPE_COL: "category",
    OPERATED_COL: "number",
}


class DataLoadError(ValueError):
    """The dataset is missing a required column or a value fails coercion."""


def _bad_rows(mask: pd.Series, limit: int = 5) -> str:
    # +2: header line and 1-based numbering of the CSV
    lines = [str(i + 2) for i in mask[mask].index[:limit]]
    more = " …" if mask.sum() > limit else ""
    return ", ".join(lines) + more


def _coerce_date(s: pd.Series, col: str) -> pd.Series:
    try:
        out = pd.to_datetime(s.astype("string").str.strip(), format="ISO8601")
    except (ValueError, TypeError) as e:
        raise DataLoadError(f"Column '{col}' must hold months (YYYY-MM or YYYY-MM-DD): {e}") from e
    if out.isna().any():
        raise DataLoadError(f"Column '{col}' has empty values (CSV lines {_bad_rows(out.isna())})")
    return out


def _coerce_number(s: pd.Series, col: str) -> pd.Series:
    try:
        out = pd.to_numeric(s, errors="raise")
    except (ValueError, TypeError) as e:
        raise DataLoadError(f"Column '{col}' must be numeric: {e}") from e
    if out.isna().any():
        raise DataLoadError(f"Column '{col}' has empty values (CSV lines {_bad_rows(out.isna())})")
    return out


def _coerce_category(s: pd.Series, col: str) -> pd.Series:
    out = s.astype("string").str.strip()
    empty = out.isna() | (out == "")
    if empty.any():
        raise DataLoadError(f"Column '{col}' has empty labels (CSV lines {_bad_rows(empty)})")
    return out


_COERCE = {
    "date": _coerce_date,
    "number": _coerce_number,
    "category": _coerce_category,
}


def clean(df_raw: pd.DataFrame) -> pd.DataFrame:
    missing = [c for c in SCHEMA if c not in df_raw.columns]
    if missing:
        raise DataLoadError(f"Missing required column(s): {', '.join(missing)}")

    df = df_raw.copy()
    for col, kind in SCHEMA.items():
        df[col] = _COERCE[kind](df[col], col)

    # Extra columns are kept untouched, required ones first
    extra = [c for c in df.columns if c not in SCHEMA]
    return df[list(SCHEMA) + extra].reset_index(drop=True)


def train_types(df: pd.DataFrame) -> list[str]:
    """Distinct train types in order of first appearance."""
    return [str(t) for t in df[TRAIN_TYPE_COL].drop_duplicates()]


def filter_values(df: pd.DataFrame) -> dict:
    dates_sorted = sorted(pd.to_datetime(df[MONTH_COL].dropna().unique()))

    return {
        "date_min": dates_sorted[0] if dates_sorted else None,
        "date_max": dates_sorted[-1] if dates_sorted else None,
        "train_types": train_types(df),
    }
