import pandas as pd
from typing import Iterable

from constants import MONTH_COL, TRAIN_TYPE_COL


def filter_sorted(df: pd.DataFrame, selected: Iterable[str]) -> pd.DataFrame:
    """Rows of the selected train types, ascending by month.

    The sort is stable: rows sharing a month keep their original order.
    """
    selected = list(selected)
    if not selected:
        return df.iloc[0:0].reset_index(drop=True)
    mask = df[TRAIN_TYPE_COL].isin(selected)
    return df.loc[mask].sort_values(MONTH_COL, kind="stable").reset_index(drop=True)
