import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
from typing import Sequence

from constants import MONTH_COL, TRAIN_TYPE_COL, OPERATED_COL, PALETTE


def theme():
    return {"template": "plotly_white", "height": 420}


def color_map(categories: Sequence[str]) -> dict[str, str]:
    """Train type -> color, fixed by category order whatever is selected."""
    return {c: PALETTE[i % len(PALETTE)] for i, c in enumerate(categories)}


def _style_axes(fig: go.Figure) -> go.Figure:
    cfg = theme()
    fig.update_layout(template=cfg["template"], height=cfg["height"], legend_title_text=TRAIN_TYPE_COL)
    fig.update_xaxes(type="date", title=MONTH_COL)
    fig.update_yaxes(type="linear", title=OPERATED_COL, showgrid=True)
    return fig


def line_operated_trains(series: pd.DataFrame, categories: Sequence[str]) -> go.Figure:
    """
    Monthly operated trains, one line per train type.
    An empty series still gives the axes, without any line.
    """
    if series.empty:
        return _style_axes(go.Figure())

    fig = px.line(
        series,
        x=MONTH_COL,
        y=OPERATED_COL,
        color=TRAIN_TYPE_COL,
        markers=True,
        category_orders={TRAIN_TYPE_COL: list(categories)},
        color_discrete_map=color_map(categories),
        hover_data={MONTH_COL: "|%Y-%m", TRAIN_TYPE_COL: True, OPERATED_COL: ":,"},
    )
    fig.update_traces(marker=dict(symbol="circle", size=6))
    fig.update_layout(hovermode="closest")
    return _style_axes(fig)
