"""pandas frames and Plotly figures built from engine output.

The engine never formats numbers; these helpers only reshape its results
into tables and figures a front end can render.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from spendpace.dates import format_month_label
from spendpace.domain import Category, CategoryTotals, DailySeries, MonthlyHistoryPoint

CATEGORY_COLORS = {
    Category.FOOD: "#3b82f6",
    Category.HOUSEHOLD: "#f59e0b",
    Category.ENTERTAINMENT: "#8b5cf6",
    "total": "#111827",
}

MODES = ("cumulative", "daily")
TEMPLATE = "plotly_dark"


def history_frame(points: Sequence[MonthlyHistoryPoint]) -> pd.DataFrame:
    """One row per month: a column per category, ``total`` and a display label."""
    columns = ["month", "label", *(c.value for c in Category), "total"]
    rows = [
        {
            "month": p.month_key,
            "label": format_month_label(p.month_key),
            **{c.value: p.totals[c] for c in Category},
            "total": p.totals.total,
        }
        for p in points
    ]
    return pd.DataFrame(rows, columns=columns)


def daily_frame(series: DailySeries, mode: str = "cumulative") -> pd.DataFrame:
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {mode!r}")
    if mode == "cumulative":
        current, average = series.current_cumulative, series.average_cumulative
    else:
        current, average = series.current_daily, series.average_daily
    return pd.DataFrame(
        {"day": list(series.days), "current": list(current), "average": list(average)},
        columns=["day", "current", "average"],
    )


def _empty_figure(title: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title, template=TEMPLATE)
    return fig


def history_figure(points: Sequence[MonthlyHistoryPoint]) -> go.Figure:
    df = history_frame(points)
    if df.empty:
        return _empty_figure("No data to display")

    fig = go.Figure()
    for c in Category:
        fig.add_trace(go.Bar(x=df["label"], y=df[c.value], name=c.value, marker_color=CATEGORY_COLORS[c]))
    fig.add_trace(go.Bar(x=df["label"], y=df["total"], name="total", marker_color=CATEGORY_COLORS["total"]))
    fig.update_layout(barmode="group", template=TEMPLATE, margin=dict(t=30, b=10, l=10, r=10))
    return fig


def pace_figure(series: DailySeries, mode: str = "cumulative") -> go.Figure:
    df = daily_frame(series, mode)
    if df.empty:
        return _empty_figure("No data to display")

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["day"], y=df["current"], mode="lines", name="current",
        line=dict(color=CATEGORY_COLORS["total"], width=2),
    ))
    if series.has_history:
        fig.add_trace(go.Scatter(
            x=df["day"], y=df["average"], mode="lines", name="average",
            line=dict(color=CATEGORY_COLORS[Category.FOOD], width=2, dash="dash"),
        ))
    fig.update_layout(template=TEMPLATE, xaxis_title="Day", margin=dict(t=30, b=10, l=10, r=10))
    return fig


def category_pie(totals: CategoryTotals) -> go.Figure:
    df = pd.DataFrame({
        "category": [c.value for c in Category],
        "amount": [totals[c] for c in Category],
    })
    df = df[df["amount"] > 0]
    if df.empty:
        return _empty_figure("No data to display")
    return px.pie(
        df,
        values="amount",
        names="category",
        color="category",
        color_discrete_map={c.value: CATEGORY_COLORS[c] for c in Category},
        template=TEMPLATE,
    )
