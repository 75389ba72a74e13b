# esg_impact/charts.py
"""
Plotly figure builders for the dashboard pages.

Each builder takes one of the frames from esg_impact.metrics and returns a
figure; nothing here touches streamlit so the figures can be tested directly.
"""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

GREEN = "#10B981"
AMBER = "#F59E0B"
BLUE = "#3B82F6"


def _dual_axis(title: str, height: int) -> go.Figure:
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.update_layout(
        title=title,
        height=height,
        margin=dict(l=10, r=10, t=45, b=10),
        legend=dict(orientation="h", y=-0.15),
        plot_bgcolor="white",
    )
    return fig


def waste_type_chart(frame: pd.DataFrame) -> go.Figure:
    """Collection (kg, left axis) and CO₂ reduction (t, right axis) per waste type."""
    fig = _dual_axis("Collection and CO₂ reduction by waste type", 300)
    fig.add_trace(
        go.Bar(x=frame["type"], y=frame["collection_kg"], name="Collection (kg)",
               marker_color=GREEN, offsetgroup=0),
        secondary_y=False,
    )
    fig.add_trace(
        go.Bar(x=frame["type"], y=frame["co2_tonnes"], name="CO₂ reduction (t)",
               marker_color=AMBER, offsetgroup=1),
        secondary_y=True,
    )
    fig.update_yaxes(title_text="Collection (kg)", secondary_y=False)
    fig.update_yaxes(title_text="CO₂ reduction (tonnes)", secondary_y=True)
    return fig


def composition_chart(frame: pd.DataFrame) -> go.Figure:
    """Stacked plastic/toys per company with CO₂ alongside on a second axis."""
    fig = _dual_axis("Waste composition by company", 350)
    fig.add_trace(
        go.Bar(x=frame["company"], y=frame["plastic"], name="Plastic (kg)",
               marker_color=GREEN, offsetgroup=0),
        secondary_y=False,
    )
    fig.add_trace(
        go.Bar(x=frame["company"], y=frame["toys"], name="Toys (kg)",
               marker_color=AMBER, offsetgroup=0, base=frame["plastic"]),
        secondary_y=False,
    )
    fig.add_trace(
        go.Bar(x=frame["company"], y=frame["co2"], name="CO₂ (t)",
               marker_color=BLUE, offsetgroup=1),
        secondary_y=True,
    )
    fig.update_yaxes(title_text="Collection (kg)", secondary_y=False)
    fig.update_yaxes(title_text="CO₂ (tonnes)", secondary_y=True)
    return fig


def timeseries_chart(frame: pd.DataFrame, title: str = "") -> go.Figure:
    fig = _dual_axis(title, 250)
    fig.add_trace(
        go.Scatter(x=frame["quarter"], y=frame["collection"], name="Collection (kg)",
                   mode="lines+markers", line=dict(color=GREEN, width=2, shape="spline")),
        secondary_y=False,
    )
    fig.add_trace(
        go.Scatter(x=frame["quarter"], y=frame["co2"], name="CO₂ (t)",
                   mode="lines+markers", line=dict(color=AMBER, width=2, shape="spline")),
        secondary_y=True,
    )
    fig.add_trace(
        go.Scatter(x=frame["quarter"], y=frame["participants"], name="Participants",
                   mode="lines+markers", line=dict(color=BLUE, width=2, shape="spline")),
        secondary_y=False,
    )
    return fig
