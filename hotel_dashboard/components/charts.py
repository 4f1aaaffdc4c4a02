"""Plotly chart helpers for the analytics dashboard."""

from __future__ import annotations

from typing import Dict, List

import plotly.graph_objects as go

from hotel_backend.services.presentation import metrics_series, occupancy_series, revenue_series

ADR_COLOR = "#8884d8"
OCCUPANCY_COLOR = "#82ca9d"
REVPAR_COLOR = "#ffc658"


def _layout(fig: go.Figure, title: str, yaxis_title: str | None = None) -> go.Figure:
    fig.update_layout(
        title=title,
        margin=dict(l=20, r=30, t=40, b=60),
        height=360,
        xaxis=dict(tickangle=-45),
        yaxis_title=yaxis_title,
        template="plotly_white",
        legend=dict(orientation="h"),
    )
    return fig


def _column(series: List[Dict], key: str) -> list:
    return [point[key] for point in series]


def metrics_chart(properties, title: str = "Property Performance Metrics") -> go.Figure:
    series = metrics_series(properties)
    names = _column(series, "name")
    custom = [[p["fullName"], p["city"]] for p in series]
    fig = go.Figure()
    for label, key, color, fmt in (
        ("ADR ($)", "adr", ADR_COLOR, "$%{y}"),
        ("Occupancy %", "occupancyPct", OCCUPANCY_COLOR, "%{y}%"),
        ("RevPAR ($)", "revpar", REVPAR_COLOR, "$%{y}"),
    ):
        fig.add_trace(
            go.Bar(
                x=names,
                y=_column(series, key),
                name=label,
                marker_color=color,
                customdata=custom,
                hovertemplate=f"<b>%{{customdata[0]}}</b><br>%{{customdata[1]}}<br>{label}: {fmt}<extra></extra>",
            )
        )
    fig.update_layout(barmode="group")
    return _layout(fig, title)


def occupancy_chart(properties, title: str = "Occupancy Rate by Property") -> go.Figure:
    series = occupancy_series(properties)
    fig = go.Figure(
        go.Scatter(
            x=_column(series, "name"),
            y=_column(series, "occupancyPct"),
            name="Occupancy %",
            mode="lines+markers",
            line=dict(color=ADR_COLOR, width=3),
            marker=dict(size=10),
            customdata=[[p["fullName"], p["city"], p["adr"], p["revpar"]] for p in series],
            hovertemplate=(
                "<b>%{customdata[0]}</b><br>%{customdata[1]}<br>Occupancy: %{y}%"
                "<br>ADR: $%{customdata[2]}<br>RevPAR: $%{customdata[3]}<extra></extra>"
            ),
        )
    )
    fig.update_yaxes(range=[0, 100])
    return _layout(fig, title, "Occupancy %")


def revenue_chart(properties, title: str = "Revenue Analysis: ADR vs RevPAR") -> go.Figure:
    series = revenue_series(properties)
    names = _column(series, "name")
    custom = [[p["fullName"], p["city"], p["rooms"], p["occupancyPct"], p["potentialRevenue"]] for p in series]
    hover = (
        "<b>%{customdata[0]}</b><br>%{customdata[1]} · %{customdata[2]} rooms"
        "<br>{label}: $%{y}<br>Occupancy: %{customdata[3]}%"
        "<br>Daily Potential: $%{customdata[4]}<extra></extra>"
    )
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=names,
            y=_column(series, "adr"),
            name="ADR ($)",
            marker_color=ADR_COLOR,
            customdata=custom,
            hovertemplate=hover.replace("{label}", "ADR"),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=names,
            y=_column(series, "revpar"),
            name="RevPAR ($)",
            mode="lines",
            fill="tozeroy",
            line=dict(color=OCCUPANCY_COLOR, width=2),
            customdata=custom,
            hovertemplate=hover.replace("{label}", "RevPAR"),
        )
    )
    return _layout(fig, title, "Revenue ($)")


__all__ = ["metrics_chart", "occupancy_chart", "revenue_chart"]
