"""Streamlit components for summary cards and leader lists."""

from __future__ import annotations

from typing import Callable, Sequence

import streamlit as st

from hotel_backend.models.dashboard import OccupancyExtremes, SummaryCard, SummaryStats
from hotel_backend.models.property import Property


def render_summary_cards(cards: Sequence[SummaryCard]) -> None:
    columns = st.columns(len(cards) or 1)
    for column, card in zip(columns, cards):
        with column:
            with st.container(border=True):
                st.metric(card.title, card.value)
                st.caption(card.description)


def render_occupancy_insights(extremes: OccupancyExtremes, stats: SummaryStats) -> None:
    high, avg, low = st.columns(3)
    high.metric("Highest Occupancy", f"{extremes.max:.1f}%")
    avg.metric("Average Occupancy", f"{stats.avg_occupancy * 100:.1f}%")
    low.metric("Lowest Occupancy", f"{extremes.min:.1f}%")


def render_leaders(title: str, leaders: Sequence[Property], value: Callable[[Property], float], label: str) -> None:
    st.markdown(f"#### {title}")
    if not leaders:
        st.caption("No properties to rank.")
        return
    for prop in leaders:
        with st.container(border=True):
            name_col, value_col = st.columns([3, 1])
            name_col.markdown(f"**{prop.name}**  \n{prop.city}")
            value_col.markdown(f"**${value(prop):.2f}**  \n{label}")
