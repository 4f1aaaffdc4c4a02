"""Tabular components for the property list and performance summary."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from hotel_backend.models.property import Property
from hotel_backend.services.presentation import performance_rows

PERFORMANCE_COLUMNS = ["Property", "City", "Rooms", "ADR", "Occupancy", "RevPAR"]


def properties_frame(properties: Sequence[Property]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Name": p.name,
                "City": p.city,
                "State": p.state,
                "Rooms": p.rooms,
                "ADR": p.adr,
                "Occupancy": p.occupancy * 100,
                "RevPAR": p.revpar,
                "Status": p.status,
                "Created": p.created_at,
            }
            for p in properties
        ],
        columns=["Name", "City", "State", "Rooms", "ADR", "Occupancy", "RevPAR", "Status", "Created"],
    )
    return df


def performance_frame(properties: Sequence[Property]) -> pd.DataFrame:
    return pd.DataFrame(performance_rows(properties), columns=PERFORMANCE_COLUMNS)


def render_properties_table(properties: Sequence[Property]) -> None:
    if not properties:
        st.info("No properties yet. Add one below.")
        return
    st.dataframe(
        properties_frame(properties),
        hide_index=True,
        width="stretch",
        column_config={
            "ADR": st.column_config.NumberColumn(format="$%.2f"),
            "Occupancy": st.column_config.NumberColumn(format="%.1f%%"),
            "RevPAR": st.column_config.NumberColumn(format="$%.2f"),
        },
    )


def render_performance_table(properties: Sequence[Property]) -> None:
    st.dataframe(performance_frame(properties), hide_index=True, width="stretch")
