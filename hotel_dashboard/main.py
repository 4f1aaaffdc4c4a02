"""Streamlit UI for managing hotel properties and viewing portfolio analytics."""

from __future__ import annotations

from typing import List

import streamlit as st

from hotel_backend.models.property import Property
from hotel_backend.services.aggregation import build_dashboard
from hotel_backend.services.data_source import PropertySnapshot
from hotel_dashboard.backend_client import ApiError, BackendClient
from hotel_dashboard.components.cards import render_leaders, render_occupancy_insights, render_summary_cards
from hotel_dashboard.components.charts import metrics_chart, occupancy_chart, revenue_chart
from hotel_dashboard.components.forms import property_form
from hotel_dashboard.components.tables import render_performance_table, render_properties_table

st.set_page_config(page_title="Hotel Portfolio Manager", layout="wide", page_icon="🏨")

DEMO_NOTICE = "Live data is unavailable, showing demo data."


@st.cache_resource(show_spinner=False)
def get_backend_client() -> BackendClient:
    return BackendClient()


def load_snapshot(backend: BackendClient) -> PropertySnapshot:
    # fetched on every render; property lists are never cached
    with st.spinner("Loading properties..."):
        return backend.load_snapshot()


def render_header(title: str, snapshot: PropertySnapshot) -> None:
    title_col, badge_col, refresh_col = st.columns([6, 2, 1])
    title_col.title(title)
    with badge_col:
        st.markdown(f"**{len(snapshot.properties)} Properties**")
        if snapshot.is_demo:
            st.markdown(":orange-background[📊 Demo Data]")
    if refresh_col.button("Refresh"):
        st.rerun()
    if snapshot.is_demo:
        st.warning(DEMO_NOTICE)
        if snapshot.error:
            st.caption(snapshot.error)


def run_write(action, success: str) -> None:
    try:
        action()
    except ApiError as exc:
        st.toast(f"⚠️ {exc.describe()}")
        st.error(exc.describe())
        return
    st.toast(f"✅ {success}")
    st.rerun()


def render_edit_panel(backend: BackendClient, properties: List[Property]) -> None:
    labels = {f"{p.name} ({p.city}, {p.state})": p for p in properties}
    choice = st.selectbox("Select a property", list(labels))
    if choice is None:
        return
    selected = labels[choice]
    payload = property_form(f"edit-{selected.id}", initial=selected, submit_label="Update property")
    if payload is not None:
        run_write(lambda: backend.update_property(selected.id, payload), f"Updated {payload['name']}")
    if st.button("Delete property", key=f"delete-{selected.id}", type="primary"):
        run_write(lambda: backend.delete_property(selected.id), f"Deleted {selected.name}")


def render_properties_page() -> None:
    backend = get_backend_client()
    snapshot = load_snapshot(backend)
    render_header("Hotel Properties", snapshot)

    render_properties_table(snapshot.properties)

    add_tab, edit_tab = st.tabs(["Add property", "Edit or delete"])
    with add_tab:
        payload = property_form("create-property", submit_label="Create property")
        if payload is not None:
            run_write(lambda: backend.create_property(payload), f"Created {payload['name']}")
    with edit_tab:
        if snapshot.is_demo:
            st.info("Editing is disabled while showing demo data.")
        elif snapshot.properties:
            render_edit_panel(backend, snapshot.properties)
        else:
            st.caption("Nothing to edit yet.")


def render_dashboard_page() -> None:
    backend = get_backend_client()
    snapshot = load_snapshot(backend)
    render_header("Property Analytics Dashboard", snapshot)
    st.caption("Comprehensive insights into your property portfolio performance")

    properties = snapshot.properties
    dashboard = build_dashboard(properties)
    render_summary_cards(dashboard.cards)

    overview, occupancy, revenue, performance = st.tabs(["Overview", "Occupancy", "Revenue", "Performance"])
    with overview:
        left, right = st.columns(2)
        left.plotly_chart(metrics_chart(properties, "Property Performance Overview"), use_container_width=True)
        right.plotly_chart(occupancy_chart(properties, "Occupancy Rates Comparison"), use_container_width=True)
        st.plotly_chart(revenue_chart(properties, "Revenue Performance Analysis"), use_container_width=True)
    with occupancy:
        st.plotly_chart(occupancy_chart(properties, "Detailed Occupancy Analysis"), use_container_width=True)
        st.subheader("Occupancy Insights")
        render_occupancy_insights(dashboard.occupancy, dashboard.summary)
    with revenue:
        st.plotly_chart(revenue_chart(properties, "Comprehensive Revenue Analysis"), use_container_width=True)
        left, right = st.columns(2)
        with left:
            render_leaders("Revenue Leaders", dashboard.revpar_leaders, lambda p: p.revpar, "RevPAR")
        with right:
            render_leaders("ADR Leaders", dashboard.adr_leaders, lambda p: p.adr, "ADR")
    with performance:
        st.plotly_chart(metrics_chart(properties, "Comprehensive Performance Metrics"), use_container_width=True)
        st.subheader("Property Performance Summary")
        render_performance_table(properties)


PAGES = {
    "Dashboard": render_dashboard_page,
    "Properties": render_properties_page,
}

page = st.sidebar.radio("Navigate", list(PAGES))
PAGES[page]()
