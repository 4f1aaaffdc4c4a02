"""Create/edit form for a single property."""

from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from hotel_backend.models.property import Property


def parse_amenities(text: str) -> list[str]:
    return [item.strip() for item in text.split(",") if item.strip()]


def property_form(key: str, initial: Optional[Property] = None, submit_label: str = "Save") -> Optional[Dict[str, Any]]:
    """Render the form and return the payload once submitted.

    Occupancy is entered as a percentage and sent as a fraction. State is
    upper-cased here; the API only checks its length.
    """

    with st.form(key, clear_on_submit=initial is None):
        name = st.text_input("Name", value=initial.name if initial else "")
        city_col, state_col = st.columns([3, 1])
        city = city_col.text_input("City", value=initial.city if initial else "")
        state = state_col.text_input("State", value=initial.state if initial else "", max_chars=2)
        rooms_col, adr_col = st.columns(2)
        rooms = rooms_col.number_input("Rooms", min_value=1, step=1, value=initial.rooms if initial else 100)
        adr = adr_col.number_input("ADR ($)", min_value=0.0, step=1.0, value=float(initial.adr) if initial else 0.0)
        occ_col, revpar_col = st.columns(2)
        occupancy_pct = occ_col.number_input(
            "Occupancy (%)",
            min_value=0.0,
            max_value=100.0,
            step=0.5,
            value=float(initial.occupancy * 100) if initial else 0.0,
        )
        revpar = revpar_col.number_input(
            "RevPAR ($)", min_value=0.0, step=1.0, value=float(initial.revpar) if initial else 0.0
        )
        with st.expander("Details"):
            rating = st.number_input(
                "Rating", min_value=0.0, max_value=5.0, step=0.1, value=float(initial.rating or 0.0) if initial else 0.0
            )
            address = st.text_input("Address", value=(initial.address or "") if initial else "")
            amenities = st.text_input(
                "Amenities (comma separated)", value=", ".join(initial.amenities) if initial else ""
            )
            description = st.text_area("Description", value=(initial.description or "") if initial else "")
        submitted = st.form_submit_button(submit_label)

    if not submitted:
        return None
    return {
        "name": name.strip(),
        "city": city.strip(),
        "state": state.strip().upper(),
        "rooms": int(rooms),
        "adr": float(adr),
        "occupancy": round(float(occupancy_pct) / 100, 4),
        "revpar": float(revpar),
        "rating": float(rating) or None,
        "address": address.strip() or None,
        "amenities": parse_amenities(amenities),
        "description": description.strip() or None,
        "status": initial.status if initial else "ACTIVE",
    }
