"""Chart-ready series built from property lists.

Each adapter returns fresh dicts keyed the way the chart payload is sent to
the dashboard (camelCase); the source list is only read.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence

from ..models.property import Property
from ..utils.rounding import round_half_up, to_percent

ELLIPSIS = "..."
SHORT_LABEL = 15
LONG_LABEL = 20


class ChartMode(str, Enum):
    METRICS = "metrics"
    OCCUPANCY = "occupancy"
    REVENUE = "revenue"


def truncate_label(name: str, budget: int) -> str:
    if len(name) > budget:
        return f"{name[:budget]}{ELLIPSIS}"
    return name


def metrics_series(properties: Sequence[Property]) -> List[Dict]:
    return [
        {
            "name": truncate_label(p.name, SHORT_LABEL),
            "fullName": p.name,
            "city": p.city,
            "adr": round_half_up(p.adr, 2),
            "occupancyPct": to_percent(p.occupancy),
            "revpar": round_half_up(p.revpar, 2),
            "rooms": p.rooms,
        }
        for p in properties
    ]


def occupancy_series(properties: Sequence[Property]) -> List[Dict]:
    ordered = sorted(properties, key=lambda p: p.occupancy)
    return [
        {
            "index": idx,
            "name": truncate_label(p.name, LONG_LABEL),
            "fullName": p.name,
            "city": p.city,
            "occupancyPct": to_percent(p.occupancy),
            "adr": p.adr,
            "revpar": p.revpar,
        }
        for idx, p in enumerate(ordered, start=1)
    ]


def revenue_series(properties: Sequence[Property]) -> List[Dict]:
    ordered = sorted(properties, key=lambda p: p.revpar, reverse=True)
    return [
        {
            "name": truncate_label(p.name, SHORT_LABEL),
            "fullName": p.name,
            "city": p.city,
            "adr": round_half_up(p.adr, 2),
            "revpar": round_half_up(p.revpar, 2),
            "occupancyPct": to_percent(p.occupancy),
            "rooms": p.rooms,
            # daily revenue if every room sold at ADR
            "potentialRevenue": round_half_up(p.adr * p.rooms, 2),
        }
        for p in ordered
    ]


def performance_rows(properties: Sequence[Property]) -> List[Dict]:
    return [
        {
            "Property": p.name,
            "City": p.city,
            "Rooms": p.rooms,
            "ADR": f"${p.adr:.2f}",
            "Occupancy": f"{p.occupancy * 100:.1f}%",
            "RevPAR": f"${p.revpar:.2f}",
        }
        for p in properties
    ]


_ADAPTERS = {
    ChartMode.METRICS: metrics_series,
    ChartMode.OCCUPANCY: occupancy_series,
    ChartMode.REVENUE: revenue_series,
}


def chart_series(properties: Sequence[Property], mode: ChartMode | str) -> List[Dict]:
    return _ADAPTERS[ChartMode(mode)](properties)


__all__ = [
    "ChartMode",
    "truncate_label",
    "metrics_series",
    "occupancy_series",
    "revenue_series",
    "performance_rows",
    "chart_series",
]
