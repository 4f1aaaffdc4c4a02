"""Portfolio summary statistics and rankings for the dashboard.

Every function here is a pure transform of its argument: the input sequence is
never reordered or mutated and identical input always yields identical output.
"""

from __future__ import annotations

from typing import List, Literal, Sequence

import pandas as pd

from ..models.dashboard import DashboardSnapshot, OccupancyExtremes, SummaryCard, SummaryStats
from ..models.property import Property
from ..utils.logging import get_logger
from ..utils.rounding import round_half_up

LOGGER = get_logger("services.aggregation")

RANKABLE_KEYS = ("revpar", "adr")
LEADER_LIMIT = 5

Direction = Literal["asc", "desc"]


def _frame(properties: Sequence[Property]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "rooms": [p.rooms for p in properties],
            "adr": [p.adr for p in properties],
            "occupancy": [p.occupancy for p in properties],
            "revpar": [p.revpar for p in properties],
        }
    )


def summarize(properties: Sequence[Property]) -> SummaryStats:
    if not properties:
        return SummaryStats(count=0, total_rooms=0, avg_adr=0.0, avg_occupancy=0.0, avg_revpar=0.0)
    df = _frame(properties)
    return SummaryStats(
        count=len(df.index),
        total_rooms=int(df["rooms"].sum()),
        avg_adr=float(df["adr"].mean()),
        avg_occupancy=float(df["occupancy"].mean()),
        avg_revpar=float(df["revpar"].mean()),
    )


def rank_by(
    properties: Sequence[Property],
    key: str,
    direction: Direction = "desc",
    limit: int = LEADER_LIMIT,
) -> List[Property]:
    """Order by a numeric metric and keep the first ``limit`` entries.

    ``sorted`` is guaranteed stable, including with ``reverse=True``, so
    properties with equal values keep their input order in either direction.
    """

    if key not in RANKABLE_KEYS:
        raise ValueError(f"cannot rank by {key!r}; expected one of {RANKABLE_KEYS}")
    if direction not in ("asc", "desc"):
        raise ValueError(f"unknown direction {direction!r}")
    if limit < 0:
        raise ValueError("limit must be non-negative")
    ordered = sorted(properties, key=lambda p: getattr(p, key), reverse=direction == "desc")
    return ordered[:limit]


def occupancy_extremes(properties: Sequence[Property]) -> OccupancyExtremes:
    if not properties:
        return OccupancyExtremes(min=0.0, max=0.0)
    pct = _frame(properties)["occupancy"] * 100
    return OccupancyExtremes(min=round_half_up(float(pct.min()), 1), max=round_half_up(float(pct.max()), 1))


def summary_cards(stats: SummaryStats) -> List[SummaryCard]:
    return [
        SummaryCard(
            title="Total Properties",
            value=str(stats.count),
            description=f"{stats.total_rooms} total rooms",
        ),
        SummaryCard(title="Average ADR", value=f"${stats.avg_adr:.2f}", description="Average Daily Rate"),
        SummaryCard(
            title="Average Occupancy",
            value=f"{stats.avg_occupancy * 100:.1f}%",
            description="Across all properties",
        ),
        SummaryCard(
            title="Average RevPAR",
            value=f"${stats.avg_revpar:.2f}",
            description="Revenue per Available Room",
        ),
    ]


def build_dashboard(properties: Sequence[Property]) -> DashboardSnapshot:
    stats = summarize(properties)
    LOGGER.debug("dashboard_built count=%d total_rooms=%d", stats.count, stats.total_rooms)
    return DashboardSnapshot(
        summary=stats,
        occupancy=occupancy_extremes(properties),
        cards=summary_cards(stats),
        revpar_leaders=rank_by(properties, "revpar"),
        adr_leaders=rank_by(properties, "adr"),
    )


__all__ = [
    "RANKABLE_KEYS",
    "LEADER_LIMIT",
    "summarize",
    "rank_by",
    "occupancy_extremes",
    "summary_cards",
    "build_dashboard",
]
