"""Pydantic schemas for dashboard aggregates."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .property import Property


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SummaryStats(_CamelModel):
    count: int
    total_rooms: int
    avg_adr: float
    avg_occupancy: float
    avg_revpar: float


class OccupancyExtremes(_CamelModel):
    min: float
    max: float


class SummaryCard(_CamelModel):
    title: str
    value: str
    description: str


class DashboardSnapshot(_CamelModel):
    summary: SummaryStats
    occupancy: OccupancyExtremes
    cards: List[SummaryCard]
    revpar_leaders: List[Property]
    adr_leaders: List[Property]
