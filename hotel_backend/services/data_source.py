"""Live-or-demo property source used by the dashboard.

Reads try the live store first. When it cannot be reached the fixed sample
dataset is served instead, and the snapshot is tagged ``DEMO`` so the UI can
flag it rather than pass it off as real data.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence

from ..db.repo import PropertyRepository
from ..db.sample_data import demo_properties
from ..exceptions import StoreUnavailable
from ..models.property import Property
from ..utils.logging import get_logger

LOGGER = get_logger("services.data_source")


class Origin(str, Enum):
    LIVE = "live"
    DEMO = "demo"


@dataclass(frozen=True)
class PropertySnapshot:
    origin: Origin
    properties: List[Property] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_demo(self) -> bool:
        return self.origin is Origin.DEMO


class DataSource(abc.ABC):
    origin: Origin

    @abc.abstractmethod
    def fetch(self) -> List[Property]:
        ...


class LiveDataSource(DataSource):
    origin = Origin.LIVE

    def __init__(self, loader: Callable[[], Sequence[Property]]) -> None:
        self._loader = loader

    @classmethod
    def from_repository(cls, repository: PropertyRepository) -> "LiveDataSource":
        return cls(repository.list)

    def fetch(self) -> List[Property]:
        return list(self._loader())


class DemoDataSource(DataSource):
    origin = Origin.DEMO

    def fetch(self) -> List[Property]:
        return demo_properties()


def resolve_properties(live: DataSource, fallback: Optional[DataSource] = None) -> PropertySnapshot:
    try:
        return PropertySnapshot(origin=live.origin, properties=live.fetch())
    except (StoreUnavailable, OSError) as exc:
        LOGGER.warning("live_source_failed error=%s; using demo data", exc)
        fallback = fallback or DemoDataSource()
        return PropertySnapshot(origin=fallback.origin, properties=fallback.fetch(), error=str(exc))


__all__ = [
    "Origin",
    "PropertySnapshot",
    "DataSource",
    "LiveDataSource",
    "DemoDataSource",
    "resolve_properties",
]
