"""Half-up rounding matching the chart front end (not banker's rounding)."""

from __future__ import annotations

import numpy as np


def round_half_up(value: float, places: int = 0) -> float:
    factor = 10.0 ** places
    return float(np.floor(value * factor + 0.5) / factor)


def to_percent(fraction: float) -> int:
    """0.785 -> 79"""

    return int(round_half_up(fraction * 100))


__all__ = ["round_half_up", "to_percent"]
