"""Aggregation of one-time contributions into month-indexed schedules."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Protocol


class LumpSumLike(Protocol):
    month: float
    amount: float


def build_schedule(lump_sums: Iterable[LumpSumLike], horizon_months: int) -> Dict[int, float]:
    """Return {month: total amount}, with months clipped into [0, horizon].

    The projection applies the amount keyed ``t + 1`` when stepping from row
    ``t``, so anything that lands on month 0 (including negative months) is
    never disbursed.
    """
    by_month: Dict[int, float] = {}
    for lump in lump_sums:
        month = max(0, min(horizon_months, math.floor(lump.month)))
        by_month[month] = by_month.get(month, 0.0) + float(lump.amount or 0.0)
    return by_month


def build_goal_schedule(lump_sums: Iterable[LumpSumLike]) -> Dict[int, float]:
    """Schedule for the open-ended goal search: no upper clip, floor at month 1."""
    by_month: Dict[int, float] = {}
    for lump in lump_sums:
        month = max(1, math.floor(lump.month))
        by_month[month] = by_month.get(month, 0.0) + float(lump.amount or 0.0)
    return by_month
