from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional


@dataclass(frozen=True)
class ProjectionRow:
    """Wealth at the start of ``month`` (0 = now), before that month's step."""

    month: int
    wealth: float


ProjectionSeries = List[ProjectionRow]


def accumulation_step(
    wealth: float,
    monthly_rate: float,
    periodic_flow: float,
    lump_map: Mapping[int, float],
    next_month: int,
) -> float:
    # growth on the opening balance, then the monthly flow and any lump sum for the month being entered
    return wealth * (1 + monthly_rate) + periodic_flow + lump_map.get(next_month, 0.0)


def decumulation_step(wealth: float, monthly_rate: float, monthly_spend: float) -> float:
    return wealth * (1 + monthly_rate) - monthly_spend


def project_accumulation(
    start_wealth: float,
    periodic_flow: float,
    months: int,
    monthly_rate: float,
    lump_map: Optional[Mapping[int, float]] = None,
) -> ProjectionSeries:
    """
    Single-regime projection over ``months`` steps (``months + 1`` rows).

    Order of operations (per month t):
      1) Record W as row t.
      2) W <- W * (1 + rate) + periodic_flow + lump_map[t + 1].

    A negative ``months`` is treated as 0, giving the single row for "now".
    """
    lump_map = lump_map or {}
    months = max(0, int(months))

    rows: ProjectionSeries = []
    wealth = float(start_wealth)
    for t in range(months + 1):
        rows.append(ProjectionRow(month=t, wealth=wealth))
        wealth = accumulation_step(wealth, monthly_rate, periodic_flow, lump_map, t + 1)

    return rows


def project_full_horizon(
    start_wealth: float,
    accum_months: int,
    periodic_flow: float,
    accum_rate: float,
    decum_rate: float,
    decum_flow: float,
    lump_map: Optional[Mapping[int, float]],
    total_months: int,
) -> ProjectionSeries:
    """
    Two-regime projection: accumulation for ``accum_months`` steps, then
    decumulation until ``total_months``.

    Conventions:
      - Months t < accum_months use the accumulation step (flow + lump sums).
      - Later months grow at ``decum_rate`` and subtract ``decum_flow``.
      - Emitted wealth is floored at 0; the running value is not, so a
        depleted portfolio keeps going negative between emissions.
    """
    lump_map = lump_map or {}
    total_months = max(0, int(total_months))

    rows: ProjectionSeries = []
    wealth = float(start_wealth)
    for t in range(total_months + 1):
        rows.append(ProjectionRow(month=t, wealth=max(0.0, wealth)))
        if t < accum_months:
            wealth = accumulation_step(wealth, accum_rate, periodic_flow, lump_map, t + 1)
        else:
            wealth = decumulation_step(wealth, decum_rate, decum_flow)

    return rows


def end_wealth(series: ProjectionSeries, default: float = 0.0) -> float:
    """Wealth in the last row, or ``default`` for an empty series."""
    return series[-1].wealth if series else default


__all__ = [
    "ProjectionRow",
    "ProjectionSeries",
    "accumulation_step",
    "decumulation_step",
    "project_accumulation",
    "project_full_horizon",
    "end_wealth",
]
