"""Bisection search for the accumulation return needed to reach a target.

End wealth from :func:`project_accumulation` is monotonically increasing in
the annual rate when the horizon is positive (every month compounds a larger
factor onto the same flows). Bisection relies on that; it is not re-checked
per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from fireplan.core.projection import end_wealth, project_accumulation
from fireplan.core.rates import monthly_rate_from_decimal

logger = logging.getLogger(__name__)

INITIAL_BRACKET = (-0.5, 0.5)
BRACKET_STEP = 0.25
MAX_EXPANSIONS = 10
MAX_ANNUAL_RATE = 3.0
# an annual rate below -100% has no real monthly equivalent
MIN_ANNUAL_RATE = -1.0
MAX_ITERATIONS = 40
TOLERANCE = 1.0


class SolveStatus(str, Enum):
    SOLVED = "solved"
    ALREADY_MET = "already_met"
    NOT_APPLICABLE = "not_applicable"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class RequiredReturn:
    status: SolveStatus
    annual_rate: Optional[float] = None

    @property
    def annual_rate_pct(self) -> Optional[float]:
        return None if self.annual_rate is None else self.annual_rate * 100


def wealth_at_annual_rate(
    start_wealth: float,
    periodic_flow: float,
    months: int,
    lump_map: Mapping[int, float],
    annual_rate: float,
) -> float:
    series = project_accumulation(
        start_wealth,
        periodic_flow,
        months,
        monthly_rate_from_decimal(annual_rate),
        lump_map,
    )
    return end_wealth(series, default=start_wealth)


def solve_required_return(
    start_wealth: float,
    periodic_flow: float,
    months: int,
    lump_map: Mapping[int, float],
    target: float,
    current_end_wealth: float,
) -> RequiredReturn:
    """
    Find the annual accumulation return (decimal) at which the plan ends the
    accumulation horizon at ``target``.

    Outcomes:
      - NOT_APPLICABLE: no accumulation months, the rate cannot matter.
      - ALREADY_MET: ``current_end_wealth`` already reaches the target; rate is exactly 0.
      - UNSOLVABLE: no sign change within [-100%, +300%].
      - SOLVED: bisection midpoint after at most 40 halvings, or earlier once
        end wealth is within 1 currency unit of the target.
    """
    if months <= 0:
        return RequiredReturn(SolveStatus.NOT_APPLICABLE)

    if current_end_wealth >= target:
        return RequiredReturn(SolveStatus.ALREADY_MET, 0.0)

    def gap_at(annual_rate: float) -> float:
        return wealth_at_annual_rate(start_wealth, periodic_flow, months, lump_map, annual_rate) - target

    lo, hi = INITIAL_BRACKET
    f_lo, f_hi = gap_at(lo), gap_at(hi)

    expansions = 0
    while f_lo * f_hi > 0 and expansions < MAX_EXPANSIONS and hi < MAX_ANNUAL_RATE:
        lo = max(lo - BRACKET_STEP, MIN_ANNUAL_RATE)
        hi = min(hi + BRACKET_STEP, MAX_ANNUAL_RATE)
        f_lo, f_hi = gap_at(lo), gap_at(hi)
        expansions += 1

    if f_lo * f_hi > 0:
        logger.debug(
            "no bracket for target %.2f within [%.2f, %.2f] after %d expansions",
            target,
            lo,
            hi,
            expansions,
        )
        return RequiredReturn(SolveStatus.UNSOLVABLE)

    for _ in range(MAX_ITERATIONS):
        mid = (lo + hi) / 2
        f_mid = gap_at(mid)
        if abs(f_mid) < TOLERANCE:
            return RequiredReturn(SolveStatus.SOLVED, mid)
        if f_lo * f_mid <= 0:
            hi, f_hi = mid, f_mid
        else:
            lo, f_lo = mid, f_mid

    return RequiredReturn(SolveStatus.SOLVED, (lo + hi) / 2)


__all__ = [
    "SolveStatus",
    "RequiredReturn",
    "wealth_at_annual_rate",
    "solve_required_return",
]
