"""Closed-form depletion runway for a decumulating portfolio."""

import math


def years_of_runway(starting_wealth: float, annual_spend: float, real_return_pct: float) -> float:
    """
    Years until ``starting_wealth`` is exhausted by a constant real
    ``annual_spend`` while earning ``real_return_pct`` per year.

    Returns ``math.inf`` when nothing is spent, or when the return on the
    portfolio already covers the spend (a perpetuity).
    """
    if annual_spend <= 0:
        return math.inf

    r = real_return_pct / 100
    if r == 0:
        return starting_wealth / annual_spend

    ratio = 1 - (starting_wealth * r) / annual_spend
    if ratio <= 0:
        return math.inf
    return -math.log(ratio) / math.log(1 + r)


def runway_end_age(retirement_age: float, runway_years: float) -> float:
    if math.isinf(runway_years):
        return math.inf
    return retirement_age + runway_years
