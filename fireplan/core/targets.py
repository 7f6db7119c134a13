"""Safe-withdrawal-rate targets and the ratios derived from them."""

import math
from typing import Optional

SWR_EPSILON = 1e-9


def target_wealth(monthly_spend: float, swr_pct: float) -> float:
    """Wealth needed so that ``swr_pct`` of it per year covers the spend."""
    return (monthly_spend * 12) / max(swr_pct / 100, SWR_EPSILON)


def implied_swr_pct(wealth: float, monthly_spend: float) -> Optional[float]:
    """Withdrawal rate (percent per year) that ``wealth`` would need to sustain the spend.

    Undefined (None) when there is no positive wealth to withdraw from.
    """
    if wealth <= 0:
        return None
    return (monthly_spend * 12 / wealth) * 100


def sustainable_monthly_spend(wealth: float, monthly_retire_rate: float) -> float:
    """Monthly amount the portfolio earns, i.e. what can be spent without touching principal."""
    return wealth * monthly_retire_rate


def progress_pct(wealth: float, target: float) -> float:
    return max(0.0, min(100.0, 100 * wealth / max(target, 1)))


def extra_monthly_saving(gap: float, months: int, monthly_rate: float) -> float:
    """Additional level monthly saving that closes ``gap`` over ``months``.

    Uses the future value of an annuity; with a non-positive rate the factor
    degrades to the plain month count. A factor too large for a float is
    treated as infinite, so no extra saving is needed.
    """
    if gap <= 0 or months <= 0:
        return 0.0
    if monthly_rate > 0:
        try:
            factor = ((1 + monthly_rate) ** months - 1) / monthly_rate
        except OverflowError:
            factor = math.inf
    else:
        factor = months
    return gap / max(factor, 1)
