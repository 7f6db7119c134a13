from __future__ import annotations

from math import isclose

from fireplan.core.targets import (
    extra_monthly_saving,
    implied_swr_pct,
    progress_pct,
    sustainable_monthly_spend,
    target_wealth,
)


def test_target_wealth_at_three_and_a_half_percent():
    assert isclose(target_wealth(100_000.0, 3.5), 34_285_714.2857, rel_tol=1e-9)


def test_target_wealth_guards_zero_and_negative_swr():
    assert target_wealth(1_000.0, 0.0) == 12_000.0 / 1e-9
    assert target_wealth(1_000.0, -2.0) == 12_000.0 / 1e-9


def test_implied_swr_undefined_without_wealth():
    assert implied_swr_pct(0.0, 10_000.0) is None
    assert implied_swr_pct(-5.0, 10_000.0) is None


def test_implied_swr_inverts_target():
    wealth = target_wealth(8_000.0, 4.0)
    assert isclose(implied_swr_pct(wealth, 8_000.0), 4.0, rel_tol=1e-12)


def test_sustainable_spend_is_monthly_return_on_wealth():
    assert isclose(sustainable_monthly_spend(1_200_000.0, 0.005), 6_000.0)


def test_progress_is_clamped():
    assert progress_pct(50.0, 200.0) == 25.0
    assert progress_pct(500.0, 200.0) == 100.0
    assert progress_pct(-10.0, 200.0) == 0.0
    # tiny targets use a floor of 1 for the denominator
    assert progress_pct(0.5, 0.0) == 50.0


def test_extra_saving_zero_when_no_gap_or_no_time():
    assert extra_monthly_saving(0.0, 120, 0.004) == 0.0
    assert extra_monthly_saving(-1_000.0, 120, 0.004) == 0.0
    assert extra_monthly_saving(1_000.0, 0, 0.004) == 0.0


def test_extra_saving_uses_annuity_factor():
    r, n = 0.004, 120
    factor = ((1 + r) ** n - 1) / r
    assert isclose(extra_monthly_saving(100_000.0, n, r), 100_000.0 / factor)
    # no growth: spread evenly
    assert isclose(extra_monthly_saving(12_000.0, 12, 0.0), 1_000.0)


def test_extra_saving_with_overflowing_growth_is_zero():
    """(1 + r) ** n past the float range counts as an unbounded annuity factor."""
    assert extra_monthly_saving(1_000_000.0, 1200, 100.0) == 0.0
