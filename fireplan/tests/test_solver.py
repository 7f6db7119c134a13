from __future__ import annotations

from math import isclose

import pytest

from fireplan.core.solver import (
    RequiredReturn,
    SolveStatus,
    solve_required_return,
    wealth_at_annual_rate,
)


def test_zero_horizon_is_not_applicable():
    result = solve_required_return(1_000.0, 100.0, 0, {}, 1_000_000.0, current_end_wealth=1_000.0)

    assert result.status == SolveStatus.NOT_APPLICABLE
    assert result.annual_rate is None


def test_negative_horizon_is_not_applicable():
    result = solve_required_return(1_000.0, 100.0, -24, {}, 1_000_000.0, current_end_wealth=1_000.0)
    assert result.status == SolveStatus.NOT_APPLICABLE


def test_goal_already_met_returns_exact_zero():
    result = solve_required_return(2_000_000.0, 0.0, 120, {}, 1_000_000.0, current_end_wealth=2_000_000.0)

    assert result == RequiredReturn(SolveStatus.ALREADY_MET, 0.0)
    assert result.annual_rate == 0.0


def test_unreachable_target_is_unsolvable():
    result = solve_required_return(1_000.0, 100.0, 12, {}, 1e15, current_end_wealth=2_200.0)

    assert result.status == SolveStatus.UNSOLVABLE
    assert result.annual_rate is None


def test_no_money_at_all_is_unsolvable():
    result = solve_required_return(0.0, 0.0, 120, {}, 1_000_000.0, current_end_wealth=0.0)
    assert result.status == SolveStatus.UNSOLVABLE


def test_recovers_known_rate_without_flows():
    """Twelve monthly steps at the monthly equivalent of 7% compound to exactly 1.07."""
    result = solve_required_return(1_000_000.0, 0.0, 12, {}, 1_070_000.0, current_end_wealth=1_050_000.0)

    assert result.status == SolveStatus.SOLVED
    assert isclose(result.annual_rate, 0.07, abs_tol=1e-5)
    assert isclose(result.annual_rate_pct, 7.0, abs_tol=1e-3)


def test_recovers_rate_with_savings_and_lump_sums():
    lumps = {60: 50_000.0, 90: -10_000.0}
    target = wealth_at_annual_rate(10_000.0, 1_000.0, 120, lumps, 0.06)
    current = wealth_at_annual_rate(10_000.0, 1_000.0, 120, lumps, 0.03)

    result = solve_required_return(10_000.0, 1_000.0, 120, lumps, target, current_end_wealth=current)

    assert result.status == SolveStatus.SOLVED
    assert result.annual_rate == pytest.approx(0.06, abs=1e-4)
    reached = wealth_at_annual_rate(10_000.0, 1_000.0, 120, lumps, result.annual_rate)
    assert abs(reached - target) < 5.0


def test_bracket_expands_beyond_fifty_percent():
    result = solve_required_return(1_000_000.0, 0.0, 12, {}, 1_800_000.0, current_end_wealth=1_050_000.0)

    assert result.status == SolveStatus.SOLVED
    assert isclose(result.annual_rate, 0.8, abs_tol=1e-5)


def test_required_rate_is_higher_for_bigger_targets():
    rates = [
        solve_required_return(50_000.0, 500.0, 240, {}, target, current_end_wealth=0.0).annual_rate
        for target in (300_000.0, 500_000.0, 1_000_000.0)
    ]
    assert rates == sorted(rates)
