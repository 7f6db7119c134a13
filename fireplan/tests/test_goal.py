from __future__ import annotations

import math

from fireplan.core.goal import months_to_goal
from fireplan.core.projection import project_accumulation
from fireplan.core.rates import monthly_rate


def test_non_positive_target_is_met_immediately():
    assert months_to_goal(0.0, 0.0, 0.0, {}, 0.0) == 0
    assert months_to_goal(0.0, 0.0, 0.0, {}, -100.0) == 0


def test_already_at_target_is_month_zero():
    assert months_to_goal(5_000.0, 100.0, 0.01, {}, 5_000.0) == 0


def test_flat_savings_reach_target_on_exact_month():
    assert months_to_goal(0.0, 100.0, 0.0, {}, 1_000.0) == 10


def test_lump_sum_counts_in_its_month():
    assert months_to_goal(0.0, 0.0, 0.0, {5: 1_000.0}, 500.0) == 5


def test_unreachable_plan_returns_infinity():
    assert months_to_goal(0.0, 0.0, 0.0, {}, 1.0) == math.inf
    assert months_to_goal(10_000.0, -100.0, -0.001, {}, 20_000.0) == math.inf


def test_cap_bounds_the_search():
    assert months_to_goal(0.0, 1.0, 0.0, {}, 2_000.0) == math.inf
    assert months_to_goal(0.0, 1.0, 0.0, {}, 2_000.0, cap_months=3_000) == 2_000


def test_matches_first_projection_row_reaching_target():
    r = monthly_rate(6.0)
    target = 250_000.0
    months = months_to_goal(20_000.0, 1_500.0, r, {12: 10_000.0}, target)

    rows = project_accumulation(20_000.0, 1_500.0, 600, r, {12: 10_000.0})
    first = next(row.month for row in rows if row.wealth >= target)
    assert months == first
