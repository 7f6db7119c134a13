"""Plan-level evaluation: runs every calculator for one set of parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from fireplan.core.goal import DEFAULT_CAP_MONTHS, months_to_goal
from fireplan.core.lump_sums import build_goal_schedule, build_schedule
from fireplan.core.projection import (
    ProjectionSeries,
    end_wealth,
    project_accumulation,
    project_full_horizon,
)
from fireplan.core.rates import monthly_rate
from fireplan.core.runway import runway_end_age, years_of_runway
from fireplan.core.solver import RequiredReturn, solve_required_return
from fireplan.core.targets import (
    extra_monthly_saving,
    implied_swr_pct,
    progress_pct,
    sustainable_monthly_spend,
    target_wealth,
)
from fireplan.schemas.plan import (
    PlanParameters,
    PlanSummary,
    ProjectionPoint,
    ProjectionResponse,
    RequiredReturnResponse,
)

DEFAULT_HORIZON_AGE = 100


@dataclass(frozen=True)
class PlanEvaluation:
    accumulation: ProjectionSeries
    full_horizon: ProjectionSeries
    months_to_retire: int
    target_wealth: float
    wealth_at_retire: float
    gap: float
    progress_pct: float
    implied_swr_pct: Optional[float]
    sustainable_monthly_spend: float
    has_perpetuity: bool
    required_return: RequiredReturn
    extra_monthly_saving: float
    runway_years: float
    runway_end_age: float
    months_to_goal: Union[int, float]
    age_at_goal: float

    @property
    def surplus(self) -> float:
        return -self.gap


def evaluate_plan(
    plan: PlanParameters,
    horizon_age: int = DEFAULT_HORIZON_AGE,
    goal_cap_months: int = DEFAULT_CAP_MONTHS,
) -> PlanEvaluation:
    """
    Run every calculator for ``plan``.

    The full-horizon series runs to ``horizon_age``, or to retirement when the
    retirement age is past it, so a retirement age of 110 yields
    ``(110 - current_age) * 12 + 1`` rows rather than stopping at 100.
    """
    months_to_retire = plan.months_to_retire
    accum_rate = monthly_rate(plan.accum_real_return_pct)
    retire_rate = monthly_rate(plan.retire_real_return_pct)
    lump_map = build_schedule(plan.lump_sums, months_to_retire)

    accumulation = project_accumulation(
        plan.current_wealth,
        plan.monthly_saving,
        months_to_retire,
        accum_rate,
        lump_map,
    )
    full_horizon = project_full_horizon(
        plan.current_wealth,
        months_to_retire,
        plan.monthly_saving,
        accum_rate,
        retire_rate,
        plan.monthly_spend,
        lump_map,
        max(plan.months_to_horizon(horizon_age), months_to_retire),
    )

    at_retire = end_wealth(accumulation, default=plan.current_wealth)
    target = target_wealth(plan.monthly_spend, plan.swr_pct)
    gap = target - at_retire
    sustainable = sustainable_monthly_spend(at_retire, retire_rate)

    required = solve_required_return(
        plan.current_wealth,
        plan.monthly_saving,
        months_to_retire,
        lump_map,
        target,
        current_end_wealth=at_retire,
    )

    runway = years_of_runway(at_retire, plan.monthly_spend * 12, plan.retire_real_return_pct)

    to_goal = months_to_goal(
        plan.current_wealth,
        plan.monthly_saving,
        accum_rate,
        build_goal_schedule(plan.lump_sums),
        target,
        cap_months=goal_cap_months,
    )

    return PlanEvaluation(
        accumulation=accumulation,
        full_horizon=full_horizon,
        months_to_retire=months_to_retire,
        target_wealth=target,
        wealth_at_retire=at_retire,
        gap=gap,
        progress_pct=progress_pct(at_retire, target),
        implied_swr_pct=implied_swr_pct(at_retire, plan.monthly_spend),
        sustainable_monthly_spend=sustainable,
        has_perpetuity=sustainable >= plan.monthly_spend,
        required_return=required,
        extra_monthly_saving=extra_monthly_saving(gap, months_to_retire, accum_rate),
        runway_years=runway,
        runway_end_age=runway_end_age(plan.retirement_age, runway),
        months_to_goal=to_goal,
        age_at_goal=plan.current_age + to_goal / 12,
    )


def _finite_or_none(value: float) -> Optional[float]:
    return None if math.isinf(value) else value


def to_projection_response(evaluation: PlanEvaluation) -> ProjectionResponse:
    return ProjectionResponse(
        rows=[ProjectionPoint(month=row.month, wealth=row.wealth) for row in evaluation.full_horizon],
        retirement_month=evaluation.months_to_retire,
        target_wealth=evaluation.target_wealth,
    )


def to_required_return_response(required: RequiredReturn) -> RequiredReturnResponse:
    return RequiredReturnResponse(
        status=required.status.value,
        annual_rate_pct=required.annual_rate_pct,
    )


def to_summary(evaluation: PlanEvaluation) -> PlanSummary:
    goal_reachable = not math.isinf(evaluation.months_to_goal)
    return PlanSummary(
        target_wealth=evaluation.target_wealth,
        wealth_at_retire=evaluation.wealth_at_retire,
        gap=evaluation.gap,
        surplus=evaluation.surplus,
        progress_pct=evaluation.progress_pct,
        implied_swr_pct=evaluation.implied_swr_pct,
        sustainable_monthly_spend=evaluation.sustainable_monthly_spend,
        has_perpetuity=evaluation.has_perpetuity,
        required_return=to_required_return_response(evaluation.required_return),
        extra_monthly_saving=evaluation.extra_monthly_saving,
        runway_infinite=math.isinf(evaluation.runway_years),
        runway_years=_finite_or_none(evaluation.runway_years),
        runway_end_age=_finite_or_none(evaluation.runway_end_age),
        goal_reachable=goal_reachable,
        months_to_goal=int(evaluation.months_to_goal) if goal_reachable else None,
        age_at_goal=evaluation.age_at_goal if goal_reachable else None,
    )


__all__ = [
    "DEFAULT_HORIZON_AGE",
    "PlanEvaluation",
    "evaluate_plan",
    "to_projection_response",
    "to_required_return_response",
    "to_summary",
]
