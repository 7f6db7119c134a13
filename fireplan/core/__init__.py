from fireplan.core.goal import months_to_goal
from fireplan.core.lump_sums import build_goal_schedule, build_schedule
from fireplan.core.plan import PlanEvaluation, evaluate_plan
from fireplan.core.projection import (
    ProjectionRow,
    project_accumulation,
    project_full_horizon,
)
from fireplan.core.rates import monthly_rate
from fireplan.core.runway import years_of_runway
from fireplan.core.solver import RequiredReturn, SolveStatus, solve_required_return
from fireplan.core.targets import implied_swr_pct, target_wealth

__all__ = [
    "months_to_goal",
    "build_goal_schedule",
    "build_schedule",
    "PlanEvaluation",
    "evaluate_plan",
    "ProjectionRow",
    "project_accumulation",
    "project_full_horizon",
    "monthly_rate",
    "years_of_runway",
    "RequiredReturn",
    "SolveStatus",
    "solve_required_return",
    "implied_swr_pct",
    "target_wealth",
]
