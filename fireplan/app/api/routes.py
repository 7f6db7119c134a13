"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from fireplan import __version__
from fireplan.core.lump_sums import build_schedule
from fireplan.core.plan import (
    evaluate_plan,
    to_projection_response,
    to_required_return_response,
    to_summary,
)
from fireplan.core.projection import end_wealth, project_accumulation
from fireplan.core.rates import monthly_rate
from fireplan.core.solver import solve_required_return
from fireplan.core.targets import target_wealth
from fireplan.schemas.health import HealthResponse
from fireplan.schemas.plan import PlanParameters

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    current_app.logger.info("rejected plan payload: %d error(s)", exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.BAD_REQUEST


def _load_plan() -> PlanParameters:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return PlanParameters.model_validate(raw_payload)


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Month-by-month wealth until the configured horizon age, for the chart."""
    plan = _load_plan()
    evaluation = evaluate_plan(
        plan,
        horizon_age=current_app.config["HORIZON_AGE"],
        goal_cap_months=current_app.config["GOAL_CAP_MONTHS"],
    )
    return jsonify(to_projection_response(evaluation).model_dump(by_alias=True))


@api_bp.post("/metrics")
def metrics() -> Any:
    """Target, gap, runway, required return and time-to-goal for the plan."""
    plan = _load_plan()
    evaluation = evaluate_plan(
        plan,
        horizon_age=current_app.config["HORIZON_AGE"],
        goal_cap_months=current_app.config["GOAL_CAP_MONTHS"],
    )
    return jsonify(to_summary(evaluation).model_dump(by_alias=True))


@api_bp.post("/required-return")
def required_return() -> Any:
    """Accumulation return needed to reach the SWR target by retirement."""
    plan = _load_plan()
    months = plan.months_to_retire
    lump_map = build_schedule(plan.lump_sums, months)
    accumulation = project_accumulation(
        plan.current_wealth,
        plan.monthly_saving,
        months,
        monthly_rate(plan.accum_real_return_pct),
        lump_map,
    )
    result = solve_required_return(
        plan.current_wealth,
        plan.monthly_saving,
        months,
        lump_map,
        target_wealth(plan.monthly_spend, plan.swr_pct),
        current_end_wealth=end_wealth(accumulation, default=plan.current_wealth),
    )
    current_app.logger.debug("required return for plan: %s", result.status.value)
    return jsonify(to_required_return_response(result).model_dump(by_alias=True))
