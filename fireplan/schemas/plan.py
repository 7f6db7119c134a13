"""Data contracts for plan projections and metrics."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class LumpSum(CamelModel):
    """One-time contribution (negative for a withdrawal) scheduled at a month."""

    id: int = 0
    month: float = Field(..., description="1 is the next simulated month; fractions round down.")
    amount: float


class PlanParameters(CamelModel):
    """Inputs for a savings and retirement plan, in real (inflation-adjusted) terms."""

    current_age: int = Field(..., ge=0)
    retirement_age: int = Field(..., ge=0)
    current_wealth: float
    monthly_saving: float = Field(0.0, description="Negative for a net monthly outflow.")
    monthly_spend: float = Field(..., ge=0)
    swr_pct: float = Field(..., gt=0, description="Safe withdrawal rate, percent per year.")
    accum_real_return_pct: float = Field(..., gt=-100)
    retire_real_return_pct: float = Field(..., gt=-100)
    lump_sums: List[LumpSum] = Field(default_factory=list)

    @property
    def months_to_retire(self) -> int:
        return max(0, (self.retirement_age - self.current_age) * 12)

    def months_to_horizon(self, horizon_age: int = 100) -> int:
        return max(0, (horizon_age - self.current_age) * 12)


class ProjectionPoint(CamelModel):
    month: int = Field(..., ge=0)
    wealth: float


class ProjectionResponse(CamelModel):
    """Full-horizon series plus the markers the chart draws on top of it."""

    rows: List[ProjectionPoint]
    retirement_month: int
    target_wealth: float


class RequiredReturnResponse(CamelModel):
    status: str
    annual_rate_pct: Optional[float] = None


class PlanSummary(CamelModel):
    """Scalar metrics for one plan.

    JSON has no infinity, so unbounded runway and an unreachable goal are sent
    as null alongside an explicit flag.
    """

    target_wealth: float
    wealth_at_retire: float
    gap: float
    surplus: float
    progress_pct: float
    implied_swr_pct: Optional[float] = None
    sustainable_monthly_spend: float
    has_perpetuity: bool
    required_return: RequiredReturnResponse
    extra_monthly_saving: float
    runway_infinite: bool
    runway_years: Optional[float] = None
    runway_end_age: Optional[float] = None
    goal_reachable: bool
    months_to_goal: Optional[int] = None
    age_at_goal: Optional[float] = None
