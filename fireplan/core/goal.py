from __future__ import annotations

import logging
import math
from typing import Mapping, Optional, Union

from fireplan.core.projection import accumulation_step

logger = logging.getLogger(__name__)

DEFAULT_CAP_MONTHS = 1200


def months_to_goal(
    start_wealth: float,
    periodic_flow: float,
    monthly_rate: float,
    lump_map: Optional[Mapping[int, float]],
    target: float,
    cap_months: int = DEFAULT_CAP_MONTHS,
) -> Union[int, float]:
    """
    First month index at which wealth reaches ``target`` under the current
    savings plan, stepping exactly like the accumulation branch of the engine.

    Returns 0 for a non-positive target and ``math.inf`` if the target is not
    reached within ``cap_months``.
    """
    if target <= 0:
        return 0

    lump_map = lump_map or {}
    wealth = float(start_wealth)
    for t in range(cap_months + 1):
        if wealth >= target:
            return t
        wealth = accumulation_step(wealth, monthly_rate, periodic_flow, lump_map, t + 1)

    logger.debug("target %.2f not reached within %d months", target, cap_months)
    return math.inf
