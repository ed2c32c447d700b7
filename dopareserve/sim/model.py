# dopareserve/sim/model.py
from typing import Iterable

from dopareserve.core.activities import definition
from dopareserve.core.config import BASE_TURNOVER_PER_MINUTE

RESERVE_MIN = 0.0
RESERVE_MAX = 100.0


def dopamine_turnover(activity_id: str, baseline: float = BASE_TURNOVER_PER_MINUTE) -> float:
    # Effect does not fade while the activity stays on; no time term.
    return baseline * definition(activity_id).factor


def instantaneous_consumption(active: Iterable[str], baseline: float = BASE_TURNOVER_PER_MINUTE) -> float:
    return baseline + sum(dopamine_turnover(a, baseline) for a in active)


def reserve_delta(consumption: float, refill: float) -> float:
    return refill - consumption


def clamp_reserve(value: float) -> float:
    return max(RESERVE_MIN, min(RESERVE_MAX, float(value)))
