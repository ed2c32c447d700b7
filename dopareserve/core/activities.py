# dopareserve/core/activities.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


class UnknownActivity(KeyError):
    pass


@dataclass(frozen=True)
class ActivityDefinition:
    id: str
    label: str
    default_duration_s: int   # wall-clock seconds; at SIMULATION_SPEED each one is 60 simulated minutes
    factor: float             # multiplier on the baseline turnover


def _define(*defs: ActivityDefinition) -> Dict[str, ActivityDefinition]:
    return {d.id: d for d in defs}


ACTIVITIES: Dict[str, ActivityDefinition] = _define(
    # sleep replenishes the reserve quicker
    ActivityDefinition("sleep", "Sleep", 60 * 8, -0.75),
    ActivityDefinition("work", "Work", 60 * 8, 1.5),
    ActivityDefinition("play", "Play", 60 * 2, 2.0),
    ActivityDefinition("amphetamine", "Take Amphetamine", 1, 10.0),
    ActivityDefinition("chocolate", "Eat Chocolate", 5, 1.5),
    ActivityDefinition("sex", "Sex", 30, 2.0),
    ActivityDefinition("exercise", "Exercise", 30, 2.0),
    ActivityDefinition("smoke", "Smoke", 5, 2.5),
)


def definition(activity_id: str) -> ActivityDefinition:
    try:
        return ACTIVITIES[activity_id]
    except KeyError:
        raise UnknownActivity(activity_id) from None


def activity_ids() -> Tuple[str, ...]:
    return tuple(ACTIVITIES)


def in_catalog_order(ids: Iterable[str]) -> Tuple[str, ...]:
    """Snapshot of ``ids`` ordered like the catalog (unknown ids are rejected)."""
    wanted = set(ids)
    for activity_id in wanted:
        definition(activity_id)
    return tuple(a for a in ACTIVITIES if a in wanted)
