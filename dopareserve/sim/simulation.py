# dopareserve/sim/simulation.py
from __future__ import annotations

from typing import Callable, Dict, Optional, Set

from dopareserve.core.activities import definition, in_catalog_order
from dopareserve.core.buffer import RollingBuffer, Sample
from dopareserve.core.config import SimulationConfig
from dopareserve.sim.model import (
    clamp_reserve,
    instantaneous_consumption,
    reserve_delta,
)

# schedule(delay_ms, callback) -> one-shot timer (QTimer.singleShot in the UI)
Scheduler = Callable[[int, Callable[[], None]], None]


class SimulationStopped(RuntimeError):
    pass


class SimulationState:
    """
    Everything one window session mutates: reserve, active set and history.
    Build with ``create()``; ``dispose()`` ends the session for good.
    """

    def __init__(self, config: SimulationConfig, buffer: RollingBuffer):
        self.config = config
        self.buffer = buffer
        self.reserve = clamp_reserve(config.initial_reserve)
        self.active: Set[str] = set()
        self.disposed = False

    @classmethod
    def create(cls, config: Optional[SimulationConfig] = None) -> "SimulationState":
        config = config or SimulationConfig()
        buffer = RollingBuffer.seeded(
            config.capacity,
            consumption=config.base_turnover,
            reserve_percent=clamp_reserve(config.initial_reserve),
        )
        return cls(config, buffer)

    def dispose(self) -> None:
        self.disposed = True
        self.active.clear()

    @property
    def running(self) -> bool:
        return not self.disposed

    def consumption(self) -> float:
        return instantaneous_consumption(self.active, self.config.base_turnover)

    def net_rate(self) -> float:
        """Signed reserve change per simulated minute for the current active set."""
        return reserve_delta(self.consumption(), self.config.refill_per_minute)


class ReserveSimulation:
    def __init__(self, state: SimulationState):
        self.state = state

    def tick(self) -> Sample:
        s = self.state
        if s.disposed:
            raise SimulationStopped("simulation state has been disposed")

        consumption = instantaneous_consumption(s.active, s.config.base_turnover)
        delta = reserve_delta(consumption, s.config.refill_per_minute)
        s.reserve = clamp_reserve(s.reserve + delta)

        return s.buffer.append(consumption, s.reserve, in_catalog_order(s.active))


class ActivityController:
    """
    Single mutation point for the active set.

    Each activation gets a generation token; its auto-off only fires if the
    token is still current, so a manual off + re-activation is never cut short
    by the old timer.
    """

    def __init__(self, state: SimulationState, schedule: Scheduler):
        self.state = state
        self._schedule = schedule
        self._generation: Dict[str, int] = {}

    def is_active(self, activity_id: str) -> bool:
        definition(activity_id)
        return activity_id in self.state.active

    def can_activate(self) -> bool:
        return self.state.running and self.state.reserve >= self.state.config.min_reserve_to_activate

    def toggle(self, activity_id: str, turn_on: bool) -> bool:
        """Returns True if the active set changed."""
        d = definition(activity_id)
        if self.state.disposed:
            return False

        if turn_on:
            if activity_id in self.state.active:
                return False
            if not self.can_activate():
                return False
            self.state.active.add(activity_id)
            token = self._bump(activity_id)
            self._schedule(int(d.default_duration_s * 1000), lambda: self._auto_off(activity_id, token))
            return True

        self._bump(activity_id)
        if activity_id not in self.state.active:
            return False
        self.state.active.discard(activity_id)
        return True

    def _bump(self, activity_id: str) -> int:
        token = self._generation.get(activity_id, 0) + 1
        self._generation[activity_id] = token
        return token

    def _auto_off(self, activity_id: str, token: int) -> None:
        if self._generation.get(activity_id) != token:
            return
        self.toggle(activity_id, False)
