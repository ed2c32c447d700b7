import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from dopareserve.core.config import SimulationConfig
from dopareserve.sim.scheduler import TickScheduler
from dopareserve.sim.simulation import ActivityController, ReserveSimulation, SimulationState


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig()


@pytest.fixture
def state(config) -> SimulationState:
    return SimulationState.create(config)


@pytest.fixture
def sim(state) -> ReserveSimulation:
    return ReserveSimulation(state)


@pytest.fixture
def scheduler(config) -> TickScheduler:
    return TickScheduler(config.speed)


@pytest.fixture
def controller(state, scheduler) -> ActivityController:
    return ActivityController(state, scheduler)
