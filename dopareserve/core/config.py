# dopareserve/core/config.py
from dataclasses import dataclass

SIMULATION_SPEED = 60              # ticks per wall-clock second
MINUTES_PER_DAY = 24 * 60
MAX_DATA_LENGTH = 2 * MINUTES_PER_DAY

REFILL_PER_MINUTE = 0.1            # % of reserve regained per simulated minute
BASE_TURNOVER_PER_MINUTE = 0.05    # must stay below REFILL_PER_MINUTE

INITIAL_RESERVE = 50.0
MIN_RESERVE_TO_ACTIVATE = 1.0


def tick_interval_ms(speed: int = SIMULATION_SPEED) -> int:
    return max(1, int(round(1000 / speed)))


@dataclass(frozen=True)
class SimulationConfig:
    refill_per_minute: float = REFILL_PER_MINUTE
    base_turnover: float = BASE_TURNOVER_PER_MINUTE
    capacity: int = MAX_DATA_LENGTH
    initial_reserve: float = INITIAL_RESERVE
    min_reserve_to_activate: float = MIN_RESERVE_TO_ACTIVATE
    speed: int = SIMULATION_SPEED

    def __post_init__(self):
        if self.capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {self.capacity}")
        if self.speed < 1:
            raise ValueError(f"speed must be >= 1, got {self.speed}")
        if self.base_turnover >= self.refill_per_minute:
            raise ValueError(
                "base_turnover must be smaller than refill_per_minute "
                f"({self.base_turnover} >= {self.refill_per_minute})"
            )

    @property
    def tick_ms(self) -> int:
        return tick_interval_ms(self.speed)
