# dopareserve/core/buffer.py
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from dopareserve.core.config import MAX_DATA_LENGTH, MINUTES_PER_DAY


def clock_label(sequence_index: int) -> str:
    minute_of_day = sequence_index % MINUTES_PER_DAY
    return f"{minute_of_day // 60:02d}:{minute_of_day % 60:02d}"


@dataclass(frozen=True)
class Sample:
    sequence_index: int
    clock_label: str
    consumption: float          # turnover in this minute, unitless
    reserve_percent: float      # 0..100
    activities: Tuple[str, ...]


class RollingBuffer:
    """
    Fixed-capacity FIFO of samples backing the chart.
    - never longer than ``capacity``
    - appending at capacity evicts exactly the oldest sample
    - sequence indices keep increasing across evictions
    """

    def __init__(self, capacity: int = MAX_DATA_LENGTH):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = int(capacity)
        self._samples: deque[Sample] = deque(maxlen=self.capacity)
        self._next_index = 0

    @classmethod
    def seeded(cls, capacity: int, consumption: float, reserve_percent: float) -> "RollingBuffer":
        buf = cls(capacity)
        for _ in range(capacity):
            buf.append(consumption, reserve_percent, ())
        return buf

    def append(self, consumption: float, reserve_percent: float, activities: Tuple[str, ...]) -> Sample:
        i = self._next_index
        sample = Sample(
            sequence_index=i,
            clock_label=clock_label(i),
            consumption=float(consumption),
            reserve_percent=float(reserve_percent),
            activities=tuple(activities),
        )
        self._samples.append(sample)
        self._next_index = i + 1
        return sample

    @property
    def next_index(self) -> int:
        return self._next_index

    def latest(self) -> Optional[Sample]:
        return self._samples[-1] if self._samples else None

    def oldest(self) -> Optional[Sample]:
        return self._samples[0] if self._samples else None

    def snapshot(self) -> list[Sample]:
        return list(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)
