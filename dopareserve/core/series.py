# dopareserve/core/series.py
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from dopareserve.core.buffer import Sample
from dopareserve.core.config import MINUTES_PER_DAY


@dataclass
class ChartSeries:
    x: np.ndarray             # sequence indices
    reserve: np.ndarray       # 0..100
    consumption: np.ndarray   # 0..1 on the chart's right axis
    midnights: np.ndarray     # indices that fall on simulated 00:00


def chart_series(samples: Sequence[Sample]) -> ChartSeries:
    n = len(samples)
    x = np.fromiter((s.sequence_index for s in samples), dtype=np.int64, count=n)
    reserve = np.fromiter((s.reserve_percent for s in samples), dtype=float, count=n)
    consumption = np.fromiter((s.consumption for s in samples), dtype=float, count=n)
    return ChartSeries(
        x=x,
        reserve=reserve,
        consumption=consumption,
        midnights=x[x % MINUTES_PER_DAY == 0],
    )
