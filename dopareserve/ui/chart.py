# dopareserve/ui/chart.py
from __future__ import annotations

from typing import Dict, Sequence

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt

from dopareserve.core.buffer import Sample, clock_label
from dopareserve.core.series import chart_series

RESERVE_COLOR = "#00ff9d"
RESERVE_FILL = (0, 255, 157, 148)
CONSUMPTION_COLOR = "#7c74bd"
MIDNIGHT_COLOR = (231, 238, 247, 70)


class ClockAxis(pg.AxisItem):
    """Bottom axis showing simulated wall-clock time instead of sample indices."""

    def tickStrings(self, values, scale, spacing):
        return [clock_label(int(round(v))) for v in values]


class ReserveChart(pg.PlotWidget):
    """
    Reserve (left axis, 0..100) and consumption (right axis, 0..1) over the
    rolling window, with a dashed marker at every simulated midnight.
    """

    def __init__(self):
        super().__init__(axisItems={"bottom": ClockAxis(orientation="bottom")})
        pg.setConfigOptions(antialias=True)

        self.setBackground(None)
        self.setMinimumHeight(260)
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()

        self.plot_item = self.getPlotItem()
        self.plot_item.showGrid(x=False, y=True, alpha=0.15)
        self.plot_item.setYRange(0.0, 100.0, padding=0)
        self.plot_item.getAxis("left").setLabel("Reserve", units="%")

        legend = self.plot_item.addLegend(offset=(10, 6))

        self.reserve_curve = self.plot_item.plot(
            [], [],
            pen=pg.mkPen(RESERVE_COLOR, width=2),
            fillLevel=0.0,
            brush=pg.mkBrush(*RESERVE_FILL),
            name="Reserve %",
        )

        # second view box for the consumption axis
        self.consumption_vb = pg.ViewBox()
        self.consumption_vb.setMouseEnabled(x=False, y=False)
        self.plot_item.showAxis("right")
        self.plot_item.scene().addItem(self.consumption_vb)
        right = self.plot_item.getAxis("right")
        right.linkToView(self.consumption_vb)
        right.setLabel("Consumption")
        self.consumption_vb.setXLink(self.plot_item)
        self.consumption_vb.setYRange(0.0, 1.0, padding=0)

        self.consumption_curve = pg.PlotCurveItem(pen=pg.mkPen(CONSUMPTION_COLOR, width=2))
        self.consumption_vb.addItem(self.consumption_curve)
        legend.addItem(self.consumption_curve, "Consumption")

        self._midnight_lines: Dict[int, pg.InfiniteLine] = {}

        self.plot_item.vb.sigResized.connect(self._sync_views)
        self._sync_views()

    def _sync_views(self):
        self.consumption_vb.setGeometry(self.plot_item.vb.sceneBoundingRect())
        self.consumption_vb.linkedViewChanged(self.plot_item.vb, self.consumption_vb.XAxis)

    def redraw(self, samples: Sequence[Sample]) -> None:
        if not samples:
            return
        series = chart_series(samples)

        self.reserve_curve.setData(series.x, series.reserve)
        self.consumption_curve.setData(series.x, series.consumption)
        self.plot_item.setXRange(int(series.x[0]), int(series.x[-1]), padding=0)

        self._update_midnights(series.midnights)

    def _update_midnights(self, midnights: np.ndarray) -> None:
        wanted = {int(i) for i in midnights}

        for idx in list(self._midnight_lines):
            if idx not in wanted:
                self.plot_item.removeItem(self._midnight_lines.pop(idx))

        for idx in wanted:
            if idx in self._midnight_lines:
                continue
            line = pg.InfiniteLine(
                pos=idx,
                angle=90,
                movable=False,
                pen=pg.mkPen(MIDNIGHT_COLOR, width=1, style=Qt.DashLine),
            )
            self.plot_item.addItem(line)
            self._midnight_lines[idx] = line
