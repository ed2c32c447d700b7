# dopareserve/ui/model_screen.py
from typing import Dict, Optional

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QProgressBar, QFrame, QPushButton
)
from PySide6.QtCore import Qt, QTimer

from dopareserve.core.activities import ACTIVITIES
from dopareserve.core.config import SimulationConfig
from dopareserve.sim.simulation import ActivityController, ReserveSimulation, SimulationState
from dopareserve.ui.chart import ReserveChart

BAR_STEPS = 1000  # progress bar resolution (0.1 %)


def card() -> QFrame:
    f = QFrame()
    f.setStyleSheet("""
        QFrame {
            background: rgba(255,255,255,0.05);
            border: 1px solid rgba(255,255,255,0.08);
            border-radius: 16px;
        }
    """)
    return f


def format_rate(delta: float) -> str:
    sign = "+" if delta > 0 else ""
    return f"{sign}{delta:.1f}%/m"


class ModelScreen(QWidget):
    """
    Dopamine reserve model
    - Chart: reserve (left axis) + consumption (right axis), last two simulated days
    - Reserve bar with the current net rate per simulated minute
    - One toggle per activity; each switches itself off after its default duration
    - Activities are unavailable while the reserve is below 1 %
    """
    def __init__(self, config: Optional[SimulationConfig] = None):
        super().__init__()
        self.state = SimulationState.create(config)
        self.sim = ReserveSimulation(self.state)
        self.controller = ActivityController(
            self.state,
            lambda delay_ms, callback: QTimer.singleShot(delay_ms, self, callback),
        )

        # --- Chart
        chart_card = card()
        chart_layout = QVBoxLayout(chart_card)
        chart_layout.setContentsMargins(12, 12, 12, 12)

        self.chart = ReserveChart()
        chart_layout.addWidget(self.chart)

        # --- Reserve
        reserve_card = card()
        reserve_layout = QVBoxLayout(reserve_card)
        reserve_layout.setContentsMargins(16, 14, 16, 14)
        reserve_layout.setSpacing(8)

        reserve_title = QLabel("Dopamine Reserve")
        reserve_title.setObjectName("muted")

        bar_row = QHBoxLayout()
        bar_row.setSpacing(12)

        self.reserve_bar = QProgressBar()
        self.reserve_bar.setRange(0, BAR_STEPS)
        self.reserve_bar.setTextVisible(False)

        self.reserve_value = QLabel("--")
        self.reserve_value.setMinimumWidth(150)
        self.reserve_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.reserve_value.setStyleSheet("font-size: 18px; font-weight: 750;")

        bar_row.addWidget(self.reserve_bar, 1)
        bar_row.addWidget(self.reserve_value, 0)

        reserve_layout.addWidget(reserve_title)
        reserve_layout.addLayout(bar_row)

        # --- Actions
        actions_card = card()
        actions = QGridLayout(actions_card)
        actions.setContentsMargins(16, 14, 16, 14)
        actions.setSpacing(10)

        self.buttons: Dict[str, QPushButton] = {}
        for i, (activity_id, d) in enumerate(ACTIVITIES.items()):
            b = QPushButton(d.label)
            b.setCheckable(True)
            b.setCursor(Qt.PointingHandCursor)
            b.clicked.connect(lambda checked, a=activity_id: self.on_toggle(a, checked))
            actions.addWidget(b, i // 4, i % 4)
            self.buttons[activity_id] = b

        # --- Page layout
        root = QVBoxLayout(self)
        root.setContentsMargins(22, 20, 22, 20)
        root.setSpacing(12)
        root.addWidget(chart_card, 1)
        root.addWidget(reserve_card)
        root.addWidget(actions_card)

        self.refresh()

        # --- Timer tick
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.on_tick)
        self.timer.start(self.state.config.tick_ms)

    # -----------------------
    # Loop
    # -----------------------

    def on_tick(self):
        try:
            self.sim.tick()
            self.refresh()
        except Exception as e:
            print("[Dopareserve] Tick error:", repr(e))

    def on_toggle(self, activity_id: str, turn_on: bool):
        self.controller.toggle(activity_id, turn_on)
        self._sync_buttons()

    # -----------------------
    # View
    # -----------------------

    def refresh(self):
        s = self.state
        self.chart.redraw(s.buffer.snapshot())

        self.reserve_bar.setValue(int(round(s.reserve / 100.0 * BAR_STEPS)))
        self.reserve_value.setText(f"{s.reserve:.1f}%  {format_rate(s.net_rate())}")

        self._sync_buttons()

    def _sync_buttons(self):
        can_activate = self.controller.can_activate()
        for activity_id, b in self.buttons.items():
            active = self.controller.is_active(activity_id)
            b.setChecked(active)
            # an active activity can always be switched off
            b.setEnabled(active or can_activate)

    def teardown(self):
        if self.timer.isActive():
            self.timer.stop()
        self.state.dispose()

    def closeEvent(self, event):
        try:
            self.teardown()
        finally:
            super().closeEvent(event)
