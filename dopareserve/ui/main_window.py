# dopareserve/ui/main_window.py
import sys

from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QLabel,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication

from dopareserve.ui.style import APP_QSS
from dopareserve.ui.model_screen import ModelScreen


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()

        self.setWindowTitle("Dopareserve")
        self.resize(1080, 720)

        self.container = QWidget()
        self.container.setObjectName("appContainer")

        layout = QVBoxLayout(self.container)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        title = QLabel("Dopamine Reserve Model")
        title.setAlignment(Qt.AlignLeft)
        title.setStyleSheet("font-size: 24px; font-weight: 750; letter-spacing: 0.2px; padding: 8px 22px 0 22px;")

        subtitle = QLabel(
            "Activities draw on the reserve, which refills slowly over time. "
            "One second is one simulated hour."
        )
        subtitle.setObjectName("muted")
        subtitle.setWordWrap(True)
        subtitle.setStyleSheet("padding: 0 22px;")

        self.model = ModelScreen()

        layout.addWidget(title)
        layout.addWidget(subtitle)
        layout.addWidget(self.model, 1)

        self.setCentralWidget(self.container)
        self._place_safely()

    def _place_safely(self):
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return
        geo = screen.availableGeometry()
        self.move(geo.center() - self.rect().center())

    def closeEvent(self, event):
        try:
            self.model.teardown()
        finally:
            super().closeEvent(event)


def launch_app():
    app = QApplication(sys.argv)
    app.setStyleSheet(APP_QSS)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
