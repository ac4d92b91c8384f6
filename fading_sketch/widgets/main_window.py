"""
MainWindow - Main application window

Pattern: QMainWindow with the sketch canvas as central widget
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QStatusBar, QWidget

from ..config import Config
from ..core.scheduler import TaskScheduler
from ..events.event_bus import EventBus, get_event_bus
from .sketch_canvas import SketchCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window

    Layout:
        +------------------------------------------+
        |  SketchCanvas (1280 x 720)               |
        +------------------------------------------+
        |  StatusBar (stroke counts)               |
        +------------------------------------------+
    """

    def __init__(self, parent: Optional[QWidget] = None, event_bus: Optional[EventBus] = None,
                 scheduler: Optional[TaskScheduler] = None):
        super().__init__(parent)

        self._event_bus = event_bus or get_event_bus()

        self._setup_ui(scheduler)
        self._connect_signals()

        self.setWindowTitle(f"{Config.APP_NAME} {Config.APP_VERSION}")

    def _setup_ui(self, scheduler: Optional[TaskScheduler]):
        """Create canvas and status bar"""
        self._canvas = SketchCanvas(self, scheduler=scheduler, event_bus=self._event_bus)
        self.setCentralWidget(self._canvas)

        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._show_counts(0, 0)

    def _connect_signals(self):
        self._event_bus.history_changed.connect(self._show_counts)

    @property
    def canvas(self) -> SketchCanvas:
        return self._canvas

    def _show_counts(self, total: int, visible: int):
        self._status_bar.showMessage(f"Strokes: {total} committed, {visible} visible")


__all__ = ['MainWindow']
