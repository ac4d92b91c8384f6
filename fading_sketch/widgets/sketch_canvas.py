"""
SketchCanvas - Freehand drawing widget

Translates Qt mouse events into SketchSession pointer hooks and shows the
session's surface. The surface is acquired the first time the widget is
shown, so presses that arrive earlier are ignored by the session.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QColor, QCursor, QPainter
from PyQt6.QtWidgets import QWidget

from ..config import Config
from ..core.scheduler import TaskScheduler
from ..core.session import SketchSession
from ..events.event_bus import EventBus, get_event_bus
from .pixmap_surface import PixmapSurface

logger = logging.getLogger(__name__)


class SketchCanvas(QWidget):
    """
    Drawing surface widget.

    Event mapping:
    - left press   -> pointer_down
    - mouse move   -> pointer_move
    - left release -> pointer_up
    - leave        -> pointer_leave
    - enter        -> pointer_enter
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        session: Optional[SketchSession] = None,
        scheduler: Optional[TaskScheduler] = None,
        event_bus: Optional[EventBus] = None
    ):
        super().__init__(parent)

        self._session = session or SketchSession(scheduler=scheduler, parent=self)
        self._event_bus = event_bus or get_event_bus()
        self._surface: Optional[PixmapSurface] = None
        self._background = QColor(Config.CANVAS_BACKGROUND)

        self._setup_widget()
        self._connect_signals()

    def _setup_widget(self):
        """Configure the widget."""
        self.setFixedSize(Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)
        self.setMouseTracking(True)
        self.setCursor(QCursor(Qt.CursorShape.CrossCursor))

    def _connect_signals(self):
        self._session.live_updated.connect(self.update)
        self._session.repainted.connect(self.update)

        self._session.stroke_started.connect(self._event_bus.notify_stroke_started)
        self._session.stroke_committed.connect(self._on_stroke_committed)
        self._session.path_decayed.connect(self._on_path_decayed)

    # ==================== Properties ====================

    @property
    def session(self) -> SketchSession:
        return self._session

    @property
    def surface(self) -> Optional[PixmapSurface]:
        return self._surface

    # ==================== Surface acquisition ====================

    def acquire_surface(self) -> PixmapSurface:
        """Create the backing surface if needed and hand it to the session."""
        if self._surface is None:
            self._surface = PixmapSurface(self.width(), self.height())
            self._session.attach_surface(self._surface)
            logger.info("Canvas surface acquired (%dx%d)", self.width(), self.height())
        return self._surface

    def showEvent(self, event):
        self.acquire_surface()
        super().showEvent(event)

    def resizeEvent(self, event):
        if self._surface is not None:
            size = event.size()
            self._surface.resize(size.width(), size.height())
            self._session.redraw()
        super().resizeEvent(event)

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._session.pointer_down(pos.x(), pos.y())
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        pos = event.position()
        if self._session.pointer_move(pos.x(), pos.y()):
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self._session.pointer_up(pos.x(), pos.y())
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def enterEvent(self, event):
        pos = event.position()
        self._session.pointer_enter(pos.x(), pos.y())
        super().enterEvent(event)

    def leaveEvent(self, event):
        # QEvent.Leave carries no position
        pos = QPointF(self.mapFromGlobal(QCursor.pos()))
        self._session.pointer_leave(pos.x(), pos.y())
        super().leaveEvent(event)

    # ==================== Painting ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)
        if self._surface is not None:
            painter.drawImage(0, 0, self._surface.image())
        painter.end()

    # ==================== Event bus relay ====================

    def _publish_counts(self):
        history = self._session.history
        self._event_bus.set_history_counts(len(history), history.visible_count())

    def _on_stroke_committed(self, path_id: str):
        self._event_bus.notify_stroke_committed(path_id)
        self._publish_counts()

    def _on_path_decayed(self, path_id: str):
        self._event_bus.notify_path_decayed(path_id)
        self._publish_counts()


__all__ = ['SketchCanvas']
