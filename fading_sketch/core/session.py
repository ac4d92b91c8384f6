"""
SketchSession - one drawing session wired end to end

Owns the session state and the components that act on it, and exposes
the five pointer hooks a hosting widget calls with surface-local
coordinates.

Usage:
    session = SketchSession(scheduler=QtTaskScheduler())
    session.attach_surface(surface)
    session.pointer_down(10, 10)
    session.pointer_move(20, 10)
    session.pointer_up(20, 20)
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import Config
from .commit_decay import CommitDecayManager
from .drag_state import DragStateMachine, PointerEventType
from .path_history import PathHistory
from .path_recorder import PathRecorder
from .renderer import StrokeRenderer
from .scheduler import QtTaskScheduler, TaskScheduler
from .session_state import DragState, SessionState
from .stroke_path import DrawPath
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class SketchSession(QObject):
    """
    Stroke capture session.

    Signals are relayed from the commit/decay manager so the shell only
    needs to listen to the session.
    """

    # Signals
    stroke_started = pyqtSignal(str)  # path_id
    stroke_committed = pyqtSignal(str)  # path_id
    path_decayed = pyqtSignal(str)  # path_id
    repainted = pyqtSignal()  # full clear + repaint happened
    live_updated = pyqtSignal()  # live stroke drawn incrementally

    def __init__(
        self,
        scheduler: Optional[TaskScheduler] = None,
        renderer: Optional[StrokeRenderer] = None,
        decay_delay_ms: int = Config.DECAY_DELAY_MS,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)

        self._surface: Optional[DrawingSurface] = None
        self._state = SessionState(PathHistory())
        self._scheduler = scheduler if scheduler is not None else QtTaskScheduler(self)
        self._renderer = renderer or StrokeRenderer()

        self._recorder = PathRecorder(self._renderer, self.surface)
        self._committer = CommitDecayManager(
            self._state, self._renderer, self._scheduler, self.surface,
            decay_delay_ms=decay_delay_ms, parent=self
        )
        self._machine = DragStateMachine(
            self._state, self._recorder, self._committer, self.surface
        )

        self._committer.path_committed.connect(self.stroke_committed)
        self._committer.path_decayed.connect(self.path_decayed)
        self._committer.repainted.connect(self.repainted)

    # ==================== Properties ====================

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def history(self) -> PathHistory:
        return self._state.history

    @property
    def live_path(self) -> Optional[DrawPath]:
        return self._state.live_path

    @property
    def drag_state(self) -> DragState:
        return self._state.drag_state

    @property
    def committer(self) -> CommitDecayManager:
        return self._committer

    # ==================== Surface ====================

    def surface(self) -> Optional[DrawingSurface]:
        """Current drawing surface, or None if not acquired."""
        return self._surface

    def attach_surface(self, surface: DrawingSurface):
        """Acquire a drawing surface and redraw the session onto it."""
        self._surface = surface
        logger.debug("Surface attached (%dx%d)", surface.width, surface.height)
        self.redraw()

    def detach_surface(self):
        """Drop the surface. Drawing becomes a no-op until reattached."""
        self._surface = None
        logger.debug("Surface detached")

    def redraw(self) -> bool:
        """Clear the surface and repaint live path and history."""
        return self._committer.full_repaint()

    # ==================== Pointer hooks ====================

    def pointer_down(self, x, y) -> bool:
        handled = self._dispatch(PointerEventType.DOWN, x, y)
        if handled:
            self.stroke_started.emit(self._state.live_path.id)
        return handled

    def pointer_move(self, x, y) -> bool:
        return self._dispatch(PointerEventType.MOVE, x, y)

    def pointer_enter(self, x, y) -> bool:
        return self._dispatch(PointerEventType.ENTER, x, y)

    def pointer_up(self, x, y) -> bool:
        return self._dispatch(PointerEventType.UP, x, y)

    def pointer_leave(self, x, y) -> bool:
        return self._dispatch(PointerEventType.LEAVE, x, y)

    def _dispatch(self, event_type: PointerEventType, x, y) -> bool:
        handled = self._machine.handle(event_type, x, y)
        if handled and self._state.is_dragging:
            self.live_updated.emit()
        return handled


__all__ = ['SketchSession']
