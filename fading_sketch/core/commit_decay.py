"""
Commit and decay of finished strokes.

When a stroke ends its path moves into history and the surface is fully
redrawn. A fixed delay later the path's points are cleared (decay) and
the surface is redrawn again, so old ink disappears while the history
entry keeps its id.
"""

import logging
from typing import Dict, Optional, Tuple

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import Config
from .renderer import StrokeRenderer
from .scheduler import ScheduledTask, TaskScheduler
from .session_state import SessionState
from .stroke_path import DrawPath
from .surface import SurfaceProvider

logger = logging.getLogger(__name__)


class CommitDecayManager(QObject):
    """
    Moves finished paths into history and schedules their decay.

    Every commit schedules exactly one decay task keyed by the path id.
    Tasks are independent: later commits never cancel earlier ones.
    """

    # Signals
    path_committed = pyqtSignal(str)  # path_id
    path_decayed = pyqtSignal(str)  # path_id
    repainted = pyqtSignal()

    def __init__(
        self,
        state: SessionState,
        renderer: StrokeRenderer,
        scheduler: TaskScheduler,
        surface_provider: SurfaceProvider,
        decay_delay_ms: int = Config.DECAY_DELAY_MS,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self._state = state
        self._renderer = renderer
        self._scheduler = scheduler
        self._surface_provider = surface_provider
        self._decay_delay_ms = decay_delay_ms
        self._decay_tasks: Dict[str, ScheduledTask] = {}

    @property
    def decay_delay_ms(self) -> int:
        return self._decay_delay_ms

    def pending_decays(self) -> Tuple[str, ...]:
        """Ids of committed paths whose decay has not fired yet."""
        return tuple(key for key, task in self._decay_tasks.items() if task.active)

    def commit(self, path: DrawPath):
        """
        Append ``path`` to history, redraw, and schedule its decay.

        The caller must already have released the live path, so the redraw
        shows history only.
        """
        path.seal()
        self._state.history.append(path)
        logger.debug("Committed path %s with %d points", path.id, len(path))
        self.path_committed.emit(path.id)

        self.full_repaint()

        self._decay_tasks[path.id] = self._scheduler.schedule(
            path.id, self._decay_delay_ms, lambda: self._decay(path.id)
        )

    def full_repaint(self) -> bool:
        """
        Clear the surface and draw the live path plus history.

        Returns:
            False if the surface is unavailable and nothing was drawn
        """
        surface = self._surface_provider()
        if surface is None:
            return False
        surface.clear()
        self._renderer.repaint(surface, self._state.live_path, self._state.history.snapshot())
        self.repainted.emit()
        return True

    def _decay(self, path_id: str):
        self._decay_tasks.pop(path_id, None)
        if not self._state.history.decay(path_id):
            return
        logger.debug("Path %s decayed", path_id)
        self.path_decayed.emit(path_id)

        if not self.full_repaint():
            logger.debug("Surface unavailable, skipped repaint after decay of %s", path_id)


__all__ = ['CommitDecayManager']
