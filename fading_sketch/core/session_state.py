"""
Explicit session state shared by every stroke handler.

The drag state is derived from the live path, so ``DRAGGING`` and
"a live path exists" can never disagree.
"""

from enum import Enum
from typing import Optional

from .errors import NoActiveStroke
from .path_history import PathHistory
from .stroke_path import DrawPath


class DragState(Enum):
    """Stroke capture state."""
    IDLE = 0
    DRAGGING = 1


class SessionState:
    """Drag state, live path and history of one drawing session."""

    def __init__(self, history: Optional[PathHistory] = None):
        self._live_path: Optional[DrawPath] = None
        self._history = history if history is not None else PathHistory()

    @property
    def drag_state(self) -> DragState:
        if self._live_path is None:
            return DragState.IDLE
        return DragState.DRAGGING

    @property
    def is_dragging(self) -> bool:
        return self._live_path is not None

    @property
    def live_path(self) -> Optional[DrawPath]:
        return self._live_path

    @property
    def history(self) -> PathHistory:
        return self._history

    def begin_stroke(self, path: DrawPath):
        """Enter DRAGGING with ``path`` as the live path."""
        self._live_path = path

    def require_live_path(self) -> DrawPath:
        """
        Raises:
            NoActiveStroke: if no stroke is in progress
        """
        if self._live_path is None:
            raise NoActiveStroke("No stroke in progress")
        return self._live_path

    def end_stroke(self) -> DrawPath:
        """Release the live path and return to IDLE."""
        path = self.require_live_path()
        self._live_path = None
        return path


__all__ = ['DragState', 'SessionState']
