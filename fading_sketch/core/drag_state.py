"""
Drag state machine.

Five pointer events feed three actions:

    DOWN          -> START   IDLE -> DRAGGING
    MOVE, ENTER   -> EXTEND  DRAGGING -> DRAGGING
    UP, LEAVE     -> END     DRAGGING -> IDLE

Anything else is a no-op. Pointer-up and pointer-leave both end the
stroke through the same END transition; END stores its coordinate only
when it differs from the last recorded point.
"""

import logging
from enum import Enum

from .commit_decay import CommitDecayManager
from .errors import SurfaceUnavailable, NoActiveStroke
from .path_recorder import PathRecorder
from .session_state import SessionState
from .stroke_path import DrawPath, Point
from .surface import SurfaceProvider

logger = logging.getLogger(__name__)


class PointerEventType(Enum):
    """Pointer events delivered by the hosting shell."""
    DOWN = 'down'
    MOVE = 'move'
    ENTER = 'enter'
    UP = 'up'
    LEAVE = 'leave'


class StrokeAction(Enum):
    """Abstract transitions of the drag state machine."""
    START = 'start'
    EXTEND = 'extend'
    END = 'end'


EVENT_ACTIONS = {
    PointerEventType.DOWN: StrokeAction.START,
    PointerEventType.MOVE: StrokeAction.EXTEND,
    PointerEventType.ENTER: StrokeAction.EXTEND,
    PointerEventType.UP: StrokeAction.END,
    PointerEventType.LEAVE: StrokeAction.END,
}


class DragStateMachine:
    """Drives the IDLE/DRAGGING cycle of a SessionState."""

    def __init__(
        self,
        state: SessionState,
        recorder: PathRecorder,
        committer: CommitDecayManager,
        surface_provider: SurfaceProvider
    ):
        self._state = state
        self._recorder = recorder
        self._committer = committer
        self._surface_provider = surface_provider
        self._handlers = {
            StrokeAction.START: self._start,
            StrokeAction.EXTEND: self._extend,
            StrokeAction.END: self._end,
        }

    def handle(self, event_type: PointerEventType, x, y) -> bool:
        """
        Feed one pointer event into the machine.

        Returns:
            True if the event started, extended or ended a stroke,
            False if it was ignored
        """
        action = EVENT_ACTIONS[event_type]
        try:
            point = self._recorder.normalize(x, y)
        except ValueError as e:
            logger.debug("Dropped %s event: %s", event_type.value, e)
            return False

        try:
            return self._handlers[action](point)
        except (SurfaceUnavailable, NoActiveStroke) as e:
            logger.debug("Ignored %s event: %s", event_type.value, e)
            return False

    def _start(self, point: Point) -> bool:
        if self._surface_provider() is None:
            raise SurfaceUnavailable("Drawing surface not acquired")
        if self._state.is_dragging:
            # A second press cannot open a second stroke
            return False

        path = DrawPath()
        self._state.begin_stroke(path)
        self._recorder.record(path, point)
        logger.debug("Stroke %s started at (%.1f, %.1f)", path.id, point.x, point.y)
        return True

    def _extend(self, point: Point) -> bool:
        path = self._state.require_live_path()
        self._recorder.record(path, point)
        return True

    def _end(self, point: Point) -> bool:
        path = self._state.require_live_path()
        # The release usually repeats the last move position; don't store it twice
        if path.points[-1] != point:
            self._recorder.record(path, point)
        self._state.end_stroke()
        self._committer.commit(path)
        return True


__all__ = ['PointerEventType', 'StrokeAction', 'EVENT_ACTIONS', 'DragStateMachine']
