"""
Stroke capture core.

Provides the state machine that turns pointer events into paths:
- stroke_path: Point and DrawPath data model
- path_history: versioned history of committed paths
- session_state: drag state and live path
- drag_state: pointer event transitions
- path_recorder: point appends with live repaint
- commit_decay: commit to history and delayed decay
- renderer: draw calls for live path and history
- scheduler: keyed one-shot tasks (QTimer based)
- session: SketchSession facade
"""

from .errors import (
    SketchError,
    SurfaceUnavailable,
    NoActiveStroke,
    PathSealedError,
    DuplicatePathError,
)
from .stroke_path import Point, DrawPath
from .path_history import PathHistory
from .session_state import DragState, SessionState
from .surface import DrawingSurface
from .renderer import StrokeRenderer
from .path_recorder import PathRecorder
from .scheduler import ScheduledTask, TaskScheduler, QtTaskScheduler
from .commit_decay import CommitDecayManager
from .drag_state import PointerEventType, StrokeAction, DragStateMachine
from .session import SketchSession

__all__ = [
    # Errors
    'SketchError',
    'SurfaceUnavailable',
    'NoActiveStroke',
    'PathSealedError',
    'DuplicatePathError',
    # Data model
    'Point',
    'DrawPath',
    'PathHistory',
    'DragState',
    'SessionState',
    # Drawing
    'DrawingSurface',
    'StrokeRenderer',
    'PathRecorder',
    # Timing
    'ScheduledTask',
    'TaskScheduler',
    'QtTaskScheduler',
    'CommitDecayManager',
    # State machine
    'PointerEventType',
    'StrokeAction',
    'DragStateMachine',
    'SketchSession',
]
