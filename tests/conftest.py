"""Shared pytest fixtures for the fading_sketch test suite.

Fixtures:
    qapp: Offscreen QApplication shared by the whole session
    surface: RecordingSurface that logs every draw call
    scheduler: ManualScheduler driven by virtual time
    session: SketchSession wired to the recording surface and manual scheduler
"""

import os
from typing import Callable, List, Optional, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from fading_sketch.core.scheduler import ScheduledTask, TaskScheduler  # noqa: E402
from fading_sketch.core.session import SketchSession  # noqa: E402


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class RecordingSurface:
    """DrawingSurface that records draw calls instead of drawing."""

    def __init__(self, width: int = 1280, height: int = 720):
        self._width = width
        self._height = height
        self._stroke_style = "#000000"
        self._saved: List[str] = []
        self.calls: List[Tuple] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def stroke_style(self) -> str:
        return self._stroke_style

    @stroke_style.setter
    def stroke_style(self, value: str):
        self._stroke_style = value
        self.calls.append(("stroke_style", value))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def stroke(self):
        self.calls.append(("stroke", self._stroke_style))

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear_rect", x, y, width, height))

    def clear(self):
        self.clear_rect(0, 0, self._width, self._height)

    def save(self):
        self._saved.append(self._stroke_style)
        self.calls.append(("save",))

    def restore(self):
        self._stroke_style = self._saved.pop()
        self.calls.append(("restore",))

    # Helpers for assertions

    def reset(self):
        self.calls = []

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]

    def strokes(self) -> List[Tuple]:
        return [call for call in self.calls if call[0] == "stroke"]

    def clear_count(self) -> int:
        return self.names().count("clear_rect")


class ManualScheduler(TaskScheduler):
    """Scheduler whose clock only moves when advance() is called."""

    def __init__(self):
        self.now = 0
        self._queue: List[Tuple[int, int, ScheduledTask]] = []
        self._seq = 0
        self.fired: List[str] = []

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(key, delay_ms, callback, on_cancel=self._remove)
        self._queue.append((self.now + delay_ms, self._seq, task))
        self._seq += 1
        return task

    def pending_keys(self) -> Tuple[str, ...]:
        return tuple(task.key for _, _, task in sorted(self._queue, key=lambda e: e[:2]))

    def _remove(self, task: ScheduledTask):
        self._queue = [entry for entry in self._queue if entry[2] is not task]

    def advance(self, ms: int):
        """Move the clock forward, running every task that comes due in order."""
        target = self.now + ms
        while True:
            due = sorted((e for e in self._queue if e[0] <= target), key=lambda e: e[:2])
            if not due:
                break
            when, _, task = due[0]
            self._queue.remove(due[0])
            self.now = when
            self.fired.append(task.key)
            task.run()
        self.now = target


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def qapp():
    """Offscreen QApplication for widget and painter tests."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def session(surface, scheduler) -> SketchSession:
    sketch = SketchSession(scheduler=scheduler, decay_delay_ms=2000)
    sketch.attach_surface(surface)
    surface.reset()
    return sketch


def _draw_stroke(sketch: SketchSession, points, end: Optional[str] = "up"):
    """Press at the first point, move through the middle ones, end at the last."""
    first, *middle, last = points
    sketch.pointer_down(*first)
    for point in middle:
        sketch.pointer_move(*point)
    if end == "up":
        sketch.pointer_up(*last)
    elif end == "leave":
        sketch.pointer_leave(*last)
    return sketch.history.snapshot()[-1] if len(sketch.history) else None


@pytest.fixture
def draw_stroke():
    """Helper drawing one stroke; returns the committed path (or None)."""
    return _draw_stroke
