"""
Deferred one-shot tasks keyed by an identifier.

The commit/decay manager never talks to QTimer directly; it goes through
a TaskScheduler so the decay delay can be driven by the Qt event loop in
the application and by virtual time in tests.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle to one scheduled callback. Fires at most once."""

    def __init__(self, key: str, delay_ms: int, callback: Callable[[], None],
                 on_cancel: Optional[Callable[['ScheduledTask'], None]] = None):
        self._key = key
        self._delay_ms = delay_ms
        self._callback = callback
        self._active = True
        self._on_cancel = on_cancel

    def __repr__(self):
        return f"ScheduledTask(key={self._key!r}, delay_ms={self._delay_ms}, active={self._active})"

    @property
    def key(self) -> str:
        return self._key

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self):
        """Prevent the callback from running. No-op once fired."""
        if not self._active:
            return
        self._active = False
        if self._on_cancel is not None:
            self._on_cancel(self)

    def run(self):
        """Run the callback if the task is still active."""
        if not self._active:
            return
        self._active = False
        self._callback()


class TaskScheduler:
    """Interface for schedulers handing out ScheduledTask objects."""

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        raise NotImplementedError

    def pending_keys(self) -> Tuple[str, ...]:
        raise NotImplementedError


class QtTaskScheduler(QObject, TaskScheduler):
    """
    Scheduler backed by one single-shot QTimer per task.

    Timers are parented to the scheduler, so they run on the thread the
    scheduler lives on (the GUI thread).
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._tasks: Dict[str, ScheduledTask] = {}
        self._timers: Dict[str, QTimer] = {}

    def schedule(self, key: str, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        if key in self._tasks:
            logger.warning("Task %s already scheduled, replacing it", key)
            self._tasks[key].cancel()

        task = ScheduledTask(key, delay_ms, callback, on_cancel=self._discard)

        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(max(0, delay_ms))
        timer.timeout.connect(lambda: self._fire(task))

        self._tasks[key] = task
        self._timers[key] = timer
        timer.start()
        return task

    def pending_keys(self) -> Tuple[str, ...]:
        return tuple(self._tasks.keys())

    def _release(self, task: ScheduledTask):
        if self._tasks.get(task.key) is task:
            del self._tasks[task.key]
            timer = self._timers.pop(task.key)
            timer.stop()
            timer.deleteLater()

    def _discard(self, task: ScheduledTask):
        self._release(task)
        logger.debug("Task %s cancelled", task.key)

    def _fire(self, task: ScheduledTask):
        self._release(task)
        task.run()


__all__ = ['ScheduledTask', 'TaskScheduler', 'QtTaskScheduler']
