"""
EventBus - Central event system for application-wide stroke notifications

Pattern: Observer/Publisher-Subscriber
"""

from PyQt6.QtCore import QObject, pyqtSignal
from typing import Optional, Tuple


class EventBus(QObject):
    """
    Central event bus for decoupled communication between components

    The canvas publishes stroke lifecycle events here; the main window and
    anything else interested subscribe without holding a canvas reference.

    Usage:
        event_bus = get_event_bus()
        event_bus.history_changed.connect(some_handler)
    """

    # Stroke lifecycle events
    stroke_started = pyqtSignal(str)  # path_id
    stroke_committed = pyqtSignal(str)  # path_id
    path_decayed = pyqtSignal(str)  # path_id

    # History events
    history_changed = pyqtSignal(int, int)  # total paths, visible paths

    def __init__(self):
        super().__init__()

        # State storage
        self._last_committed_id: Optional[str] = None
        self._history_total = 0
        self._history_visible = 0

    # Getters (read current state)

    def get_last_committed(self) -> Optional[str]:
        """Get id of the most recently committed path"""
        return self._last_committed_id

    def get_history_counts(self) -> Tuple[int, int]:
        """Get (total, visible) history counts"""
        return self._history_total, self._history_visible

    # Setters (update state and emit signals)

    def notify_stroke_started(self, path_id: str):
        self.stroke_started.emit(path_id)

    def notify_stroke_committed(self, path_id: str):
        self._last_committed_id = path_id
        self.stroke_committed.emit(path_id)

    def notify_path_decayed(self, path_id: str):
        self.path_decayed.emit(path_id)

    def set_history_counts(self, total: int, visible: int):
        """
        Update history counts

        Args:
            total: Number of committed paths, decayed included
            visible: Number of committed paths still holding points
        """
        if (total, visible) != (self._history_total, self._history_visible):
            self._history_total = total
            self._history_visible = visible
            self.history_changed.emit(total, visible)


# Singleton instance (lazy initialization)
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get global EventBus singleton instance

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


# Export
__all__ = ['EventBus', 'get_event_bus']
