"""
Fading Sketch

Freehand drawing canvas built on PyQt6. Committed strokes are redrawn in an
accent colour and cleared a fixed delay after they were drawn.
"""

__version__ = "1.0.0"

from .config import Config
from .events.event_bus import EventBus, get_event_bus
from .core.session import SketchSession

__all__ = [
    'Config',
    'EventBus',
    'get_event_bus',
    'SketchSession',
]
