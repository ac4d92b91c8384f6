"""
Stroke renderer.

Issues draw calls against a DrawingSurface for the live path and the
committed history. Clearing is the caller's job: repaint() only adds ink.
"""

from typing import Iterable, Optional

from ..config import Config
from .stroke_path import DrawPath
from .surface import DrawingSurface


class StrokeRenderer:
    """
    Repaints the live path in the default style and the history in the
    accent style.

    Same inputs always produce the same sequence of draw calls.
    """

    def __init__(self, accent_style: str = Config.ACCENT_STROKE_COLOR):
        self._accent_style = accent_style

    @property
    def accent_style(self) -> str:
        return self._accent_style

    def repaint(
        self,
        surface: Optional[DrawingSurface],
        live_path: Optional[DrawPath],
        history: Iterable[DrawPath]
    ):
        """
        Draw the live path, then every historical path.

        Args:
            surface: Target surface, or None if not acquired (no-op)
            live_path: Stroke in progress, if any
            history: Committed paths in commit order
        """
        if surface is None:
            return

        self.repaint_live(surface, live_path)

        surface.save()
        try:
            surface.stroke_style = self._accent_style
            for path in history:
                self._draw_path(surface, path)
        finally:
            surface.restore()

    def repaint_live(self, surface: Optional[DrawingSurface], live_path: Optional[DrawPath]):
        """Draw only the live path, in whatever style the surface holds."""
        if surface is None or live_path is None:
            return
        self._draw_path(surface, live_path)

    @staticmethod
    def _draw_path(surface: DrawingSurface, path: DrawPath):
        points = path.points
        if not points:
            return
        surface.begin_path()
        first = points[0]
        surface.move_to(first.x, first.y)
        for point in points[1:]:
            surface.line_to(point.x, point.y)
        surface.stroke()


__all__ = ['StrokeRenderer']
