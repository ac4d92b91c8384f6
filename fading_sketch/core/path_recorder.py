"""
Path recorder: appends pointer coordinates to the live path.
"""

from .renderer import StrokeRenderer
from .stroke_path import DrawPath, Point
from .surface import SurfaceProvider


class PathRecorder:
    """Appends points and repaints the live stroke incrementally."""

    def __init__(self, renderer: StrokeRenderer, surface_provider: SurfaceProvider):
        self._renderer = renderer
        self._surface_provider = surface_provider

    @staticmethod
    def normalize(x, y) -> Point:
        """Turn raw event coordinates into a surface-local Point."""
        return Point.from_coords(x, y)

    def record(self, path: DrawPath, point: Point):
        """Append ``point`` to ``path`` and draw the live stroke (no clear)."""
        path.append(point)
        self._renderer.repaint_live(self._surface_provider(), path)


__all__ = ['PathRecorder']
