"""
Drawing surface contract consumed by the renderer.

Mirrors the small subset of a 2D canvas API the core needs. The Qt
implementation is widgets.pixmap_surface.PixmapSurface.
"""

from typing import Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class DrawingSurface(Protocol):
    """Minimal immediate-mode 2D drawing surface."""

    stroke_style: str

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def clear(self) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...


# Returns the current surface, or None when it has not been acquired
SurfaceProvider = Callable[[], Optional[DrawingSurface]]


__all__ = ['DrawingSurface', 'SurfaceProvider']
