"""
QImage-backed drawing surface.

Implements the DrawingSurface contract with QPainter so the core renderer
can draw without knowing about Qt. The canvas widget blits image() in its
paintEvent.
"""

import logging
from typing import List, Tuple, Union

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen

from ..config import Config

logger = logging.getLogger(__name__)


class PixmapSurface:
    """
    Immediate-mode 2D surface on top of a transparent QImage.

    Path construction (begin_path/move_to/line_to) only builds a
    QPainterPath; pixels change on stroke() and clear_rect().
    """

    def __init__(
        self,
        width: int = Config.CANVAS_WIDTH,
        height: int = Config.CANVAS_HEIGHT,
        stroke_style: str = Config.DEFAULT_STROKE_COLOR,
        line_width: float = Config.STROKE_WIDTH
    ):
        self._image = self._create_image(width, height)
        self._path = QPainterPath()
        self._stroke_color = QColor(stroke_style)
        self._line_width = line_width
        self._style_stack: List[Tuple[QColor, float]] = []

    @staticmethod
    def _create_image(width: int, height: int) -> QImage:
        image = QImage(max(1, width), max(1, height), QImage.Format.Format_ARGB32_Premultiplied)
        image.fill(Qt.GlobalColor.transparent)
        return image

    # ==================== Properties ====================

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    @property
    def stroke_style(self) -> str:
        return self._stroke_color.name()

    @stroke_style.setter
    def stroke_style(self, value: Union[str, QColor]):
        color = QColor(value)
        if not color.isValid():
            logger.warning("Invalid stroke style %r ignored", value)
            return
        self._stroke_color = color

    @property
    def line_width(self) -> float:
        return self._line_width

    @line_width.setter
    def line_width(self, value: float):
        self._line_width = max(0.0, value)

    def image(self) -> QImage:
        """Backing image (not a copy)."""
        return self._image

    def resize(self, width: int, height: int):
        """Swap in a blank image of the new size. Existing pixels are dropped."""
        if width == self.width and height == self.height:
            return
        self._image = self._create_image(width, height)
        self._path = QPainterPath()

    # ==================== Path construction ====================

    def begin_path(self):
        self._path = QPainterPath()

    def move_to(self, x: float, y: float):
        self._path.moveTo(x, y)

    def line_to(self, x: float, y: float):
        # Canvas semantics: lineTo on an empty path only sets the start point
        if self._path.elementCount() == 0:
            self._path.moveTo(x, y)
        else:
            self._path.lineTo(x, y)

    def stroke(self):
        """Stroke the current path with the current style."""
        pen = QPen(self._stroke_color, self._line_width)
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)

        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.strokePath(self._path, pen)
        finally:
            painter.end()

    # ==================== Clearing ====================

    def clear_rect(self, x: float, y: float, width: float, height: float):
        """Reset a rectangle to fully transparent."""
        painter = QPainter(self._image)
        try:
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
            painter.fillRect(QRectF(x, y, width, height), Qt.GlobalColor.transparent)
        finally:
            painter.end()

    def clear(self):
        self.clear_rect(0, 0, self.width, self.height)

    # ==================== Style state ====================

    def save(self):
        self._style_stack.append((QColor(self._stroke_color), self._line_width))

    def restore(self):
        if not self._style_stack:
            logger.warning("restore() called without matching save()")
            return
        self._stroke_color, self._line_width = self._style_stack.pop()

    @property
    def save_depth(self) -> int:
        return len(self._style_stack)


__all__ = ['PixmapSurface']
