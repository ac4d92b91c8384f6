"""Qt widgets for Fading Sketch"""

from .pixmap_surface import PixmapSurface
from .sketch_canvas import SketchCanvas
from .main_window import MainWindow

__all__ = ['PixmapSurface', 'SketchCanvas', 'MainWindow']
