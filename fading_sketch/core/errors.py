"""
Exception types for the stroke capture core.

SurfaceUnavailable and NoActiveStroke are raised inside the core and
swallowed by the drag state machine, which turns them into no-ops.
PathSealedError and DuplicatePathError indicate misuse and propagate.
"""


class SketchError(Exception):
    """Base class for all stroke capture errors."""


class SurfaceUnavailable(SketchError):
    """The drawing surface has not been acquired yet or was lost."""


class NoActiveStroke(SketchError):
    """An event implying an in-progress stroke arrived while idle."""


class PathSealedError(SketchError):
    """A point was appended to a path that was already committed."""


class DuplicatePathError(SketchError):
    """A path with the same id is already present in history."""


__all__ = [
    'SketchError',
    'SurfaceUnavailable',
    'NoActiveStroke',
    'PathSealedError',
    'DuplicatePathError',
]
