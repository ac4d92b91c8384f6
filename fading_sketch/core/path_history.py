"""
History of committed paths.

Paths are indexed by id in commit order. Every append or decay bumps
``version``; readers take a tuple snapshot instead of iterating the
underlying container, so a decay firing between two repaints can never
invalidate an iteration in progress.

Decayed paths stay in history as empty placeholders; ids of committed
paths remain resolvable for the whole session.
"""

import logging
from collections import OrderedDict
from typing import Dict, Iterator, Optional, Tuple

from .errors import DuplicatePathError
from .stroke_path import DrawPath

logger = logging.getLogger(__name__)


class PathHistory:
    """Append-only, id-indexed collection of committed paths."""

    def __init__(self):
        self._paths: Dict[str, DrawPath] = OrderedDict()
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def __len__(self):
        return len(self._paths)

    def __contains__(self, path_id) -> bool:
        return path_id in self._paths

    def __iter__(self) -> Iterator[DrawPath]:
        return iter(self.snapshot())

    def get(self, path_id: str) -> Optional[DrawPath]:
        return self._paths.get(path_id)

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._paths.keys())

    def snapshot(self) -> Tuple[DrawPath, ...]:
        """Committed paths in commit order."""
        return tuple(self._paths.values())

    def visible_count(self) -> int:
        """Number of committed paths that still hold points."""
        return sum(1 for path in self._paths.values() if not path.is_empty())

    def append(self, path: DrawPath):
        """
        Add a committed path.

        Raises:
            DuplicatePathError: if a path with the same id was already added
        """
        if path.id in self._paths:
            raise DuplicatePathError(f"Path {path.id} already in history")
        self._paths[path.id] = path
        self._version += 1
        logger.debug("History append %s (%d points), version %d",
                     path.id, len(path), self._version)

    def decay(self, path_id: str) -> bool:
        """
        Clear the points of a committed path, keeping its entry.

        Returns:
            False if no path with that id is in history
        """
        path = self._paths.get(path_id)
        if path is None:
            logger.warning("Decay requested for unknown path %s", path_id)
            return False
        path.clear_points()
        self._version += 1
        return True


__all__ = ['PathHistory']
