"""In-process cache of rendered pages, keyed by request path.

Renders that await remote data read ``generation(path)`` first and hand it
back to ``store``; a revalidation in between bumps the generation and the
stale render is discarded instead of being cached.
"""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class PageCache:
    def __init__(self) -> None:
        self._pages: dict[str, Any] = {}
        self._generations: dict[str, int] = {}

    def get(self, path: str) -> Any | None:
        return self._pages.get(path)

    def generation(self, path: str) -> int:
        return self._generations.get(path, 0)

    def store(self, path: str, payload: Any, generation: int | None = None) -> bool:
        if generation is not None and generation != self.generation(path):
            logger.debug("Discarded stale render for %s", path)
            return False
        self._pages[path] = payload
        logger.debug("Cached render for %s", path)
        return True

    def revalidate_path(self, path: str) -> None:
        """Mark the cached render of *path* stale so the next request recomputes it."""

        self._generations[path] = self.generation(path) + 1
        self._pages.pop(path, None)
        logger.debug("Revalidated %s", path)
