"""Path Revision Cache — process-local staleness marker for rendered views.

Invariants:
    - revision(path) starts at 0 and only ever increases
    - invalidate(path) bumps exactly that path's revision by 1

Design Decisions:
    - Revision counters instead of stored renders: page rendering lives
      elsewhere; readers compare revisions to decide whether to recompute
    - asyncio.Lock around the bump: handlers run concurrently on one loop
"""

import asyncio
import logging

logger = logging.getLogger(__name__)


class PathRevisionCache:
    """ViewCache that tracks a revision number per path."""

    def __init__(self) -> None:
        self._revisions: dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def invalidate(self, path: str) -> None:
        async with self._lock:
            self._revisions[path] = self._revisions.get(path, 0) + 1
        logger.info(f"View cache invalidated: {path}", extra={"path": path})

    def revision(self, path: str) -> int:
        return self._revisions.get(path, 0)


_view_cache = PathRevisionCache()


def get_view_cache() -> PathRevisionCache:
    """FastAPI dependency — the process-wide view cache."""
    return _view_cache
