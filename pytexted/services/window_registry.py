from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class WindowRegistry:
    """
    Process-wide count of open windows.

    Starts at zero. `opened()` on window construction, `closed()` on close;
    `on_empty` runs exactly once, the first time the count returns to zero.
    """

    def __init__(self, on_empty: Callable[[], None]) -> None:
        self._on_empty = on_empty
        self._lock = threading.Lock()
        self._count = 0
        self._emptied = False

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def opened(self) -> int:
        with self._lock:
            self._count += 1
            count = self._count
        logger.debug("Window opened (%d open)", count)
        return count

    def closed(self) -> int:
        with self._lock:
            if self._count == 0:
                raise RuntimeError("closed() called with no open windows")
            self._count -= 1
            count = self._count
            fire = count == 0 and not self._emptied
            if fire:
                self._emptied = True
        logger.debug("Window closed (%d open)", count)
        if fire:
            self._on_empty()
        return count
