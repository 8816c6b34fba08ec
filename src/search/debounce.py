"""Debounced search-as-you-type."""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.3


class SearchDebouncer:
    """Run ``search`` once typing pauses for ``delay`` seconds.

    Each submit restarts the timer. A search that has started is never
    cancelled, so when two overlap the one that finishes last is the one
    delivered last to ``on_results``.
    """

    def __init__(
        self,
        search: Callable[[str], list],
        on_results: Callable[[str, list], None],
        delay: float = DEFAULT_DELAY_SECONDS,
    ):
        self.search = search
        self.on_results = on_results
        self.delay = delay
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def submit(self, query: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            if not query.strip():
                self._timer = None
                self.on_results(query, [])
                return
            self._timer = threading.Timer(self.delay, self._run, args=(query,))
            self._timer.daemon = True
            self._timer.start()

    def _run(self, query: str) -> None:
        try:
            results = self.search(query)
        except Exception as e:
            logger.error("Search for %r failed: %s", query, e)
            results = []
        self.on_results(query, results)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
