"""
state.py
- In-memory request counters shared by every scrape request of the process.
- One RequestCounter is created with the app and handed to each scrape pipeline.
"""

import threading


class RequestCounter:
    """
    Counts scrape requests that were started and that finished successfully.

    Scrapes are served from FastAPI's threadpool, so both increments are
    guarded by a lock.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._start = 0
        self._end = 0

    def count_start(self):
        with self._lock:
            self._start += 1
            return self._start

    def count_end(self):
        """
        Increment the end counter.

        Returns:
            tuple[int, int]: (start, end) as seen right after the increment.
        """
        with self._lock:
            self._end += 1
            return self._start, self._end

    def snapshot(self):
        with self._lock:
            return self._start, self._end
