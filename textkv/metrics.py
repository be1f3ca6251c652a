from __future__ import annotations

import time
from contextlib import contextmanager


class Counter:
    def __init__(self) -> None:
        self.value = 0

    def inc(self, n: int = 1) -> None:
        self.value += n


class Timer:
    """Wall-clock duration of the most recent ``with timer.time():`` block."""

    def __init__(self) -> None:
        self.last_ms: float | None = None

    @contextmanager
    def time(self):  # noqa: ANN201 (to keep it lightweight)
        start = time.perf_counter()
        try:
            yield
        finally:
            self.last_ms = (time.perf_counter() - start) * 1000


entries_persisted_total = Counter()
entries_loaded_total = Counter()
load_failures_total = Counter()
persist_ms = Timer()
load_ms = Timer()
