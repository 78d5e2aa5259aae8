# scheduler.py
from typing import Optional


class Ticker:
    """
    Fixed-cadence tick source owned by the driver.

    The ticker never reads a clock itself: the driver passes its own
    millisecond timestamp (e.g. pygame.time.get_ticks()) to start() and
    due(), so tests can drive it with made-up times.
    """

    def __init__(self, interval_ms: int):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self._last: Optional[int] = None   # ms timestamp of last counted tick

    @property
    def running(self) -> bool:
        return self._last is not None

    def start(self, now_ms: int) -> None:
        if self._last is None:
            self._last = now_ms

    def stop(self) -> None:
        self._last = None

    def due(self, now_ms: int) -> int:
        """Number of whole intervals elapsed since the last counted tick."""
        if self._last is None:
            return 0
        n = max(0, now_ms - self._last) // self.interval_ms
        self._last += n * self.interval_ms
        return n
