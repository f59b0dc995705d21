import time
from typing import Callable, Optional


class PlayClock:
    """
    Seconds of playing time since the session started.
    Time spent paused is not counted: resuming shifts the start time forward
    by however long the pause lasted.
    """
    def __init__(self, time_fn: Callable[[], float] = time.perf_counter):
        self._time = time_fn
        self.start_time: Optional[float] = None
        self._pause_start: Optional[float] = None
        self.paused_total = 0.0

    @property
    def running(self) -> bool:
        return self.start_time is not None

    @property
    def paused(self) -> bool:
        return self._pause_start is not None

    def start(self):
        self.start_time = self._time()
        self._pause_start = None
        self.paused_total = 0.0

    def stop(self):
        self.start_time = None
        self._pause_start = None

    def pause(self):
        if not self.running or self.paused:
            return
        self._pause_start = self._time()

    def resume(self):
        if self._pause_start is None or self.start_time is None:
            return
        pause_elapsed = self._time() - self._pause_start
        self.paused_total += pause_elapsed
        self.start_time += pause_elapsed
        self._pause_start = None

    def elapsed(self) -> float:
        if self.start_time is None:
            return 0.0
        now = self._pause_start if self._pause_start is not None else self._time()
        return max(0.0, now - self.start_time)
