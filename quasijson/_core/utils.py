import time
from typing import Optional


class Timer:
    """
    Records wall-clock duration of a block of work.

    Usage:
        with Timer() as timer:
            formatter.check_validity_and_format(text)
        print(timer.elapsed_time)       # e.g., 0.002
    """

    def __init__(self):
        self._elapsed_time: Optional[float] = None
        self._start_time: Optional[float] = None
        self.start_timestamp: Optional[str] = None
        self.end_timestamp: Optional[str] = None
        self.start()

    @property
    def elapsed_time(self) -> Optional[float]:
        """Return the last recorded elapsed time, rounded to milliseconds."""
        return round(self._elapsed_time, 3) if self._elapsed_time is not None else None

    @staticmethod
    def current_timestamp() -> str:
        return time.strftime('%Y-%m-%d %H:%M:%S', time.gmtime())

    def start(self) -> None:
        """Start or restart the timer."""
        self._start_time = time.perf_counter()
        self.start_timestamp = self.current_timestamp()

    def stop(self) -> None:
        now = time.perf_counter()
        if self._start_time is not None:
            self._elapsed_time = now - self._start_time
        self.end_timestamp = self.current_timestamp()

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
        return None
