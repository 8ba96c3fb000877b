import time


class Timer:
    """Records CPU, monotonic and wall clocks around a block."""

    def __init__(self):
        self._start = None
        self._end = None

    @staticmethod
    def _now():
        return (time.process_time(), time.perf_counter(), time.time())

    def start(self):
        self._start = self._now()
        self._end = None
        return self

    def stop(self):
        self._end = self._now()
        return self

    def __enter__(self):
        return self.start()

    def __exit__(self, *exc):
        self.stop()
        return False

    def _delta(self, i):
        if self._start is None or self._end is None:
            return 0.0
        return self._end[i] - self._start[i]

    @property
    def cpu_seconds(self):
        return self._delta(0)

    @property
    def elapsed_seconds(self):
        return self._delta(1)

    @property
    def wall_seconds(self):
        return self._delta(2)
