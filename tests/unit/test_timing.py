"""Tests for the run timer."""

import timing
from timing import Timer


class TestTimer:
    def test_unstarted_timer_reads_zero(self) -> None:
        timer = Timer()
        assert timer.elapsed_seconds == 0.0
        assert timer.cpu_seconds == 0.0
        assert timer.wall_seconds == 0.0

    def test_deltas(self, monkeypatch) -> None:
        ticks = iter([(1.0, 10.0, 100.0), (1.5, 12.0, 103.0)])
        monkeypatch.setattr(Timer, "_now", staticmethod(lambda: next(ticks)))
        with Timer() as timer:
            pass
        assert timer.cpu_seconds == 0.5
        assert timer.elapsed_seconds == 2.0
        assert timer.wall_seconds == 3.0

    def test_real_clock_is_non_negative(self) -> None:
        timer = Timer().start().stop()
        assert timer.elapsed_seconds >= 0.0
        assert timing.time.perf_counter() > 0.0
