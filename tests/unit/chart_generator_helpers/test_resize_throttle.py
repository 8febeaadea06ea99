"""Tests for chart_generator_helpers.resize_throttle module."""

from indicator_charts.chart_generator_helpers.resize_throttle import ResizeThrottle


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestResizeThrottle:
    """Tests for ResizeThrottle."""

    def test_first_request_fires(self) -> None:
        """Test the first event renders immediately."""
        throttle = ResizeThrottle(0.25, clock=FakeClock())

        assert throttle.request() is True
        assert not throttle.pending

    def test_burst_collapses_to_one_render(self) -> None:
        """Test events inside the interval are dropped."""
        clock = FakeClock()
        throttle = ResizeThrottle(0.25, clock=clock)

        fired = []
        for _ in range(10):
            fired.append(throttle.request())
            clock.now += 0.01

        assert fired.count(True) == 1
        assert throttle.dropped_count == 9
        assert throttle.pending

    def test_fires_again_after_interval(self) -> None:
        """Test a request after the interval renders."""
        clock = FakeClock()
        throttle = ResizeThrottle(0.25, clock=clock)
        throttle.request()

        clock.now += 0.25

        assert throttle.request() is True

    def test_trailing_render_owed_once(self) -> None:
        """Test a dropped event yields exactly one trailing render once the interval passes."""
        clock = FakeClock()
        throttle = ResizeThrottle(0.25, clock=clock)
        throttle.request()
        throttle.request()

        assert throttle.take_pending() is False
        clock.now += 0.3
        assert throttle.take_pending() is True
        assert throttle.take_pending() is False

    def test_no_trailing_render_without_drops(self) -> None:
        """Test nothing is owed when no event was dropped."""
        clock = FakeClock()
        throttle = ResizeThrottle(0.25, clock=clock)
        throttle.request()
        clock.now += 1

        assert throttle.take_pending() is False

    def test_seconds_until_ready(self) -> None:
        """Test the remaining wait counts down to zero."""
        clock = FakeClock()
        throttle = ResizeThrottle(0.25, clock=clock)
        assert throttle.seconds_until_ready() == 0.0

        throttle.request()
        clock.now += 0.1

        assert abs(throttle.seconds_until_ready() - 0.15) < 1e-9
        clock.now += 1
        assert throttle.seconds_until_ready() == 0.0

    def test_zero_interval_never_drops(self) -> None:
        """Test a zero interval renders every event."""
        throttle = ResizeThrottle(0, clock=FakeClock())

        assert all(throttle.request() for _ in range(3))
        assert throttle.dropped_count == 0
