"""Tests for clock capabilities."""

import time

import pytest

from ballots.clock import ManualClock, SystemClock


class TestManualClock:
    def test_starts_at_given_time(self):
        assert ManualClock(42).now() == 42

    def test_defaults_to_zero(self):
        assert ManualClock().now() == 0

    def test_advance(self):
        clock = ManualClock(100)
        assert clock.advance(90) == 190
        assert clock.now() == 190

    def test_set(self):
        clock = ManualClock(100)
        clock.set(5)
        assert clock.now() == 5

    def test_cannot_advance_backwards(self):
        clock = ManualClock(100)
        with pytest.raises(ValueError):
            clock.advance(-1)
        assert clock.now() == 100


class TestSystemClock:
    def test_returns_whole_seconds_near_wall_clock(self):
        now = SystemClock().now()
        assert isinstance(now, int)
        assert abs(now - time.time()) < 5
