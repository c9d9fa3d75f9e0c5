"""Shared test helpers."""

import pytest

from ballots.clock import ManualClock
from ballots.registry import BallotRegistry

NOW = 1_000_000
QUESTION = "What is your favorite color?"
COLORS = ["Red", "Green", "Blue"]
DURATION = 400


def open_ballot(
    registry: BallotRegistry,
    options: list[str] | None = None,
    start_in: int = 60,
    duration: int = DURATION,
) -> int:
    """Create a ballot starting ``start_in`` seconds from the registry's now.

    Returns:
        The new ballot's id.
    """
    start_time = registry.clock.now() + start_in
    return registry.create_ballot(QUESTION, options or COLORS, start_time, duration)


@pytest.fixture
def clock():
    return ManualClock(NOW)


@pytest.fixture
def registry(clock):
    return BallotRegistry(clock=clock)
