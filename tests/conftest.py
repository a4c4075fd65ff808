"""Shared test fixtures."""

from datetime import datetime

import pytest


class FakeClock:
    """Manually advanced time source, in seconds."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def default_start():
    return datetime(2020, 6, 15)


@pytest.fixture
def default_end():
    return datetime(2020, 12, 31)
