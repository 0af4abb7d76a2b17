# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta

import pytest

import digiclock.display.glyphs as glyphs


class FakeNow:
    """Stands in for datetime.now: returns `start`, then moves one step per call."""
    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        instant = self.current
        self.current += self.step
        self.calls += 1
        return instant


@pytest.fixture()
def fake_now() -> FakeNow:
    return FakeNow(datetime(2024, 1, 1, 13, 5, 9))


@pytest.fixture()
def midnight() -> FakeNow:
    return FakeNow(datetime(2024, 1, 1, 0, 0, 0))


@pytest.fixture(autouse=True)
def compatible_glyphs() -> Iterator[None]:
    glyphs.init("compatible")
    yield
    glyphs.init("compatible")
