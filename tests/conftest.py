from datetime import UTC, datetime, timedelta

import pytest


class FrozenDateTimeProvider:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime):
        self._now = now

    @property
    def utc_now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta


@pytest.fixture
def now():
    return datetime(2024, 10, 29, tzinfo=UTC)


@pytest.fixture
def clock(now):
    return FrozenDateTimeProvider(now)
