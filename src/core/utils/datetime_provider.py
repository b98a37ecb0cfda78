"""Current-time capability.

Domain objects never read the system clock directly. They receive a
``DateTimeProvider`` and ask it for ``utc_now``, which lets tests pin or
advance time deterministically.

Example:
    >>> from src.core.utils.datetime_provider import datetime_provider
    >>> datetime_provider.utc_now.tzinfo
    datetime.timezone.utc
"""

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class DateTimeProvider(Protocol):
    @property
    def utc_now(self) -> datetime: ...


class SystemDateTimeProvider:
    """Reads the wall clock."""

    @property
    def utc_now(self) -> datetime:
        return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive values are assumed to already be expressed in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


datetime_provider: DateTimeProvider = SystemDateTimeProvider()
