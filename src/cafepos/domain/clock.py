"""Reference clock used for order timestamps and reporting windows.

"Today" and "trailing N days" depend on both the current instant and the
shop's time zone, so both are supplied by a Clock rather than read from
the process environment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, time, timedelta, tzinfo


class Clock(ABC):

    @property
    @abstractmethod
    def tz(self) -> tzinfo:
        """Time zone that defines calendar dates for reporting."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""

    # --- Calendar helpers -----------------------------------------------------

    def today(self) -> date:
        return self.now().astimezone(self.tz).date()

    def local_date(self, instant: datetime) -> date:
        """Calendar date of *instant* in the reference time zone."""
        return instant.astimezone(self.tz).date()

    def start_of(self, day: date) -> datetime:
        """First instant of *day* in the reference time zone."""
        return datetime.combine(day, time.min, tzinfo=self.tz)

    def day_bounds(self, day: date) -> tuple[datetime, datetime]:
        """Half-open ``[start, end)`` instants covering *day*."""
        return self.start_of(day), self.start_of(day + timedelta(days=1))
