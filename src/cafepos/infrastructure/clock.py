"""Wall-clock implementation of the domain Clock."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cafepos.domain.clock import Clock
from cafepos.domain.exceptions import ValidationError


class SystemClock(Clock):

    def __init__(self, tz_name: str = "UTC") -> None:
        try:
            self._tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValidationError(f"Unknown time zone: {tz_name!r}") from exc

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
