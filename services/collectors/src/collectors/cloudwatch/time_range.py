from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from .errors import InvalidTimeRange

_RELATIVE = re.compile(r"^now(?:-(\d+)([smhdw]))?$")
_UNITS = {"s": "seconds", "m": "minutes", "h": "hours", "d": "days", "w": "weeks"}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _from_epoch_ms(ms: int) -> datetime:
    return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)


def parse_time(value: Any, *, now: datetime) -> datetime:
    """Parse one range bound: datetime, epoch millis (int or digits), ISO string, or now[-Nu]."""
    try:
        return _parse_time(value, now=now)
    except (OverflowError, OSError, ValueError) as e:
        # Bounds outside the datetime range
        raise InvalidTimeRange(f"Invalid time range: cannot parse {value!r}") from e


def _parse_time(value: Any, *, now: datetime) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise InvalidTimeRange(f"Invalid time range: unsupported bound {value!r}")
    elif isinstance(value, (int, float)):
        dt = _from_epoch_ms(int(value))
    elif isinstance(value, str):
        s = value.strip()
        m = _RELATIVE.match(s)
        if m:
            amount, unit = m.groups()
            if amount is None:
                return now
            return now - timedelta(**{_UNITS[unit]: int(amount)})
        if s.isdigit():
            return _from_epoch_ms(int(s))
        dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    else:
        raise InvalidTimeRange(f"Invalid time range: unsupported bound {value!r}")

    if dt.tzinfo is None or dt.utcoffset() is None:
        raise InvalidTimeRange("Invalid time range: timestamps must be timezone-aware")
    return dt.astimezone(timezone.utc)


def resolve_time_range(
    start: Any,
    end: Any,
    *,
    now: Optional[datetime] = None,
) -> tuple[datetime, datetime]:
    """
    Resolve both bounds against a single "now". Returns (start, end).

    Raises InvalidTimeRange unless start is strictly before end.
    """
    now = now or utc_now()
    start_dt = parse_time(start, now=now)
    end_dt = parse_time(end, now=now)
    if not start_dt < end_dt:
        raise InvalidTimeRange("Invalid time range: Start time must be before end time")
    return start_dt, end_dt


def to_epoch_seconds(dt: datetime) -> int:
    # CloudWatch expects epoch seconds
    return int(dt.timestamp())
