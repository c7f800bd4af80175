"""Exchange-local calendar date used for option expiry filtering."""

from __future__ import annotations

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "America/New_York"


def exchange_today(
    tz_name: str = DEFAULT_TIMEZONE,
    now: datetime | None = None,
) -> date:
    """Return the calendar date in ``tz_name`` at instant ``now`` (default: now).

    A naive ``now`` is interpreted as UTC.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz_name)).date()
