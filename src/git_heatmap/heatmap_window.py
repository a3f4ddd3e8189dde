from __future__ import annotations

import datetime as dt

from .models import Window

DEFAULT_WEEKS = 52
ANCHOR_TIME = dt.time(12, 0, 0)


def week_sunday(today: dt.date) -> dt.date:
    """Sunday closing the ISO week that contains `today`."""
    iso_year, iso_week, _ = today.isocalendar()
    return dt.date.fromisocalendar(iso_year, iso_week, 7)


def compute_window(weeks: int = DEFAULT_WEEKS, today: dt.date | None = None) -> Window:
    if weeks < 0:
        raise ValueError(f"weeks must be >= 0, got {weeks}")
    if today is None:
        today = dt.datetime.now(dt.timezone.utc).date()
    try:
        first_day = week_sunday(today) - dt.timedelta(weeks=weeks)
    except OverflowError as e:
        raise ValueError(f"{weeks} weeks before {today.isoformat()} is out of range") from e
    start = dt.datetime.combine(first_day, ANCHOR_TIME, tzinfo=dt.timezone.utc)
    return Window(start=start, weeks=weeks)
