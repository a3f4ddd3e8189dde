from __future__ import annotations

import dataclasses
import datetime as dt
from pathlib import Path


@dataclasses.dataclass(frozen=True)
class Commit:
    sha: str
    author_email: str | None
    timestamp: int  # author time, seconds since epoch


@dataclasses.dataclass(frozen=True)
class Repository:
    path: Path
    head: str


@dataclasses.dataclass(frozen=True)
class Window:
    start: dt.datetime  # UTC, noon on a Sunday
    weeks: int

    @property
    def start_timestamp(self) -> int:
        return int(self.start.timestamp())

    @property
    def first_day(self) -> dt.date:
        return self.start.date()

    @property
    def end_day(self) -> dt.date:
        # exclusive
        return self.first_day + dt.timedelta(days=7 * self.weeks)

    def contains_day(self, day: dt.date) -> bool:
        return self.first_day <= day < self.end_day
