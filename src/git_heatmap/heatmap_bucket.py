from __future__ import annotations

import datetime as dt
import sys
from typing import Dict, Iterable

from .heatmap_scan import scan_repository
from .models import Commit, Repository, Window

# day -> commit count; only days with at least one commit are present
Calendar = Dict[dt.date, int]


def commit_day(timestamp: int) -> dt.date:
    return dt.datetime.fromtimestamp(timestamp, tz=dt.timezone.utc).date()


def author_matches(commit_email: str | None, user_email: str) -> bool:
    # exact and case-sensitive
    if commit_email is None:
        return False
    return commit_email == user_email


def bucket_commit(calendar: Calendar, commit: Commit, user_email: str, window: Window) -> bool:
    if not author_matches(commit.author_email, user_email):
        return False
    day = commit_day(commit.timestamp)
    if not window.contains_day(day):
        return False
    calendar[day] = calendar.get(day, 0) + 1
    return True


def build_calendar(
    repos: Iterable[Repository],
    user_email: str,
    window: Window,
    calendar: Calendar | None = None,
    *,
    verbose: bool = False,
) -> Calendar:
    if calendar is None:
        calendar = {}
    for repo in repos:
        seen = 0
        matched = 0
        for commit in scan_repository(repo, window):
            seen += 1
            if bucket_commit(calendar, commit, user_email, window):
                matched += 1
        if verbose:
            print(f"Scanned {repo.path}: {seen} commits in window, {matched} by {user_email}", file=sys.stderr)
    return calendar
