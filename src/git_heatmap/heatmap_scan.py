from __future__ import annotations

from typing import Iterator

from .git import iter_commits
from .models import Commit, Repository, Window


def scan_repository(repo: Repository, window: Window) -> Iterator[Commit]:
    """
    Yield commits from `repo` newest first, stopping at the first one
    authored before the window start.

    History comes back in author-date order, so everything after that
    commit is older still and never read.
    """
    start_ts = window.start_timestamp
    commits = iter_commits(repo)
    try:
        for commit in commits:
            if commit.timestamp < start_ts:
                return
            yield commit
    finally:
        commits.close()
