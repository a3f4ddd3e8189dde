from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .git import RepositoryError, open_repository
from .heatmap_bucket import build_calendar
from .heatmap_render import render_grid
from .heatmap_window import compute_window
from .identity import IdentityError, resolve_user_email
from .models import Repository


def use_color(args: argparse.Namespace) -> bool:
    if args.no_color:
        return False
    return not os.environ.get("NO_COLOR")


def open_repositories(paths: list[Path]) -> list[Repository]:
    repos: list[Repository] = []
    for p in paths:
        repos.append(open_repository(p))
    return repos


def run_heatmap(args: argparse.Namespace) -> int:
    verbose = bool(args.verbose)
    try:
        window = compute_window(int(args.weeks))
        repos = open_repositories(list(args.paths))
        user_email = resolve_user_email(args.user)
        if verbose:
            print(
                f"Charting {user_email} over {window.weeks} weeks from {window.first_day.isoformat()} "
                f"across {len(repos)} repo(s)...",
                file=sys.stderr,
            )
        calendar = build_calendar(repos, user_email, window, verbose=verbose)
    except (RepositoryError, IdentityError, ValueError) as e:
        raise SystemExit(f"error: {e}")

    sys.stdout.write(render_grid(calendar, window, color=use_color(args)))
    sys.stdout.flush()
    return 0
