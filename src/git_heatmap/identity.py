from __future__ import annotations

from pathlib import Path

from .git import RepositoryError, run_git


class IdentityError(Exception):
    pass


def read_config_email(scope: str) -> str:
    try:
        code, out, _ = run_git(["config", f"--{scope}", "--get", "user.email"], cwd=Path.cwd())
    except RepositoryError:
        return ""
    if code != 0:
        return ""
    return out.strip()


def resolve_user_email(explicit: str | None = None) -> str:
    """
    Return the author email to chart: `explicit` when given, otherwise
    `user.email` from the global git config, then the system one.
    Repository-local config is not consulted.
    """
    if explicit is not None and explicit.strip():
        return explicit
    for scope in ("global", "system"):
        email = read_config_email(scope)
        if email:
            return email
    raise IdentityError("could not determine user email; pass -u EMAIL or set `git config --global user.email`")
