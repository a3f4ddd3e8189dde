from __future__ import annotations

import subprocess
import threading
from pathlib import Path
from typing import Iterator, Optional

from .models import Commit, Repository

# NUL-separated so that odd author emails cannot shift fields.
LOG_FORMAT = "%H%x00%ae%x00%at"


class RepositoryError(Exception):
    pass


class NoHistoryError(RepositoryError):
    pass


def run_git(args: list[str], cwd: Path, timeout_s: int = 300) -> tuple[int, str, str]:
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=str(cwd),
            capture_output=True,
            text=True,
            timeout=timeout_s,
        )
    except OSError as e:
        raise RepositoryError(f"failed to run git: {e}") from e
    return proc.returncode, proc.stdout, proc.stderr


def get_repo_toplevel(candidate: Path) -> Optional[Path]:
    code, out, _ = run_git(["rev-parse", "--show-toplevel"], cwd=candidate)
    if code != 0 or not out.strip():
        return None
    return Path(out.strip()).resolve()


def resolve_head(path: Path) -> str:
    code, out, err = run_git(["rev-parse", "--verify", "--quiet", "HEAD^{commit}"], cwd=path)
    sha = out.strip()
    if code != 0 or not sha:
        detail = err.strip() or "HEAD does not point to a commit"
        raise NoHistoryError(f"{path}: no history ({detail})")
    return sha


def open_repository(path: Path) -> Repository:
    """
    Open the repository containing `path` and pin its current head.

    Raises RepositoryError when the path is missing or not inside a work tree,
    NoHistoryError when HEAD does not resolve to a commit.
    """
    p = Path(path).expanduser()
    if not p.is_dir():
        raise RepositoryError(f"{path}: not a directory")
    top = get_repo_toplevel(p)
    if top is None:
        raise RepositoryError(f"{path}: not a git repository")
    return Repository(path=top, head=resolve_head(top))


def parse_log_record(line: str) -> Optional[Commit]:
    parts = line.split("\x00")
    if len(parts) != 3:
        return None
    sha, email, ts = (p.strip() for p in parts)
    if not sha:
        return None
    try:
        timestamp = int(ts)
    except ValueError:
        return None
    return Commit(sha=sha, author_email=email or None, timestamp=timestamp)


def iter_commits(repo: Repository) -> Iterator[Commit]:
    """
    Walk history from the pinned head, newest author date first.

    Unparseable records are skipped. Closing the generator early terminates
    the underlying `git log`.
    """
    cmd = [
        "git",
        "log",
        "--author-date-order",
        f"--format={LOG_FORMAT}",
        repo.head,
    ]
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(repo.path),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise RepositoryError(f"failed to start git log: {e}") from e

    def drain_stderr() -> None:
        if proc.stderr is None:
            return
        while proc.stderr.read(8192):
            pass

    stderr_thread = threading.Thread(target=drain_stderr, daemon=True)
    stderr_thread.start()

    assert proc.stdout is not None
    try:
        for raw_line in proc.stdout:
            line = raw_line.rstrip("\n")
            if not line:
                continue
            commit = parse_log_record(line)
            if commit is None:
                continue
            yield commit
    finally:
        if proc.poll() is None:
            proc.terminate()
        proc.stdout.close()
        proc.wait()
        stderr_thread.join(timeout=5)
