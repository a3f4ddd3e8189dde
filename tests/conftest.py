from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Callable

import pytest


def _run(cmd: list[str], *, cwd: Path, env: dict[str, str] | None = None) -> str:
    proc = subprocess.run(cmd, cwd=str(cwd), env=env, check=True, capture_output=True, text=True)
    return proc.stdout


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    global_cfg = tmp_path / "global.gitconfig"
    global_cfg.write_text("[user]\n\temail = you@example.com\n\tname = Your Name\n", encoding="utf-8")
    system_cfg = tmp_path / "system.gitconfig"
    system_cfg.write_text("", encoding="utf-8")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_cfg))
    monkeypatch.setenv("GIT_CONFIG_SYSTEM", str(system_cfg))
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return global_cfg


class RepoBuilder:
    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.mkdir(parents=True, exist_ok=True)
        _run(["git", "init", "-q"], cwd=path)
        _run(["git", "config", "user.name", "Repo User"], cwd=path)
        _run(["git", "config", "user.email", "repo@example.com"], cwd=path)
        _run(["git", "config", "commit.gpgsign", "false"], cwd=path)
        self._n = 0

    def commit(self, *, email: str, date: str, name: str = "Someone") -> str:
        self._n += 1
        env = os.environ.copy()
        env["GIT_AUTHOR_NAME"] = name
        env["GIT_AUTHOR_EMAIL"] = email
        env["GIT_AUTHOR_DATE"] = date
        env["GIT_COMMITTER_DATE"] = date
        _run(["git", "commit", "-q", "--allow-empty", "-m", f"c{self._n}"], cwd=self.path, env=env)
        return _run(["git", "rev-parse", "HEAD"], cwd=self.path).strip()


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[[str], RepoBuilder]:
    def factory(name: str = "repo") -> RepoBuilder:
        return RepoBuilder(tmp_path / name)

    return factory
