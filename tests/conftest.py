"""Shared fixtures: an isolated home directory and git identity per test."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir and give git a committer identity."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    for var in ("GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME"):
        monkeypatch.setenv(var, "git-helper test")
    for var in ("GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL"):
        monkeypatch.setenv(var, "test@git-helper.dev")
    for var in (
        "GIT_HELPER_HISTORY_FILE",
        "GIT_HELPER_HISTORY_LIMIT",
        "GIT_HELPER_GIT",
        "GIT_HELPER_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """An empty working directory, separate from HOME."""
    path = tmp_path / "repo"
    path.mkdir()
    return path


@pytest.fixture
def history_path(isolated_env: Path) -> Path:
    return isolated_env / ".git_helper_history.json"
