from __future__ import annotations

import logging
import os
import shutil
import stat
import subprocess
from pathlib import Path

import pytest

from copilot_setup.adapters.editor import EditorVersionProbe
from copilot_setup.adapters.editor import probe as probe_module
from copilot_setup.adapters.vcs import GitFetcher
from copilot_setup.adapters.vcs import git as git_module
from copilot_setup.core.exceptions import FetchError, ToolNotFoundError
from copilot_setup.infrastructure import TempWorkspace
from copilot_setup.infrastructure import workspace as workspace_module


def test_git_missing_is_fatal(monkeypatch) -> None:
    monkeypatch.setattr(git_module.shutil, "which", lambda name: None)
    with pytest.raises(ToolNotFoundError, match="git"):
        GitFetcher().ensure_available()


def test_git_clone_command(tmp_path: Path, monkeypatch) -> None:
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 0, "", "")

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)

    GitFetcher().fetch("https://example.com/r.git", "dev", tmp_path / "repo")

    assert seen["cmd"] == [
        "git", "clone", "--depth", "1", "--single-branch",
        "--branch", "dev", "https://example.com/r.git", str(tmp_path / "repo"),
    ]
    assert seen["kwargs"]["check"] is True


def test_git_failure_carries_stderr(tmp_path: Path, monkeypatch) -> None:
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(128, cmd, "", "fatal: Authentication failed")

    monkeypatch.setattr(git_module.subprocess, "run", fake_run)

    with pytest.raises(FetchError, match="Authentication failed"):
        GitFetcher().fetch("https://example.com/r.git", "main", tmp_path / "repo")


def test_probe_returns_first_line(monkeypatch) -> None:
    monkeypatch.setattr(probe_module.shutil, "which", lambda name: f"/usr/bin/{name}")
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0, "1.105.1\nabc123\nx64\n", "")

    monkeypatch.setattr(probe_module.subprocess, "run", fake_run)

    assert EditorVersionProbe().probe("insiders") == "1.105.1"
    assert calls == [["/usr/bin/code-insiders", "--version"]]


def test_probe_unavailable(monkeypatch) -> None:
    monkeypatch.setattr(probe_module.shutil, "which", lambda name: None)
    assert EditorVersionProbe().probe("stable") is None
    assert EditorVersionProbe().probe("unknown") is None


def test_probe_failure_is_unavailable(monkeypatch) -> None:
    monkeypatch.setattr(probe_module.shutil, "which", lambda name: "/usr/bin/code")
    monkeypatch.setattr(
        probe_module.subprocess,
        "run",
        lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, "", "boom"),
    )
    assert EditorVersionProbe().probe("stable") is None


def test_workspace_removed_on_exit(tmp_path: Path) -> None:
    with TempWorkspace(base_dir=tmp_path) as root:
        (root / "file.txt").write_text("x")
    assert not root.exists()


def test_workspace_kept_when_asked(tmp_path: Path) -> None:
    with TempWorkspace(keep=True, base_dir=tmp_path) as root:
        pass
    assert root.is_dir()


def test_workspace_removal_failure_warns(tmp_path: Path, monkeypatch, caplog) -> None:
    def broken_rmtree(path, *args, **kwargs):
        raise PermissionError("locked")

    workspace = TempWorkspace(base_dir=tmp_path)
    with caplog.at_level(logging.WARNING):
        with workspace as root:
            monkeypatch.setattr(shutil, "rmtree", broken_rmtree)

    assert root.exists()
    assert "locked" in caplog.text


def test_read_only_files_are_made_writable_before_retry(tmp_path: Path, monkeypatch) -> None:
    pack = tmp_path / "objects" / "pack.idx"
    pack.parent.mkdir()
    pack.write_text("packed")
    pack.chmod(stat.S_IREAD)
    writable_on_retry = []

    def failing_once_rmtree(path, **kwargs):
        handler = kwargs.get("onexc") or kwargs.get("onerror")
        assert handler is not None
        handler(
            lambda p: writable_on_retry.append(bool(os.stat(p).st_mode & stat.S_IWRITE)),
            str(pack),
            PermissionError("read-only"),
        )

    monkeypatch.setattr(workspace_module.shutil, "rmtree", failing_once_rmtree)

    workspace_module.remove_tree(tmp_path / "objects")

    assert writable_on_retry == [True]


def test_workspace_removes_read_only_files(tmp_path: Path) -> None:
    with TempWorkspace(base_dir=tmp_path) as root:
        objects = root / "repo" / ".git" / "objects"
        objects.mkdir(parents=True)
        (objects / "abc").write_text("blob")
        (objects / "abc").chmod(stat.S_IREAD)
    assert not root.exists()
