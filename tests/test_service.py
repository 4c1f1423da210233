from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

import pytest

from copilot_setup.core.exceptions import FetchError, ToolNotFoundError, VersionError
from copilot_setup.domain.setup import SetupOptions, SetupService
from copilot_setup.domain.sync import SyncCategory, SyncSelection
from tests.utils import FakeFetcher, FakeProbe, snapshot


@pytest.fixture()
def options(tmp_path: Path) -> SetupOptions:
    user = tmp_path / "User"
    return SetupOptions(
        repo_url="https://example.com/assets.git",
        branch="main",
        channel="stable",
        categories=[
            SyncCategory("agents", "agents", user / "prompts", SyncSelection(files=["a.md"])),
            SyncCategory("skills", "skills", tmp_path / "skills", SyncSelection(folders=["pdf"])),
            SyncCategory("chatmodes", "chatmodes", user / "prompts"),
        ],
        overrides=[("chat.agent.maxRequests", 500)],
        settings_path=user / "settings.json",
    )


def test_full_run(asset_repo: Path, options: SetupOptions, tmp_path: Path) -> None:
    fetcher = FakeFetcher(asset_repo)
    events = []
    service = SetupService(
        fetcher,
        FakeProbe("1.200.0"),
        on_category_synced=lambda name, changed, dry: events.append((name, changed, dry)),
    )

    report = service.run(options)

    assert report.counts == {"agents": 1, "skills": 2, "chatmodes": 0}
    assert report.total == 3
    assert events == [("agents", 1, False), ("skills", 2, False), ("chatmodes", 0, False)]
    assert snapshot(tmp_path / "User" / "prompts") == {"a.md": b"X"}
    assert json.loads(options.settings_path.read_text()) == {"chat.agent.maxRequests": 500}

    url, ref, destination = fetcher.calls[0]
    assert (url, ref) == ("https://example.com/assets.git", "main")
    assert not destination.exists()


def test_second_run_changes_nothing(asset_repo: Path, options: SetupOptions) -> None:
    service = SetupService(FakeFetcher(asset_repo))
    service.run(options)
    assert service.run(options).total == 0


def test_keep_temp_leaves_tree(asset_repo: Path, options: SetupOptions) -> None:
    fetcher = FakeFetcher(asset_repo)
    options.keep_temp = True

    SetupService(fetcher).run(options)

    destination = fetcher.calls[0][2]
    assert (destination / "agents" / "a.md").exists()
    shutil.rmtree(destination.parent)


def test_dry_run_writes_nothing(asset_repo: Path, options: SetupOptions, tmp_path: Path) -> None:
    options.dry_run = True

    report = SetupService(FakeFetcher(asset_repo)).run(options)

    assert report.total == 3
    assert not (tmp_path / "User").exists()
    assert not (tmp_path / "skills").exists()


def test_missing_git_aborts_before_fetch(options: SetupOptions) -> None:
    fetcher = FakeFetcher(available=False)

    with pytest.raises(ToolNotFoundError):
        SetupService(fetcher).run(options)

    assert fetcher.calls == []


def test_fetch_failure_is_fatal_and_cleans_up(options: SetupOptions) -> None:
    fetcher = FakeFetcher(error="fatal: Remote branch nope not found")

    with pytest.raises(FetchError, match="Remote branch nope not found"):
        SetupService(fetcher).run(options)

    assert not fetcher.calls[0][2].parent.exists()
    assert not options.settings_path.exists()


def test_old_editor_blocks_run(asset_repo: Path, options: SetupOptions) -> None:
    fetcher = FakeFetcher(asset_repo)

    with pytest.raises(VersionError):
        SetupService(fetcher, FakeProbe("1.50.0")).run(options)

    assert fetcher.calls == []


def test_unknown_editor_version_continues(asset_repo: Path, options: SetupOptions, caplog) -> None:
    probe = FakeProbe(None)

    with caplog.at_level(logging.WARNING):
        report = SetupService(FakeFetcher(asset_repo), probe).run(options)

    assert probe.channels == ["stable"]
    assert report.total == 3
    assert "skipping version check" in caplog.text


def test_skip_settings(asset_repo: Path, options: SetupOptions) -> None:
    options.skip_settings = True
    SetupService(FakeFetcher(asset_repo)).run(options)
    assert not options.settings_path.exists()


def test_settings_merge_preserves_existing_keys(asset_repo: Path, options: SetupOptions) -> None:
    options.settings_path.parent.mkdir(parents=True)
    options.settings_path.write_text(
        json.dumps({"editor.tabSize": 2, "chat.agent.maxRequests": 25}), encoding="utf-8"
    )
    merged = []

    SetupService(
        FakeFetcher(asset_repo),
        on_settings_merged=lambda path, dry: merged.append((path, dry)),
    ).run(options)

    assert json.loads(options.settings_path.read_text()) == {
        "editor.tabSize": 2,
        "chat.agent.maxRequests": 500,
    }
    assert merged == [(options.settings_path, False)]
