"""
Setup domain service - business logic
"""
from pathlib import Path
from typing import Callable, Optional

from ...core.context import RunContext
from ...core.exceptions import SetupError
from ...core.interfaces import RemoteFetcher, VersionProbe
from ...core.logging import get_logger
from ...core.system import resolve_settings_path
from ...infrastructure.workspace import TempWorkspace
from ..settings import apply_overrides, load_settings, save_settings
from ..sync import SyncReport, sync_directory
from .models import SetupOptions
from .version import check_editor_version

logger = get_logger(__name__)


class SetupService:
    """
    Setup service - pure business logic.
    
    Verifies the environment, fetches the asset tree, syncs each
    category and merges the settings overrides. No direct dependency on
    the CLI; collaborators are injected and progress is reported through
    optional callbacks.
    """

    def __init__(
        self,
        fetcher: RemoteFetcher,
        version_probe: Optional[VersionProbe] = None,
        on_version_checked: Optional[Callable[[Optional[str]], None]] = None,
        on_fetched: Optional[Callable[[str, str], None]] = None,
        on_category_synced: Optional[Callable[[str, int, bool], None]] = None,
        on_settings_merged: Optional[Callable[[Path, bool], None]] = None,
        on_complete: Optional[Callable[[SyncReport, bool], None]] = None,
    ):
        """
        Initialize setup service.
        
        Args:
            fetcher: Remote tree fetcher
            version_probe: Editor version probe (version gate skipped when None)
            on_version_checked: Callback after the version gate (raw version)
            on_fetched: Callback after the fetch (url, ref)
            on_category_synced: Callback per category (name, changed, dry_run)
            on_settings_merged: Callback after settings merge (path, dry_run)
            on_complete: Callback when the run completes (report, dry_run)
        """
        self.fetcher = fetcher
        self.version_probe = version_probe
        self.on_version_checked = on_version_checked
        self.on_fetched = on_fetched
        self.on_category_synced = on_category_synced
        self.on_settings_merged = on_settings_merged
        self.on_complete = on_complete

    def run(self, options: SetupOptions) -> SyncReport:
        """
        Execute a setup run.
        
        Process:
        1. Check that the fetch tool is installed
        2. Probe and gate the editor version
        3. Fetch the remote tree into a temporary workspace
        4. Sync every category
        5. Remove the workspace (unless keep_temp)
        6. Merge settings overrides
        
        Args:
            options: Setup options
        
        Returns:
            Per-category changed-file counts
        
        Raises:
            ToolNotFoundError: If git is missing
            VersionError: If the detected editor version is too old
            FetchError: If the remote tree cannot be fetched
            SyncError: If copying fails unexpectedly
        """
        context = RunContext(dry_run=options.dry_run)
        logger.debug(f"Starting setup run in {context.mode_label} mode")

        # Step 1: Preconditions
        self.fetcher.ensure_available()

        # Step 2: Editor version gate
        if self.version_probe is not None:
            raw_version = self.version_probe.probe(options.channel)
            check_editor_version(raw_version)
            if self.on_version_checked:
                self.on_version_checked(raw_version)

        # Step 3-5: Fetch, sync, clean up
        report = SyncReport()
        with TempWorkspace(keep=options.keep_temp) as workspace:
            repo_root = workspace / "repo"
            self.fetcher.fetch(options.repo_url, options.branch, repo_root)
            if self.on_fetched:
                self.on_fetched(options.repo_url, options.branch)

            for category in options.categories:
                changed = sync_directory(
                    repo_root / category.source,
                    category.destination,
                    category.selection,
                    context,
                )
                report.add(category.name, changed)
                if self.on_category_synced:
                    self.on_category_synced(category.name, changed, context.dry_run)

        # Step 6: Settings
        if not options.skip_settings:
            self.merge_settings(options, context)

        if self.on_complete:
            self.on_complete(report, context.dry_run)

        return report

    def merge_settings(self, options: SetupOptions, context: RunContext) -> None:
        """Read-modify-write the editor settings document"""
        path = options.settings_path or resolve_settings_path(options.channel)
        try:
            document = apply_overrides(load_settings(path), options.overrides)
            save_settings(path, document, context)
        except OSError as e:
            raise SetupError(f"Failed to write settings file {path}: {e}") from e
        if self.on_settings_merged:
            self.on_settings_merged(path, context.dry_run)
