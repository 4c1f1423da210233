"""
Setup domain models
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

from ...core.constants import DEFAULT_BRANCH, DEFAULT_CHANNEL, DEFAULT_REPO_URL
from ..sync.models import SyncCategory


@dataclass
class SetupOptions:
    """
    Everything one setup run needs.
    
    Attributes:
        repo_url: Remote asset repository
        branch: Branch or ref to clone
        channel: Editor channel (stable or insiders)
        categories: Asset categories to sync, in order
        overrides: Ordered settings overrides
        settings_path: Settings file to merge into
        keep_temp: Leave the fetched tree on disk after the run
        dry_run: Report changes without writing anything
        skip_settings: Do not touch the settings file
    """
    repo_url: str = DEFAULT_REPO_URL
    branch: str = DEFAULT_BRANCH
    channel: str = DEFAULT_CHANNEL
    categories: List[SyncCategory] = field(default_factory=list)
    overrides: List[Tuple[str, Any]] = field(default_factory=list)
    settings_path: Optional[Path] = None
    keep_temp: bool = False
    dry_run: bool = False
    skip_settings: bool = False
