"""
Sync domain models
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List


@dataclass
class SyncSelection:
    """
    Explicit allow-list restricting a sync.
    
    - files: relative file names copied one by one
    - folders: relative folder names mirrored recursively
    
    Both empty means the whole source tree is mirrored.
    """
    files: List[str] = field(default_factory=list)
    folders: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.files and self.folders:
            raise ValueError("SyncSelection accepts files or folders, not both")

    @property
    def is_whole_tree(self) -> bool:
        return not self.files and not self.folders


@dataclass
class SyncCategory:
    """One logical asset category copied from the fetched tree"""
    name: str
    source: str
    destination: Path
    selection: SyncSelection = field(default_factory=SyncSelection)


@dataclass
class SyncReport:
    """Changed-file counts per category"""
    counts: Dict[str, int] = field(default_factory=dict)

    def add(self, category: str, changed: int) -> None:
        self.counts[category] = self.counts.get(category, 0) + changed

    @property
    def total(self) -> int:
        return sum(self.counts.values())
