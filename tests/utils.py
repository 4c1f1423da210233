from __future__ import annotations

import shutil
from pathlib import Path
from typing import Dict, List, Optional

from copilot_setup.core.exceptions import FetchError, ToolNotFoundError
from copilot_setup.core.interfaces import RemoteFetcher, VersionProbe

def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create files (relative path -> text) under root"""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root

def snapshot(root: Path) -> Dict[str, bytes]:
    if not root.exists():
        return {}
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }

class FakeFetcher(RemoteFetcher):
    """Copies a prepared local tree instead of cloning"""

    def __init__(self, tree: Optional[Path] = None, available: bool = True, error: Optional[str] = None):
        self.tree = tree
        self.available = available
        self.error = error
        self.calls: List[tuple] = []

    def ensure_available(self) -> None:
        if not self.available:
            raise ToolNotFoundError("'git' is required but was not found on PATH")

    def fetch(self, url: str, ref: str, destination: Path) -> None:
        self.calls.append((url, ref, destination))
        if self.error:
            raise FetchError(self.error)
        if self.tree is not None:
            shutil.copytree(self.tree, destination)
        else:
            destination.mkdir(parents=True)

class FakeProbe(VersionProbe):
    def __init__(self, version: Optional[str]):
        self.version = version
        self.channels: List[str] = []

    def probe(self, channel: str) -> Optional[str]:
        self.channels.append(channel)
        return self.version
