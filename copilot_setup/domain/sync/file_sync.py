"""
Change-detecting file sync implementation
"""
import shutil
from pathlib import Path
from typing import Optional

from ...core.context import RunContext
from ...core.exceptions import FileSyncError
from ...core.logging import get_logger
from ...core.utils import file_fingerprint
from .models import SyncSelection

logger = get_logger(__name__)


# ============================================================
# Local FS Helpers
# ============================================================

def ensure_dir(path: Path, context: RunContext) -> None:
    """Create directory and parents (mkdir -p), skipped in dry-run"""
    if path.is_dir():
        return
    if context.dry_run:
        logger.debug(f"[dry-run] would create directory {path}")
        return
    path.mkdir(parents=True, exist_ok=True)
    logger.debug(f"[mkdir] {path}")


def needs_copy(source: Path, destination: Path) -> bool:
    """
    Decide whether destination must be rewritten from source.
    
    A missing destination always needs a copy. Otherwise the SHA256
    digests are compared, so identical bytes are never rewritten
    whatever their timestamps or permissions. An existing destination
    that cannot be read is left alone.
    """
    if not destination.exists():
        return True
    source_digest = file_fingerprint(source)
    try:
        destination_digest = file_fingerprint(destination)
    except OSError as e:
        logger.warning(f"Cannot fingerprint {destination}, left unchanged: {e}")
        return False
    return source_digest != destination_digest


def copy_if_changed(source: Path, destination: Path, context: RunContext) -> bool:
    """
    Copy source over destination when their contents differ.
    
    Args:
        source: Existing source file
        destination: Target file path (may not exist yet)
        context: Run context (dry-run skips the write)
    
    Returns:
        True if the file changed (or would change in dry-run)
    
    Raises:
        FileSyncError: If reading or writing fails
    """
    try:
        if not needs_copy(source, destination):
            logger.debug(f"[same] {destination}")
            return False

        if context.dry_run:
            logger.info(f"[dry-run] would copy {source} → {destination}")
            return True

        ensure_dir(destination.parent, context)
        shutil.copyfile(source, destination)
        logger.info(f"[copy] {source} → {destination}")
        return True
    except OSError as e:
        raise FileSyncError(f"Failed to copy {source} → {destination}: {e}") from e


# ============================================================
# Tree Sync Logic
# ============================================================

def sync_tree(source_root: Path, destination_root: Path, context: RunContext) -> int:
    """
    Mirror a whole directory tree, copying only changed files.
    
    Every directory under source_root gets a counterpart under
    destination_root first, then each file is copied if changed.
    
    Returns:
        Number of files changed
    """
    ensure_dir(destination_root, context)

    for directory in sorted(p for p in source_root.rglob("*") if p.is_dir()):
        ensure_dir(destination_root / directory.relative_to(source_root), context)

    changed = 0
    for file in sorted(p for p in source_root.rglob("*") if p.is_file()):
        if copy_if_changed(file, destination_root / file.relative_to(source_root), context):
            changed += 1
    return changed


def sync_directory(
    source_root: Path,
    destination_root: Path,
    selection: Optional[SyncSelection] = None,
    context: Optional[RunContext] = None,
) -> int:
    """
    Sync source_root into destination_root.
    
    Args:
        source_root: Directory to copy from
        destination_root: Directory to copy into
        selection: Optional allow-list of files or folders (whole tree when empty)
        context: Run context, apply mode when omitted
    
    Returns:
        Number of files changed (or that would change in dry-run)
    """
    selection = selection or SyncSelection()
    context = context or RunContext()

    if not source_root.is_dir():
        logger.warning(f"Source directory not found, nothing to sync: {source_root}")
        return 0

    if selection.is_whole_tree:
        return sync_tree(source_root, destination_root, context)

    changed = 0

    for name in selection.files:
        source = source_root / name
        if not source.is_file():
            logger.warning(f"File not found in source, skipped: {name}")
            continue
        if copy_if_changed(source, destination_root / name, context):
            changed += 1

    for name in selection.folders:
        source = source_root / name
        if not source.is_dir():
            logger.warning(f"Folder not found in source, skipped: {name}")
            continue
        changed += sync_tree(source, destination_root / name, context)

    return changed
