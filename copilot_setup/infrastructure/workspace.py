"""
Temporary workspace holding the fetched asset tree
"""
import os
import shutil
import stat
import sys
import tempfile
from pathlib import Path
from typing import Optional

from ..core.constants import TEMP_DIR_PREFIX
from ..core.logging import get_logger

logger = get_logger(__name__)


def _clear_readonly(func, path, _exc) -> None:
    """rmtree error handler: drop the read-only bit (git object files on Windows) and retry"""
    os.chmod(path, stat.S_IWRITE | stat.S_IREAD)
    func(path)


def remove_tree(path: Path) -> None:
    """Remove a directory tree, including read-only files"""
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_clear_readonly)
    else:
        shutil.rmtree(path, onerror=_clear_readonly)


class TempWorkspace:
    """
    Run-owned temporary directory.
    
    Created on enter and removed on exit unless keep is set. A failed
    removal is logged as a warning and never raised.
    
    Example:
        with TempWorkspace(keep=False) as root:
            fetcher.fetch(url, ref, root / "repo")
    """

    def __init__(self, keep: bool = False, prefix: str = TEMP_DIR_PREFIX, base_dir: Optional[Path] = None):
        self.keep = keep
        self.prefix = prefix
        self.base_dir = base_dir
        self.path: Optional[Path] = None

    def __enter__(self) -> Path:
        self.path = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.base_dir))
        logger.debug(f"[tmp] created {self.path}")
        return self.path

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def cleanup(self) -> bool:
        """
        Remove the workspace directory.
        
        Returns:
            True if the directory is gone afterwards
        """
        if self.path is None:
            return True
        if self.keep:
            logger.info(f"Keeping temporary directory: {self.path}")
            return False
        try:
            remove_tree(self.path)
        except OSError as e:
            logger.warning(f"Failed to remove temporary directory {self.path}: {e}")
            return False
        logger.debug(f"[tmp] removed {self.path}")
        return True
