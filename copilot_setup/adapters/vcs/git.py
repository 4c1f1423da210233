"""
Git-backed remote fetcher
"""
import shutil
import subprocess
from pathlib import Path
from typing import List

from ...core.constants import REQUIRED_VCS_TOOL
from ...core.exceptions import FetchError, ToolNotFoundError
from ...core.interfaces import RemoteFetcher
from ...core.logging import get_logger

logger = get_logger(__name__)


class GitFetcher(RemoteFetcher):
    """Shallow-clone a single branch of a git repository"""

    def __init__(self, executable: str = REQUIRED_VCS_TOOL):
        self.executable = executable

    def ensure_available(self) -> None:
        """
        Check that git is on PATH.
        
        Raises:
            ToolNotFoundError: If git is not installed
        """
        if shutil.which(self.executable) is None:
            raise ToolNotFoundError(
                f"'{self.executable}' is required but was not found on PATH; "
                f"install it and retry"
            )

    def build_clone_command(self, url: str, ref: str, destination: Path) -> List[str]:
        return [
            self.executable,
            "clone",
            "--depth", "1",
            "--single-branch",
            "--branch", ref,
            url,
            str(destination),
        ]

    def fetch(self, url: str, ref: str, destination: Path) -> None:
        """
        Clone url at ref into destination.
        
        Raises:
            FetchError: If git exits non-zero (auth failure, unknown ref, network)
        """
        cmd = self.build_clone_command(url, ref, destination)
        logger.debug(f"[git] {' '.join(cmd)}")
        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise ToolNotFoundError(f"'{self.executable}' could not be executed: {e}") from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or e.stdout or "").strip() or f"exit code {e.returncode}"
            raise FetchError(f"Failed to clone {url} ({ref}): {detail}") from e
        logger.info(f"[fetch] {url} ({ref}) → {destination}")
