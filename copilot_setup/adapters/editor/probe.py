"""
Installed editor version probe
"""
import shutil
import subprocess
from typing import Optional

from ...core.constants import EDITOR_COMMANDS
from ...core.interfaces import VersionProbe
from ...core.logging import get_logger

logger = get_logger(__name__)


class EditorVersionProbe(VersionProbe):
    """Ask the editor's command-line launcher for its version"""

    def __init__(self, timeout: float = 30):
        self.timeout = timeout

    def probe(self, channel: str) -> Optional[str]:
        """
        Run `<launcher> --version` and return the first output line.
        
        Returns:
            Version string, or None when the launcher is missing or fails
        """
        command = EDITOR_COMMANDS.get(getattr(channel, "value", channel))
        if command is None:
            return None

        executable = shutil.which(command)
        if executable is None:
            logger.debug(f"Editor launcher not found on PATH: {command}")
            return None

        try:
            result = subprocess.run(
                [executable, "--version"],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.debug(f"Editor version probe failed: {e}")
            return None

        if result.returncode != 0:
            return None

        lines = result.stdout.strip().splitlines()
        return lines[0].strip() if lines else None
