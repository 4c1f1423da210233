"""
Editor version gate
"""
import re
from typing import Optional

from packaging.version import InvalidVersion, Version

from ...core.constants import MIN_EDITOR_VERSION
from ...core.exceptions import VersionError
from ...core.logging import get_logger

logger = get_logger(__name__)

_VERSION_RE = re.compile(r"\d+(?:\.\d+)+")


def parse_editor_version(raw: str) -> Optional[Version]:
    """Extract the first dotted version number from raw probe output"""
    match = _VERSION_RE.search(raw or "")
    if not match:
        return None
    try:
        return Version(match.group(0))
    except InvalidVersion:
        return None


def check_editor_version(raw: Optional[str], minimum: str = MIN_EDITOR_VERSION) -> bool:
    """
    Gate on the installed editor version.
    
    An editor that cannot report its version is assumed compatible and
    only triggers a warning. A detected version below minimum is fatal.
    
    Args:
        raw: Probe output, None when unavailable
        minimum: Lowest supported version
    
    Returns:
        True if the version was detected and accepted, False if skipped
    
    Raises:
        VersionError: If the detected version is below minimum
    """
    if raw is None:
        logger.warning("Could not detect the editor version, skipping version check")
        return False

    version = parse_editor_version(raw)
    if version is None:
        logger.warning(f"Unrecognized editor version '{raw}', skipping version check")
        return False

    if version < Version(minimum):
        raise VersionError(
            f"Editor version {version} is older than the required {minimum}; "
            f"update the editor and retry"
        )

    logger.debug(f"Editor version {version} satisfies >= {minimum}")
    return True
